"""
Schemas do bounded context de Frete
"""

from app.api.frete.schemas.schema_frete_enums import ModalidadeFreteEnum

__all__ = [
    "ModalidadeFreteEnum",
]
