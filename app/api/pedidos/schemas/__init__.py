"""
Schemas do bounded context de Pedidos
"""

from app.api.pedidos.schemas.schema_pedido import (
    PedidoCreateRequest,
    PedidoUpdateRequest,
    PedidoResponse,
    ErrorResponse,
)

__all__ = [
    "PedidoCreateRequest",
    "PedidoUpdateRequest",
    "PedidoResponse",
    "ErrorResponse",
]
