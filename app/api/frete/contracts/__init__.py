"""
Contracts do bounded context de Frete.
"""

from .frete_contract import IFreteStrategy, IFreteStrategyResolver

__all__ = [
    "IFreteStrategy",
    "IFreteStrategyResolver",
]
