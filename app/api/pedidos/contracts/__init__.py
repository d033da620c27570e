"""
Contracts do bounded context de Pedidos.
"""

from .pedido_repository_contract import IPedidoRepository

__all__ = [
    "IPedidoRepository",
]
