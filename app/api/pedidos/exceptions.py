from __future__ import annotations

from typing import Any

from app.core.exceptions import DomainException


class PedidoNaoEncontradoError(DomainException):
    def __init__(self, pedido_id: Any):
        super().__init__(f"Pedido com ID '{pedido_id}' não foi encontrado.")
        self.pedido_id = pedido_id


class PedidoJaExisteError(DomainException):
    def __init__(self, pedido_id: Any):
        super().__init__(f"Pedido com ID '{pedido_id}' já existe.")
        self.pedido_id = pedido_id
