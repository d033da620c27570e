from __future__ import annotations

from threading import Lock
from typing import Dict, List, Optional
from uuid import UUID

from app.api.pedidos.contracts.pedido_repository_contract import IPedidoRepository
from app.api.pedidos.exceptions import PedidoJaExisteError, PedidoNaoEncontradoError
from app.api.pedidos.models.model_pedido import Pedido


class PedidoMemoriaRepository(IPedidoRepository):
    """Repositório de pedidos em memória, seguro para múltiplas threads."""

    def __init__(self):
        self._pedidos: Dict[UUID, Pedido] = {}
        self._lock = Lock()

    def adicionar(self, pedido: Pedido) -> None:
        if pedido is None:
            raise ValueError("pedido é obrigatório")
        with self._lock:
            if pedido.id in self._pedidos:
                raise PedidoJaExisteError(pedido.id)
            self._pedidos[pedido.id] = pedido

    def atualizar(self, pedido: Pedido) -> None:
        if pedido is None:
            raise ValueError("pedido é obrigatório")
        with self._lock:
            if pedido.id not in self._pedidos:
                raise PedidoNaoEncontradoError(pedido.id)
            self._pedidos[pedido.id] = pedido

    def remover(self, pedido_id: UUID) -> None:
        with self._lock:
            if self._pedidos.pop(pedido_id, None) is None:
                raise PedidoNaoEncontradoError(pedido_id)

    def obter_por_id(self, pedido_id: UUID) -> Optional[Pedido]:
        with self._lock:
            return self._pedidos.get(pedido_id)

    def listar_todos(self) -> List[Pedido]:
        with self._lock:
            return list(self._pedidos.values())
