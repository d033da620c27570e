"""
Contract (Interface) de persistência de pedidos.
O serviço depende apenas desta interface; a implementação padrão é em memória.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from app.api.pedidos.models.model_pedido import Pedido


class IPedidoRepository(ABC):
    """Contrato de armazenamento de pedidos indexado pelo ID."""

    @abstractmethod
    def adicionar(self, pedido: Pedido) -> None:
        """Insere um pedido. Lança PedidoJaExisteError se o ID já existir."""
        raise NotImplementedError

    @abstractmethod
    def atualizar(self, pedido: Pedido) -> None:
        """Substitui um pedido existente. Lança PedidoNaoEncontradoError se não existir."""
        raise NotImplementedError

    @abstractmethod
    def remover(self, pedido_id: UUID) -> None:
        """Remove um pedido. Lança PedidoNaoEncontradoError se não existir."""
        raise NotImplementedError

    @abstractmethod
    def obter_por_id(self, pedido_id: UUID) -> Optional[Pedido]:
        """Obtém um pedido por ID, ou None."""
        raise NotImplementedError

    @abstractmethod
    def listar_todos(self) -> List[Pedido]:
        """Retorna uma cópia (snapshot) de todos os pedidos."""
        raise NotImplementedError
