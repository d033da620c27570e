from functools import lru_cache

from fastapi import Depends

from app.api.frete.contracts.frete_contract import IFreteStrategyResolver
from app.api.frete.services.service_frete_resolver import FreteStrategyResolver
from app.api.pedidos.contracts.pedido_repository_contract import IPedidoRepository
from app.api.pedidos.repositories.repo_pedidos_memoria import PedidoMemoriaRepository
from app.api.pedidos.services.service_pedido import PedidoService


@lru_cache(maxsize=1)
def _get_pedido_repository_instance() -> IPedidoRepository:
    """Cria o repositório singleton (vive enquanto o processo viver)."""
    return PedidoMemoriaRepository()


def get_pedido_repository() -> IPedidoRepository:
    """Dependency para obter o repositório de pedidos (singleton)."""
    return _get_pedido_repository_instance()


@lru_cache(maxsize=1)
def _get_frete_resolver_instance() -> IFreteStrategyResolver:
    return FreteStrategyResolver()


def get_frete_resolver() -> IFreteStrategyResolver:
    """Dependency para obter o resolver de estratégias de frete."""
    return _get_frete_resolver_instance()


def get_pedido_service(
    repo: IPedidoRepository = Depends(get_pedido_repository),
    resolver: IFreteStrategyResolver = Depends(get_frete_resolver),
) -> PedidoService:
    return PedidoService(repo, resolver=resolver)
