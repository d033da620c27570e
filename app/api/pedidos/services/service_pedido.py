from __future__ import annotations

from decimal import Decimal
from typing import Any, List, Optional
from uuid import UUID, uuid4

from app.api.frete.contracts.frete_contract import IFreteStrategyResolver
from app.api.frete.models.frete_parametros import FreteParametros
from app.api.frete.schemas.schema_frete_enums import ModalidadeFreteEnum
from app.api.frete.services.service_frete_resolver import FreteStrategyResolver, normalizar_modalidade
from app.api.pedidos.contracts.pedido_repository_contract import IPedidoRepository
from app.api.pedidos.exceptions import PedidoNaoEncontradoError
from app.api.pedidos.models.model_pedido import Pedido, id_vazio
from app.core.exceptions import ArgumentoInvalidoError
from app.utils.logger import logger
from app.utils.prometheus_metrics import record_frete


class PedidoService:
    """Orquestra validação, cálculo de frete e persistência de pedidos."""

    def __init__(
        self,
        repo: IPedidoRepository,
        resolver: IFreteStrategyResolver | None = None,
    ):
        self.repo = repo
        self.resolver: IFreteStrategyResolver = resolver or FreteStrategyResolver()

    # -------- Escrita --------
    def criar_pedido(
        self,
        cliente_id: UUID,
        modalidade: ModalidadeFreteEnum,
        peso_kg: Decimal,
        distancia_km: Decimal,
        taxa_fixa: Decimal,
    ) -> Pedido:
        if id_vazio(cliente_id):
            raise ArgumentoInvalidoError("O ID do cliente não pode ser vazio.", "cliente_id")

        valor = self._calcular_frete(modalidade, peso_kg, distancia_km, taxa_fixa)
        pedido = Pedido(
            id=uuid4(),
            cliente_id=cliente_id,
            valor_frete=valor,
            modalidade=modalidade,
        )
        self.repo.adicionar(pedido)
        logger.info(
            "[PedidoService] Pedido criado | id=%s cliente=%s modalidade=%s valor=%s",
            pedido.id, pedido.cliente_id, pedido.modalidade.value, pedido.valor_frete,
        )
        return pedido

    def atualizar_pedido(
        self,
        pedido_id: UUID,
        modalidade: ModalidadeFreteEnum,
        peso_kg: Decimal,
        distancia_km: Decimal,
        taxa_fixa: Decimal,
    ) -> Pedido:
        self._validar_id(pedido_id)

        existente = self.repo.obter_por_id(pedido_id)
        if existente is None:
            raise PedidoNaoEncontradoError(pedido_id)

        valor = self._calcular_frete(modalidade, peso_kg, distancia_km, taxa_fixa)
        atualizado = existente.com_valor_frete(valor).com_modalidade(normalizar_modalidade(modalidade))
        self.repo.atualizar(atualizado)
        logger.info(
            "[PedidoService] Pedido atualizado | id=%s modalidade=%s valor=%s",
            atualizado.id, atualizado.modalidade.value, atualizado.valor_frete,
        )
        return atualizado

    def remover_pedido(self, pedido_id: UUID) -> None:
        self._validar_id(pedido_id)
        self.repo.remover(pedido_id)
        logger.info("[PedidoService] Pedido removido | id=%s", pedido_id)

    # -------- Consultas --------
    def obter_pedido(self, pedido_id: UUID) -> Optional[Pedido]:
        self._validar_id(pedido_id)
        return self.repo.obter_por_id(pedido_id)

    def listar_pedidos(self) -> List[Pedido]:
        return self.repo.listar_todos()

    # -------- Helpers --------
    @staticmethod
    def _validar_id(pedido_id: Any) -> None:
        if id_vazio(pedido_id):
            raise ArgumentoInvalidoError("O ID do pedido não pode ser vazio.", "pedido_id")

    def _calcular_frete(
        self,
        modalidade: Any,
        peso_kg: Decimal,
        distancia_km: Decimal,
        taxa_fixa: Decimal,
    ) -> Decimal:
        # Parâmetros são validados antes da modalidade, como no fluxo original
        parametros = FreteParametros(peso_kg=peso_kg, distancia_km=distancia_km, taxa_fixa=taxa_fixa)
        estrategia = self.resolver.resolver(modalidade)
        valor = estrategia.calcular_frete(parametros)
        record_frete(normalizar_modalidade(modalidade).value)
        return valor
