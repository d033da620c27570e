from __future__ import annotations

from typing import Any, Dict, Mapping, Optional

from app.api.frete.contracts.frete_contract import IFreteStrategy, IFreteStrategyResolver
from app.api.frete.exceptions import ModalidadeFreteInvalidaError
from app.api.frete.schemas.schema_frete_enums import ModalidadeFreteEnum
from app.api.frete.strategies import strategies_frete


ESTRATEGIAS_PADRAO: Dict[ModalidadeFreteEnum, IFreteStrategy] = {
    ModalidadeFreteEnum.NORMAL: strategies_frete.NORMAL,
    ModalidadeFreteEnum.EXPRESSA: strategies_frete.EXPRESSA,
    ModalidadeFreteEnum.AGENDADA: strategies_frete.AGENDADA,
}


def normalizar_modalidade(modalidade: Any) -> ModalidadeFreteEnum:
    """Converte valor bruto (enum ou string) para ModalidadeFreteEnum."""
    if isinstance(modalidade, ModalidadeFreteEnum):
        return modalidade
    try:
        return ModalidadeFreteEnum(modalidade)
    except (ValueError, TypeError):
        raise ModalidadeFreteInvalidaError(modalidade)


class FreteStrategyResolver(IFreteStrategyResolver):
    """Resolve a estratégia de frete por tabela indexada pela modalidade."""

    def __init__(self, estrategias: Optional[Mapping[ModalidadeFreteEnum, IFreteStrategy]] = None):
        self._estrategias = dict(estrategias if estrategias is not None else ESTRATEGIAS_PADRAO)

    def resolver(self, modalidade: Any) -> IFreteStrategy:
        chave = normalizar_modalidade(modalidade)
        estrategia = self._estrategias.get(chave)
        if estrategia is None:
            raise ModalidadeFreteInvalidaError(modalidade)
        return estrategia
