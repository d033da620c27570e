"""
Fórmulas de frete por modalidade.

Todas seguem: peso_kg * FATOR_PESO + distancia_km * fator_distancia + taxa_fixa
"""
from __future__ import annotations

from decimal import Decimal, Inexact, localcontext
from typing import Callable

from app.api.frete.contracts.frete_contract import IFreteStrategy
from app.api.frete.exceptions import FreteParametrosInvalidosError
from app.api.frete.models.frete_parametros import FreteParametros
from app.api.frete.schemas.schema_frete_enums import ModalidadeFreteEnum

FATOR_PESO = Decimal("0.5")
FATOR_DISTANCIA_NORMAL = Decimal("0.1")
FATOR_DISTANCIA_EXPRESSA = Decimal("1.0")
FATOR_DISTANCIA_AGENDADA = Decimal("0.5")

# Dígitos significativos do cálculo; resultado que não caiba aqui é rejeitado
PRECISAO_CALCULO = 1000


def _linear(parametros: FreteParametros, fator_distancia: Decimal) -> Decimal:
    with localcontext() as ctx:
        ctx.prec = PRECISAO_CALCULO
        ctx.traps[Inexact] = True
        try:
            return (
                parametros.peso_kg * FATOR_PESO
                + parametros.distancia_km * fator_distancia
                + parametros.taxa_fixa
            )
        except Inexact:
            raise FreteParametrosInvalidosError(
                "Parâmetros de frete exigem precisão acima do suportado.", None, parametros
            )


def calcular_frete_normal(parametros: FreteParametros) -> Decimal:
    return _linear(parametros, FATOR_DISTANCIA_NORMAL)


def calcular_frete_expressa(parametros: FreteParametros) -> Decimal:
    return _linear(parametros, FATOR_DISTANCIA_EXPRESSA)


def calcular_frete_agendada(parametros: FreteParametros) -> Decimal:
    return _linear(parametros, FATOR_DISTANCIA_AGENDADA)


class FreteStrategy(IFreteStrategy):
    """Estratégia sem estado: associa uma modalidade à sua fórmula."""

    def __init__(self, modalidade: ModalidadeFreteEnum, calcular: Callable[[FreteParametros], Decimal]):
        self.modalidade = modalidade
        self._calcular = calcular

    def calcular_frete(self, parametros: FreteParametros) -> Decimal:
        return self._calcular(parametros)

    def __repr__(self) -> str:
        return f"FreteStrategy({self.modalidade.value})"


NORMAL = FreteStrategy(ModalidadeFreteEnum.NORMAL, calcular_frete_normal)
EXPRESSA = FreteStrategy(ModalidadeFreteEnum.EXPRESSA, calcular_frete_expressa)
AGENDADA = FreteStrategy(ModalidadeFreteEnum.AGENDADA, calcular_frete_agendada)
