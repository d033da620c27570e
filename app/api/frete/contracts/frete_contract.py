"""
Contracts (interfaces) do cálculo de frete.
Permite que o contexto de Pedidos precifique sem conhecer as fórmulas.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from decimal import Decimal
from typing import Any

from app.api.frete.models.frete_parametros import FreteParametros


class IFreteStrategy(ABC):
    """Cálculo de frete de uma modalidade."""

    @abstractmethod
    def calcular_frete(self, parametros: FreteParametros) -> Decimal:
        """
        Calcula o valor do frete.

        Args:
            parametros: Peso, distância e taxa fixa já validados

        Returns:
            Valor do frete (Decimal, nunca negativo)
        """
        raise NotImplementedError


class IFreteStrategyResolver(ABC):
    """Seleciona a estratégia de frete a partir da modalidade."""

    @abstractmethod
    def resolver(self, modalidade: Any) -> IFreteStrategy:
        """
        Retorna a estratégia da modalidade.

        Raises:
            ModalidadeFreteInvalidaError: modalidade fora do conjunto conhecido
        """
        raise NotImplementedError
