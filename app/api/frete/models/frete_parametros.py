from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Any

from app.api.frete.exceptions import FreteParametrosInvalidosError


def _to_decimal(valor: Any, campo: str) -> Decimal:
    """Converte para Decimal sem passar por float binário."""
    if isinstance(valor, bool) or valor is None:
        raise FreteParametrosInvalidosError(f"Valor inválido para {campo}: {valor!r}", campo, valor)
    if isinstance(valor, Decimal):
        convertido = valor
    else:
        try:
            convertido = Decimal(str(valor))
        except (InvalidOperation, ValueError):
            raise FreteParametrosInvalidosError(f"Valor inválido para {campo}: {valor!r}", campo, valor)
    if not convertido.is_finite():
        raise FreteParametrosInvalidosError(f"Valor inválido para {campo}: {valor!r}", campo, valor)
    return convertido


@dataclass(frozen=True)
class FreteParametros:
    """
    Value Object com os dados usados no cálculo do frete.

    - peso_kg > 0
    - distancia_km > 0
    - taxa_fixa >= 0
    """
    peso_kg: Decimal
    distancia_km: Decimal
    taxa_fixa: Decimal

    def __post_init__(self):
        peso = _to_decimal(self.peso_kg, "peso_kg")
        distancia = _to_decimal(self.distancia_km, "distancia_km")
        taxa = _to_decimal(self.taxa_fixa, "taxa_fixa")

        if peso <= 0:
            raise FreteParametrosInvalidosError("O peso deve ser maior que zero.", "peso_kg", peso)
        if distancia <= 0:
            raise FreteParametrosInvalidosError("A distância deve ser maior que zero.", "distancia_km", distancia)
        if taxa < 0:
            raise FreteParametrosInvalidosError("A taxa fixa não pode ser negativa.", "taxa_fixa", taxa)

        # frozen: normaliza os campos via object.__setattr__
        object.__setattr__(self, "peso_kg", peso)
        object.__setattr__(self, "distancia_km", distancia)
        object.__setattr__(self, "taxa_fixa", taxa)
