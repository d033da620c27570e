from __future__ import annotations

from typing import Any, Optional

from app.core.exceptions import DomainException


class FreteParametrosInvalidosError(DomainException):
    """Peso, distância ou taxa fixa fora da faixa permitida."""

    def __init__(self, mensagem: str, campo: Optional[str] = None, valor: Any = None):
        super().__init__(mensagem)
        self.campo = campo
        self.valor = valor


class ModalidadeFreteInvalidaError(DomainException):
    """Modalidade fora do conjunto NORMAL / EXPRESSA / AGENDADA."""

    def __init__(self, modalidade: Any):
        super().__init__(f"Modalidade de frete inválida: {modalidade}")
        self.modalidade = modalidade
