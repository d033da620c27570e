"""
Exceções de domínio compartilhadas entre os bounded contexts.

As camadas de domínio/serviço lançam estas exceções; o mapeamento para
respostas HTTP fica em `app.core.exception_handlers`.
"""
from __future__ import annotations

from typing import Optional


class DomainException(Exception):
    """Base para todas as falhas de regra de negócio."""

    def __init__(self, mensagem: str):
        super().__init__(mensagem)
        self.mensagem = mensagem


class ArgumentoInvalidoError(DomainException):
    """Identificador obrigatório vazio ou ausente."""

    def __init__(self, mensagem: str, campo: Optional[str] = None):
        super().__init__(mensagem)
        self.campo = campo
