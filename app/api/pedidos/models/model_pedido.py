from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from decimal import Decimal
from typing import Any
from uuid import UUID

from app.api.frete.schemas.schema_frete_enums import ModalidadeFreteEnum
from app.api.frete.services.service_frete_resolver import normalizar_modalidade
from app.core.exceptions import ArgumentoInvalidoError

UUID_VAZIO = UUID(int=0)


def id_vazio(valor: Any) -> bool:
    """None, string vazia e o UUID nulo contam como identificador vazio."""
    if valor is None:
        return True
    if isinstance(valor, UUID):
        return valor == UUID_VAZIO
    return not str(valor).strip()


@dataclass(frozen=True)
class Pedido:
    """
    Pedido de frete armazenado.

    Imutável: `com_valor_frete` e `com_modalidade` devolvem uma nova instância
    com o mesmo `id` e `cliente_id`.
    """
    id: UUID
    cliente_id: UUID
    valor_frete: Decimal
    modalidade: ModalidadeFreteEnum

    def __post_init__(self):
        if id_vazio(self.id):
            raise ArgumentoInvalidoError("O ID do pedido não pode ser vazio.", "id")
        if id_vazio(self.cliente_id):
            raise ArgumentoInvalidoError("O ID do cliente não pode ser vazio.", "cliente_id")
        if self.valor_frete < 0:
            raise ArgumentoInvalidoError("O valor do frete não pode ser negativo.", "valor_frete")
        object.__setattr__(self, "modalidade", normalizar_modalidade(self.modalidade))

    def com_valor_frete(self, novo_valor: Decimal) -> "Pedido":
        return dataclasses.replace(self, valor_frete=novo_valor)

    def com_modalidade(self, nova_modalidade: ModalidadeFreteEnum) -> "Pedido":
        return dataclasses.replace(self, modalidade=nova_modalidade)
