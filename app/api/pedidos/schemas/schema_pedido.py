from __future__ import annotations

from decimal import Decimal
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from app.api.frete.schemas.schema_frete_enums import ModalidadeFreteEnum


class PedidoCreateRequest(BaseModel):
    cliente_id: UUID = Field(..., description="ID do cliente dono do pedido")
    modalidade: ModalidadeFreteEnum = Field(..., description="NORMAL, EXPRESSA ou AGENDADA")
    peso_kg: Decimal = Field(..., description="Peso em kg (maior que zero)")
    distancia_km: Decimal = Field(..., description="Distância em km (maior que zero)")
    taxa_fixa: Decimal = Field(..., description="Taxa fixa (zero ou positiva)")

    model_config = ConfigDict(
        extra="forbid",
        json_schema_extra={
            "examples": [
                {
                    "cliente_id": "3fa85f64-5717-4562-b3fc-2c963f66afa6",
                    "modalidade": "NORMAL",
                    "peso_kg": 5,
                    "distancia_km": 10,
                    "taxa_fixa": 2,
                }
            ]
        },
    )


class PedidoUpdateRequest(BaseModel):
    modalidade: ModalidadeFreteEnum
    peso_kg: Decimal
    distancia_km: Decimal
    taxa_fixa: Decimal

    model_config = ConfigDict(extra="forbid")


class PedidoResponse(BaseModel):
    id: UUID
    cliente_id: UUID
    modalidade: ModalidadeFreteEnum
    valor_frete: Decimal

    model_config = ConfigDict(from_attributes=True)


class ErrorResponse(BaseModel):
    error: str
    status: int
    details: Optional[str] = None

    @classmethod
    def not_found(cls, mensagem: str) -> "ErrorResponse":
        return cls(error=mensagem, status=404)

    @classmethod
    def bad_request(cls, mensagem: str, details: Optional[str] = None) -> "ErrorResponse":
        return cls(error=mensagem, status=400, details=details)

    @classmethod
    def conflict(cls, mensagem: str) -> "ErrorResponse":
        return cls(error=mensagem, status=409)

    @classmethod
    def internal_error(cls, mensagem: str = "Um erro interno ocorreu.") -> "ErrorResponse":
        return cls(error=mensagem, status=500)
