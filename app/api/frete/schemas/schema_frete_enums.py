from enum import Enum


class ModalidadeFreteEnum(str, Enum):
    """Modalidade de entrega escolhida para o pedido."""
    NORMAL = "NORMAL"
    EXPRESSA = "EXPRESSA"
    AGENDADA = "AGENDADA"
