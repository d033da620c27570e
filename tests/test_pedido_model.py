from decimal import Decimal
from uuid import UUID, uuid4

import pytest

from app.api.frete.exceptions import ModalidadeFreteInvalidaError
from app.api.frete.schemas.schema_frete_enums import ModalidadeFreteEnum
from app.api.pedidos.models.model_pedido import Pedido
from app.core.exceptions import ArgumentoInvalidoError


def _pedido(**kwargs):
    dados = dict(
        id=uuid4(),
        cliente_id=uuid4(),
        valor_frete=Decimal("100"),
        modalidade=ModalidadeFreteEnum.EXPRESSA,
    )
    dados.update(kwargs)
    return Pedido(**dados)


def test_construcao_preserva_campos():
    pid, cid = uuid4(), uuid4()
    pedido = Pedido(id=pid, cliente_id=cid, valor_frete=Decimal("100"), modalidade=ModalidadeFreteEnum.EXPRESSA)
    assert (pedido.id, pedido.cliente_id, pedido.valor_frete, pedido.modalidade) == (
        pid, cid, Decimal("100"), ModalidadeFreteEnum.EXPRESSA
    )


@pytest.mark.parametrize("vazio", [None, UUID(int=0), ""])
def test_id_vazio_e_rejeitado_e_nao_gerado(vazio):
    with pytest.raises(ArgumentoInvalidoError) as exc:
        _pedido(id=vazio)
    assert exc.value.campo == "id"


def test_cliente_vazio_e_rejeitado():
    with pytest.raises(ArgumentoInvalidoError) as exc:
        _pedido(cliente_id=UUID(int=0))
    assert exc.value.campo == "cliente_id"


def test_valor_negativo_e_rejeitado():
    with pytest.raises(ArgumentoInvalidoError) as exc:
        _pedido(valor_frete=Decimal("-0.01"))
    assert exc.value.campo == "valor_frete"


def test_modalidade_invalida_e_rejeitada():
    with pytest.raises(ModalidadeFreteInvalidaError):
        _pedido(modalidade="TELETRANSPORTE")


def test_com_valor_frete_retorna_nova_instancia():
    original = _pedido()
    atualizado = original.com_valor_frete(Decimal("50.5"))
    assert atualizado is not original
    assert atualizado.valor_frete == Decimal("50.5")
    assert original.valor_frete == Decimal("100")
    assert (atualizado.id, atualizado.cliente_id) == (original.id, original.cliente_id)


def test_com_valor_frete_negativo_falha():
    with pytest.raises(ArgumentoInvalidoError):
        _pedido().com_valor_frete(Decimal("-1"))


def test_com_modalidade_retorna_nova_instancia():
    original = _pedido(modalidade=ModalidadeFreteEnum.NORMAL)
    atualizado = original.com_modalidade(ModalidadeFreteEnum.AGENDADA)
    assert atualizado.modalidade == ModalidadeFreteEnum.AGENDADA
    assert original.modalidade == ModalidadeFreteEnum.NORMAL
    assert atualizado.id == original.id


def test_pedido_e_imutavel():
    with pytest.raises(AttributeError):
        _pedido().valor_frete = Decimal("1")
