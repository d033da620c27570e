from decimal import Decimal
from uuid import uuid4

import pytest
from fastapi.testclient import TestClient

from app.main import app
from app.api.pedidos.repositories.repo_pedidos_memoria import PedidoMemoriaRepository
from app.api.pedidos.services.dependencies import get_pedido_repository


@pytest.fixture
def client():
    # Repositório novo por teste
    repo = PedidoMemoriaRepository()
    app.dependency_overrides[get_pedido_repository] = lambda: repo
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


def _payload(**kwargs):
    dados = {
        "cliente_id": str(uuid4()),
        "modalidade": "NORMAL",
        "peso_kg": 5,
        "distancia_km": 10,
        "taxa_fixa": 2,
    }
    dados.update(kwargs)
    return dados


def test_criar_pedido_retorna_201_e_location(client):
    payload = _payload()
    resp = client.post("/api/pedidos", json=payload)
    assert resp.status_code == 201, resp.text
    body = resp.json()
    assert body["cliente_id"] == payload["cliente_id"]
    assert body["modalidade"] == "NORMAL"
    assert Decimal(str(body["valor_frete"])) == Decimal("5.5")
    assert resp.headers["location"].endswith(f"/api/pedidos/{body['id']}")


@pytest.mark.parametrize(
    "modalidade,taxa,esperado",
    [("NORMAL", 2, "5.5"), ("EXPRESSA", 5, "17.5"), ("AGENDADA", 10, "17.5")],
)
def test_calculo_por_modalidade(client, modalidade, taxa, esperado):
    resp = client.post("/api/pedidos", json=_payload(modalidade=modalidade, taxa_fixa=taxa))
    assert resp.status_code == 201, resp.text
    assert Decimal(str(resp.json()["valor_frete"])) == Decimal(esperado)


def test_buscar_pedido_criado(client):
    criado = client.post("/api/pedidos", json=_payload()).json()
    resp = client.get(f"/api/pedidos/{criado['id']}")
    assert resp.status_code == 200
    assert resp.json() == criado


def test_buscar_inexistente_retorna_404(client):
    pid = uuid4()
    resp = client.get(f"/api/pedidos/{pid}")
    assert resp.status_code == 404
    body = resp.json()
    assert body["status"] == 404
    assert str(pid) in body["error"]


def test_listar_pedidos(client):
    assert client.get("/api/pedidos").json() == []
    client.post("/api/pedidos", json=_payload())
    client.post("/api/pedidos", json=_payload(modalidade="EXPRESSA"))
    resp = client.get("/api/pedidos")
    assert resp.status_code == 200
    assert len(resp.json()) == 2


def test_atualizar_pedido(client):
    criado = client.post("/api/pedidos", json=_payload()).json()
    resp = client.put(
        f"/api/pedidos/{criado['id']}",
        json={"modalidade": "AGENDADA", "peso_kg": 5, "distancia_km": 10, "taxa_fixa": 10},
    )
    assert resp.status_code == 200, resp.text
    body = resp.json()
    assert body["id"] == criado["id"]
    assert body["cliente_id"] == criado["cliente_id"]
    assert body["modalidade"] == "AGENDADA"
    assert Decimal(str(body["valor_frete"])) == Decimal("17.5")


def test_atualizar_inexistente_retorna_404(client):
    resp = client.put(
        f"/api/pedidos/{uuid4()}",
        json={"modalidade": "NORMAL", "peso_kg": 1, "distancia_km": 1, "taxa_fixa": 0},
    )
    assert resp.status_code == 404
    assert client.get("/api/pedidos").json() == []


def test_remover_pedido(client):
    criado = client.post("/api/pedidos", json=_payload()).json()
    resp = client.delete(f"/api/pedidos/{criado['id']}")
    assert resp.status_code == 204
    assert resp.content == b""
    assert client.get(f"/api/pedidos/{criado['id']}").status_code == 404
    assert client.delete(f"/api/pedidos/{criado['id']}").status_code == 404


@pytest.mark.parametrize(
    "campo,valor",
    [("peso_kg", 0), ("distancia_km", -1), ("taxa_fixa", -0.5)],
)
def test_parametros_invalidos_retornam_400(client, campo, valor):
    resp = client.post("/api/pedidos", json=_payload(**{campo: valor}))
    assert resp.status_code == 400
    assert resp.json()["details"] == campo
    assert client.get("/api/pedidos").json() == []


def test_cliente_vazio_retorna_400(client):
    resp = client.post("/api/pedidos", json=_payload(cliente_id="00000000-0000-0000-0000-000000000000"))
    assert resp.status_code == 400
    assert resp.json()["details"] == "cliente_id"


def test_modalidade_desconhecida_retorna_400(client):
    resp = client.post("/api/pedidos", json=_payload(modalidade="URGENTE"))
    assert resp.status_code == 400
    assert resp.json()["error"] == "Requisição inválida."


def test_id_malformado_retorna_400(client):
    assert client.get("/api/pedidos/nao-e-uuid").status_code == 400


def test_health_e_metricas(client):
    assert client.get("/health").json() == {"status": "healthy"}
    client.post("/api/pedidos", json=_payload())
    resp = client.get("/api/monitoring/metrics")
    assert resp.status_code == 200
    assert "fretes_calculados_total" in resp.text


def test_rota_inexistente_retorna_error_response(client):
    resp = client.get("/api/nao-existe")
    assert resp.status_code == 404
    assert resp.json() == {"error": "Not Found", "status": 404, "details": None}


def test_metodo_nao_permitido_retorna_error_response(client):
    resp = client.patch("/api/pedidos")
    assert resp.status_code == 405
    assert resp.json()["status"] == 405
