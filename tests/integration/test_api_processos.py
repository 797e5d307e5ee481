# tests/integration/test_api_processos.py
from __future__ import annotations

from fastapi.testclient import TestClient

from brdocs.domain.processo.numero_unico import validate


def test_validar_processo(client: TestClient) -> None:
    response = client.get("/api/processos/validar", params={"valor": "10188748220234018200"})
    assert response.status_code == 200
    data = response.json()
    assert data["valido"] is True
    assert data["formatado"] == "1018874-82.2023.4.01.8200"


def test_validar_processo_invalido(client: TestClient) -> None:
    data = client.get("/api/processos/validar", params={"valor": "10188748320234018200"}).json()
    assert data["valido"] is False
    assert data["formatado"] is None


def test_gerar_processo(client: TestClient) -> None:
    response = client.get("/api/processos/gerar", params={"segmento": 8, "tribunal": 26})
    assert response.status_code == 200
    data = response.json()
    assert validate(data["valor"])
    assert data["valor"][13:16] == "826"
    assert validate(data["formatado"])


def test_gerar_processo_restricao_impossivel(client: TestClient) -> None:
    response = client.get("/api/processos/gerar", params={"segmento": 4, "tribunal": 7})
    assert response.status_code == 422
    response = client.get("/api/processos/gerar", params={"ano": 1999})
    assert response.status_code == 422
