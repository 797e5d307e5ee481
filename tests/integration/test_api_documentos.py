# tests/integration/test_api_documentos.py
from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from brdocs.domain.documento.validator import validar


def test_validar_cpf_formatado(client: TestClient) -> None:
    response = client.get("/api/documentos/cpf/validar", params={"valor": "111.444.777-35"})
    assert response.status_code == 200
    data = response.json()
    assert data == {
        "tipo": "cpf",
        "entrada": "111.444.777-35",
        "valido": True,
        "formatado": "111.444.777-35",
    }


def test_validar_cnpj_invalido(client: TestClient) -> None:
    response = client.get("/api/documentos/cnpj/validar", params={"valor": "00111222000133"})
    assert response.status_code == 200
    data = response.json()
    assert data["valido"] is False
    assert data["formatado"] is None


def test_validar_tipo_maiusculo(client: TestClient) -> None:
    response = client.get("/api/documentos/PIS/validar", params={"valor": "12345678900"})
    assert response.status_code == 200
    assert response.json()["formatado"] == "123.45678.90-0"


def test_validar_renavam_sem_mascara(client: TestClient) -> None:
    response = client.get("/api/documentos/renavam/validar", params={"valor": "86769597308"})
    assert response.json()["formatado"] == "86769597308"


def test_tipo_desconhecido(client: TestClient) -> None:
    response = client.get("/api/documentos/rg/validar", params={"valor": "123"})
    assert response.status_code == 404


def test_valor_obrigatorio(client: TestClient) -> None:
    response = client.get("/api/documentos/cpf/validar")
    assert response.status_code == 422


@pytest.mark.parametrize("tipo", ["cpf", "cnpj", "pis", "renavam", "cnh", "titulo_eleitor"])
def test_gerar_valido(client: TestClient, tipo: str) -> None:
    response = client.get(f"/api/documentos/{tipo}/gerar")
    assert response.status_code == 200
    data = response.json()
    assert data["tipo"] == tipo
    assert validar(tipo, data["valor"])  # type: ignore[arg-type]
    assert data["formatado"]


def test_gerar_cnpj_filial(client: TestClient) -> None:
    response = client.get("/api/documentos/cnpj/gerar", params={"filial": 12})
    assert response.json()["valor"][8:12] == "0012"


def test_gerar_titulo_por_uf(client: TestClient) -> None:
    response = client.get("/api/documentos/titulo_eleitor/gerar", params={"uf": "sp"})
    assert response.status_code == 200
    assert response.json()["valor"][8:10] == "01"


def test_gerar_titulo_uf_desconhecida(client: TestClient) -> None:
    response = client.get("/api/documentos/titulo_eleitor/gerar", params={"uf": "XX"})
    assert response.status_code == 422
    assert "UF desconhecida" in response.json()["detail"]


def test_security_headers(client: TestClient) -> None:
    response = client.get("/api/documentos/cpf/gerar")
    assert response.headers["X-Content-Type-Options"] == "nosniff"
    assert response.headers["X-Frame-Options"] == "DENY"


def test_validar_com_letras_e_invalido(client: TestClient) -> None:
    response = client.get("/api/documentos/cpf/validar", params={"valor": "111A444B777C35"})
    assert response.status_code == 200
    assert response.json()["valido"] is False
