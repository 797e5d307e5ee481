# tests/pipeline/test_validar_documentos.py
from __future__ import annotations

import polars as pl
import pytest

from pipeline.transform.validar_documentos import REGRAS, contar_validos, validar_coluna


def test_cpf_valido_invalido_e_nulo() -> None:
    df = pl.DataFrame({"cpf": ["111.444.777-35", "11144477700", None, "529.982.247-25"]})

    result = validar_coluna(df, "cpf", "cpf")

    assert result["cpf_valido"].to_list() == [True, False, False, True]
    assert result["cpf_formatado"].to_list() == [
        "111.444.777-35",
        None,
        None,
        "529.982.247-25",
    ]


def test_preserva_linhas_e_colunas_originais() -> None:
    df = pl.DataFrame({"id": [1, 2, 3], "cnpj": ["11222333000181", "x", "00111222000133"]})

    result = validar_coluna(df, "cnpj", "cnpj")

    assert result["id"].to_list() == [1, 2, 3]
    assert result["cnpj"].to_list() == df["cnpj"].to_list()
    assert result["cnpj_valido"].to_list() == [True, False, False]
    assert "cnpj_valido" not in df.columns


def test_renavam_sem_mascara() -> None:
    df = pl.DataFrame({"renavam": ["86769597308", "86769597309"]})

    result = validar_coluna(df, "renavam", "renavam")

    assert result["renavam_formatado"].to_list() == ["86769597308", None]


def test_placa() -> None:
    df = pl.DataFrame({"placa": ["abc-1234", "ABC1C34", "ABC12"]})

    result = validar_coluna(df, "placa", "placa")

    assert result["placa_valido"].to_list() == [True, True, False]
    assert result["placa_formatado"].to_list() == ["ABC-1234", "ABC1C34", None]


def test_processo() -> None:
    df = pl.DataFrame({"processo": ["1018874-82.2023.4.01.8200", "10188748320234018200"]})

    result = validar_coluna(df, "processo", "processo")

    assert result["processo_valido"].to_list() == [True, False]
    assert result["processo_formatado"][0] == "1018874-82.2023.4.01.8200"


def test_titulo_eleitor_13_digitos_sem_mascara() -> None:
    df = pl.DataFrame({"titulo": ["690847092828", "0000000050116"]})

    result = validar_coluna(df, "titulo", "titulo_eleitor")

    assert result["titulo_formatado"].to_list() == ["6908 4709 28 28", "0000000050116"]


def test_tipo_desconhecido() -> None:
    df = pl.DataFrame({"x": ["1"]})
    with pytest.raises(ValueError, match="Tipo de coluna desconhecido"):
        validar_coluna(df, "x", "cep")


def test_coluna_ausente() -> None:
    df = pl.DataFrame({"x": ["1"]})
    with pytest.raises(pl.exceptions.ColumnNotFoundError):
        validar_coluna(df, "cpf", "cpf")


def test_contar_validos() -> None:
    df = pl.DataFrame({"pis": ["12345678900", "12345678901", None]})

    result = validar_coluna(df, "pis", "pis")

    assert contar_validos(result, "pis") == (1, 2)


def test_regras_cobrem_todos_os_tipos() -> None:
    assert {"cpf", "cnpj", "pis", "renavam", "cnh", "titulo_eleitor"} <= set(REGRAS)
    assert {"placa", "processo", "boleto"} <= set(REGRAS)


def test_letras_invalidam_documento() -> None:
    df = pl.DataFrame({"cpf": ["CPF 111x444y777z35", "111A444B777C35", "111.444.777-35"]})

    result = validar_coluna(df, "cpf", "cpf")

    assert result["cpf_valido"].to_list() == [False, False, True]
    assert result["cpf_formatado"].to_list() == [None, None, "111.444.777-35"]
