# tests/domain/test_processo.py
from __future__ import annotations

import random
from datetime import date

import pytest

from brdocs.domain.processo.numero_unico import (
    TRIBUNAIS_POR_SEGMENTO,
    NumeroProcesso,
    format_processo,
    generate,
    validate,
)

VALIDOS = ["10188748220234018200", "45532346920234025107"]


@pytest.mark.parametrize("numero", VALIDOS)
def test_validos(numero: str) -> None:
    assert validate(numero)


def test_valido_com_pontuacao() -> None:
    assert validate("1018874-82.2023.4.01.8200")


def test_digitos_errados() -> None:
    assert not validate("10188748320234018200")


def test_tribunal_fora_do_segmento() -> None:
    # segmento 1 (STF) so aceita tribunal 00
    assert not validate("10188748220231018200")


@pytest.mark.parametrize("numero", ["", "123", "1018874822023401820", "1018874822023401820a"])
def test_comprimento_ou_caracteres_invalidos(numero: str) -> None:
    assert not validate(numero)


def test_parse() -> None:
    partes = NumeroProcesso.parse("10188748220234018200")
    assert partes is not None
    assert partes.sequencial == "1018874"
    assert partes.digitos == "82"
    assert partes.ano == "2023"
    assert partes.segmento == "4"
    assert partes.tribunal == "01"
    assert partes.origem == "8200"
    assert partes.base == "101887420234018200"
    assert str(partes) == "10188748220234018200"


def test_format_processo() -> None:
    assert format_processo("10188748220234018200") == "1018874-82.2023.4.01.8200"
    assert format_processo("123") is None


def test_generate_valida() -> None:
    rng = random.Random(3)
    for _ in range(2_000):
        numero = generate(rng=rng)
        assert numero is not None
        assert validate(numero), numero


def test_generate_campos_fixos() -> None:
    ano = date.today().year
    numero = generate(ano=ano, segmento=8, tribunal=26, origem=100)
    assert numero is not None
    assert numero[9:13] == str(ano)
    assert numero[13] == "8"
    assert numero[14:16] == "26"
    assert numero[16:] == "0100"
    assert validate(numero)


@pytest.mark.parametrize("segmento", sorted(TRIBUNAIS_POR_SEGMENTO))
def test_generate_por_segmento(segmento: int) -> None:
    for _ in range(50):
        numero = generate(segmento=segmento)
        assert numero is not None
        assert validate(numero)


@pytest.mark.parametrize(
    "kwargs",
    [
        {"ano": 2000},
        {"ano": 10000},
        {"segmento": 0},
        {"segmento": 10},
        {"segmento": 4, "tribunal": 7},
        {"segmento": 9, "tribunal": 1},
        {"origem": -1},
        {"origem": 10000},
    ],
)
def test_generate_restricao_impossivel(kwargs: dict[str, int]) -> None:
    assert generate(**kwargs) is None
