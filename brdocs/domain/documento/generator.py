# brdocs/domain/documento/generator.py
#
# Random generation of valid document numbers, for tests and demos.
#
# Design decisions:
#   - Base digits come from a per-thread random.Random: concurrent callers
#     never share generator state. Not cryptographic; these numbers are fake
#     data, not secrets.
#   - Fixed positions (``fixos``) are held constant and every other base
#     position is drawn independently. No cross-field dependency is assumed.
#   - Voter IDs are the exception: positions 8-9 always receive a state code
#     01..28, so every generated voter ID passes validate_titulo_eleitor.
#   - Check digits are appended with validator.calcular_digitos, the same code
#     path the validator uses.
#   - A blacklisted result is redrawn. When no base position is free the
#     result is deterministic, so there is a single candidate and None is
#     returned if it is blacklisted instead of looping.
#
# Invariants:
#   - validar(tipo, gerar(tipo, fixos)) is True whenever gerar returns a str.
from __future__ import annotations

import random
import threading
from collections.abc import Mapping

from .enums import UF_TITULO_ELEITOR, TipoDocumento
from .spec import get_spec
from .validator import calcular_digitos

_local = threading.local()


def _rng_da_thread() -> random.Random:
    rng = getattr(_local, "rng", None)
    if rng is None:
        rng = random.Random()
        _local.rng = rng
    return rng


def _fixar_uf(fixos: dict[int, str], rng: random.Random) -> dict[int, str] | None:
    """Hold positions 8-9 of a voter ID at a real state code (01..28).

    A code is drawn among those agreeing with whatever is already fixed there;
    None if no state code agrees.
    """
    codigos = [
        codigo
        for codigo in sorted(set(UF_TITULO_ELEITOR.values()))
        if all(fixos.get(8 + i, d) == d for i, d in enumerate(codigo))
    ]
    if not codigos:
        return None
    codigo = rng.choice(codigos)
    return {**fixos, 8: codigo[0], 9: codigo[1]}


def gerar(
    tipo: TipoDocumento | str,
    fixos: Mapping[int, str] | None = None,
    rng: random.Random | None = None,
) -> str | None:
    """Generate a valid number for a document type.

    Args:
        tipo:  Document type.
        fixos: Optional base positions (0-based) to hold constant, each mapped
               to a single digit character.
        rng:   Optional random source, for reproducible draws.

    Returns:
        The full digit string including check digits, or None when the fixed
        positions leave no free digit and the only candidate is blacklisted,
        or (voter ID) when fixed positions 8-9 match no state code.

    Raises:
        ValueError: if a fixed position is outside the base or its value is not
            a single digit.
    """
    spec = get_spec(tipo)
    fixos = dict(fixos or {})
    for posicao, digito in fixos.items():
        if not 0 <= posicao < spec.tamanho_base:
            raise ValueError(f"{spec.tipo}: posicao fixa {posicao} fora da base")
        if len(digito) != 1 or not digito.isdigit():
            raise ValueError(f"{spec.tipo}: valor fixo {digito!r} na posicao {posicao}")

    rng = rng or _rng_da_thread()
    if spec.tipo is TipoDocumento.TITULO_ELEITOR:
        com_uf = _fixar_uf(fixos, rng)
        if com_uf is None:
            return None
        fixos = com_uf
    livres = [i for i in range(spec.tamanho_base) if i not in fixos]

    while True:
        base = "".join(
            fixos[i] if i in fixos else str(rng.randrange(10))
            for i in range(spec.tamanho_base)
        )
        numero = base + calcular_digitos(spec.tipo, base)
        if numero not in spec.lista_negra:
            return numero
        if not livres:
            return None


def generate_cpf(rng: random.Random | None = None) -> str:
    return gerar(TipoDocumento.CPF, rng=rng)  # type: ignore[return-value]


def generate_cnpj(filial: int = 1, rng: random.Random | None = None) -> str:
    """Generate a CNPJ for a branch number (defaults to the head office, 0001).

    The branch wraps modulo 10000 and 0 becomes 1.
    """
    filial %= 10000
    if filial == 0:
        filial = 1
    fixos = {8 + i: c for i, c in enumerate(f"{filial:04d}")}
    return gerar(TipoDocumento.CNPJ, fixos, rng)  # type: ignore[return-value]


def generate_pis(rng: random.Random | None = None) -> str:
    return gerar(TipoDocumento.PIS, rng=rng)  # type: ignore[return-value]


def generate_renavam(rng: random.Random | None = None) -> str:
    return gerar(TipoDocumento.RENAVAM, rng=rng)  # type: ignore[return-value]


def generate_cnh(rng: random.Random | None = None) -> str:
    return gerar(TipoDocumento.CNH, rng=rng)  # type: ignore[return-value]


def generate_titulo_eleitor(uf: str = "ZZ", rng: random.Random | None = None) -> str | None:
    """Generate a 12-digit voter ID for a state (UF), or None for an unknown UF."""
    codigo = UF_TITULO_ELEITOR.get(uf.upper())
    if codigo is None:
        return None
    return gerar(TipoDocumento.TITULO_ELEITOR, {8: codigo[0], 9: codigo[1]}, rng)
