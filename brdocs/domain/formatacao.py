# brdocs/domain/formatacao.py
#
# Punctuation stripping and re-insertion for display.
#
# Design decisions:
#   - Formatters only punctuate numbers that validate; anything else returns
#     None, so a formatted string is always a valid document.
#   - Masks use "#" as the digit placeholder; every other mask character is
#     inserted literally.
from __future__ import annotations

from .documento.validator import (
    validate_cnpj,
    validate_cpf,
    validate_pis,
    validate_titulo_eleitor,
)


def remove_symbols(valor: str, simbolos: str = ".-/ ") -> str:
    """Drop every character of ``simbolos`` from ``valor``, keeping the rest."""
    return "".join(c for c in valor if c not in simbolos)


def only_digits(valor: str) -> str:
    return "".join(c for c in valor if c.isascii() and c.isdigit())


def aplicar_mascara(digitos: str, mascara: str) -> str:
    """Insert punctuation at the fixed offsets described by ``mascara``.

    Raises:
        ValueError: if the number of placeholders differs from len(digitos).
    """
    if mascara.count("#") != len(digitos):
        raise ValueError(f"Mascara {mascara!r} exige {mascara.count('#')} digitos")
    it = iter(digitos)
    return "".join(next(it) if c == "#" else c for c in mascara)


def format_cpf(cpf: str) -> str | None:
    """XXX.XXX.XXX-XX"""
    if not validate_cpf(cpf):
        return None
    return aplicar_mascara(cpf, "###.###.###-##")


def format_cnpj(cnpj: str) -> str | None:
    """XX.XXX.XXX/XXXX-XX"""
    if not validate_cnpj(cnpj):
        return None
    return aplicar_mascara(cnpj, "##.###.###/####-##")


def format_pis(pis: str) -> str | None:
    """XXX.XXXXX.XX-X"""
    if not validate_pis(pis):
        return None
    return aplicar_mascara(pis, "###.#####.##-#")


def format_titulo_eleitor(titulo: str) -> str | None:
    """XXXX XXXX XX XX (12-digit numbers only)."""
    if len(titulo) != 12 or not validate_titulo_eleitor(titulo):
        return None
    return aplicar_mascara(titulo, "#### #### ## ##")
