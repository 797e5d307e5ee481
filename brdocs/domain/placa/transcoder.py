# brdocs/domain/placa/transcoder.py
#
# Legacy (LLLNNNN) <-> Mercosul (LLLNLNN) license plate conversion.
#
# Design decisions:
#   - Shape checks are positional character-class checks, not regexes: the
#     two formats differ only at index 4 (digit vs letter), so they are
#     mutually exclusive by construction.
#   - Only ASCII letters and digits count; "Ç" or full-width digits fail.
#   - Input is upper-cased and surrounding whitespace stripped before any
#     check; a hyphen is NOT removed here (callers use remove_symbols).
#   - Mercosul -> legacy is partial: only letters A..J at index 4 map back.
#
# Invariants:
#   - legacy_to_mercosul(p) is None or a 7-char Mercosul plate.
#   - mercosul_to_legacy(legacy_to_mercosul(p)) == p.upper() for legacy p.
from __future__ import annotations

import random
import string
from enum import StrEnum

from brdocs.domain.formatacao import remove_symbols

_LETRAS = string.ascii_uppercase
_DIGITOS = string.digits
_POSICAO_CONVERTIDA = 4


class FormatoPlaca(StrEnum):
    ANTIGO = "LLLNNNN"
    MERCOSUL = "LLLNLNN"
    INVALIDO = "INVALIDO"


def _letra(c: str) -> bool:
    return c in _LETRAS


def _digito(c: str) -> bool:
    return c in _DIGITOS


def _normalizar(placa: str) -> str:
    return placa.strip().upper()


def _tem_forma(placa: str, formato: FormatoPlaca) -> bool:
    if len(placa) != 7:
        return False
    for c, classe in zip(placa, formato.value):
        if classe == "L" and not _letra(c):
            return False
        if classe == "N" and not _digito(c):
            return False
    return True


def detect_format(placa: str) -> FormatoPlaca:
    """Classify a plate as ANTIGO, MERCOSUL or INVALIDO."""
    placa = _normalizar(placa)
    for formato in (FormatoPlaca.ANTIGO, FormatoPlaca.MERCOSUL):
        if _tem_forma(placa, formato):
            return formato
    return FormatoPlaca.INVALIDO


def is_valid(placa: str, formato: FormatoPlaca | None = None) -> bool:
    detectado = detect_format(placa)
    if formato is None:
        return detectado is not FormatoPlaca.INVALIDO
    return detectado is formato


def digito_para_letra(digito: str) -> str:
    """0 -> A, 1 -> B, ..., 9 -> J"""
    return _LETRAS[int(digito)]


def letra_para_digito(letra: str) -> str | None:
    """Inverse of digito_para_letra; None outside A..J."""
    indice = _LETRAS.find(letra)
    if not 0 <= indice <= 9:
        return None
    return str(indice)


def legacy_to_mercosul(placa: str) -> str | None:
    """Convert a legacy plate to Mercosul, e.g. ABC1234 -> ABC1C34.

    Returns None if the input is not exactly a legacy plate.
    """
    placa = _normalizar(placa)
    if not _tem_forma(placa, FormatoPlaca.ANTIGO):
        return None
    i = _POSICAO_CONVERTIDA
    return placa[:i] + digito_para_letra(placa[i]) + placa[i + 1:]


convert_to_mercosul = legacy_to_mercosul


def mercosul_to_legacy(placa: str) -> str | None:
    """Convert a Mercosul plate back to legacy, e.g. ABC1C34 -> ABC1234.

    Returns None for non-Mercosul input or a letter outside A..J at index 4.
    """
    placa = _normalizar(placa)
    if not _tem_forma(placa, FormatoPlaca.MERCOSUL):
        return None
    i = _POSICAO_CONVERTIDA
    digito = letra_para_digito(placa[i])
    if digito is None:
        return None
    return placa[:i] + digito + placa[i + 1:]


def format_placa(placa: str) -> str | None:
    """Legacy plates as LLL-NNNN, Mercosul unchanged, both upper case."""
    placa = _normalizar(remove_symbols(placa, "-"))
    formato = detect_format(placa)
    if formato is FormatoPlaca.ANTIGO:
        return f"{placa[:3]}-{placa[3:]}"
    if formato is FormatoPlaca.MERCOSUL:
        return placa
    return None


def generate(
    formato: FormatoPlaca = FormatoPlaca.MERCOSUL,
    rng: random.Random | None = None,
) -> str:
    """Random plate in the requested format.

    Raises:
        ValueError: for FormatoPlaca.INVALIDO.
    """
    if formato is FormatoPlaca.INVALIDO:
        raise ValueError("Formato de placa invalido para geracao")
    rng = rng or random.Random()
    return "".join(
        rng.choice(_LETRAS) if classe == "L" else rng.choice(_DIGITOS)
        for classe in formato.value
    )
