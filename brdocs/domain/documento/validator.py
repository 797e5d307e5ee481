# brdocs/domain/documento/validator.py
#
# Check-digit validation for the numeric documents described in spec.py.
#
# Design decisions:
#   - Input is expected already stripped of punctuation (see
#     brdocs.domain.formatacao). Anything else simply fails validation:
#     malformed identifiers are routine input, so nothing here raises for them.
#   - Check digits are recomputed one at a time over the prefix built so far,
#     never read back from the input, so corrupting the first check digit also
#     invalidates the second.
#
# Invariants:
#   - validar(tipo, x) is True only if len(x) == spec.tamanho, x is all ASCII
#     digits, x is not blacklisted and every check digit matches.
from __future__ import annotations

from brdocs.domain.checksum.weighted import calcular_digito, digitos_de, soma_ponderada

from .enums import UFS_RESTO_ZERO_UM, TipoDocumento
from .spec import DigitoVerificador, DocumentSpec, get_spec


def _so_digitos(valor: str) -> bool:
    return valor.isascii() and valor.isdigit()


def _calcular_digito(spec: DocumentSpec, dv: DigitoVerificador, prefixo: str) -> int:
    janela = digitos_de(prefixo[dv.inicio:dv.inicio + len(dv.pesos)])
    if spec.tipo is TipoDocumento.TITULO_ELEITOR and prefixo[8:10] in UFS_RESTO_ZERO_UM:
        if soma_ponderada(janela, dv.pesos) % spec.modulo == 0:
            return 1
    return calcular_digito(janela, dv.pesos, spec.regra, spec.modulo)


def calcular_digitos(tipo: TipoDocumento | str, base: str) -> str:
    """Check digits for a base number, in order.

    Args:
        tipo: Document type.
        base: Digit string of exactly ``spec.tamanho_base`` characters.

    Returns:
        The check digits as a string (one or two characters).

    Raises:
        ValueError: if ``base`` has the wrong length or is not all digits.
    """
    spec = get_spec(tipo)
    if len(base) != spec.tamanho_base or not _so_digitos(base):
        raise ValueError(
            f"{spec.tipo}: base deve ter {spec.tamanho_base} digitos, recebido {base!r}"
        )
    prefixo = base
    for dv in spec.digitos:
        prefixo += str(_calcular_digito(spec, dv, prefixo))
    return prefixo[spec.tamanho_base:]


def validar(tipo: TipoDocumento | str, digitos: str) -> bool:
    """Validate a clean digit string against its document's check digits."""
    spec = get_spec(tipo)
    if len(digitos) != spec.tamanho or not _so_digitos(digitos):
        return False
    if digitos in spec.lista_negra:
        return False
    prefixo = digitos[:spec.tamanho_base]
    for i, dv in enumerate(spec.digitos):
        esperado = _calcular_digito(spec, dv, prefixo)
        if int(digitos[spec.tamanho_base + i]) != esperado:
            return False
        prefixo += digitos[spec.tamanho_base + i]
    return True


def validate_cpf(cpf: str) -> bool:
    return validar(TipoDocumento.CPF, cpf)


def validate_cnpj(cnpj: str) -> bool:
    return validar(TipoDocumento.CNPJ, cnpj)


def validate_pis(pis: str) -> bool:
    return validar(TipoDocumento.PIS, pis)


def validate_renavam(renavam: str) -> bool:
    return validar(TipoDocumento.RENAVAM, renavam)


def validate_cnh(cnh: str) -> bool:
    return validar(TipoDocumento.CNH, cnh)


def validate_titulo_eleitor(titulo: str) -> bool:
    """Validate a voter ID.

    The state code (the two digits before the check digits) must be 01..28.
    SP (01) and MG (02) also issue 13-digit numbers with a ninth sequential
    digit; that digit is not covered by the check digits.
    """
    if not _so_digitos(titulo):
        return False
    if len(titulo) == 13:
        if titulo[-4:-2] not in UFS_RESTO_ZERO_UM:
            return False
        titulo = titulo[:8] + titulo[9:]
    if len(titulo) != 12 or not 1 <= int(titulo[8:10]) <= 28:
        return False
    return validar(TipoDocumento.TITULO_ELEITOR, titulo)
