# brdocs/domain/boleto/linha_digitavel.py
#
# Bank slip (boleto) digitable line validation.
#
# The 47-digit line is three fields, each closed by a modulo-10 digit, then
# the general check digit and the due-date factor + amount:
#
#   AAABC.CCCCX  DDDDD.DDDDDY  EEEEE.EEEEEZ  K  UUUUVVVVVVVVVV
#
# The 44-digit barcode is rebuilt as bank/currency + K + factor/amount + the
# three fields without their modulo-10 digits; K is the modulo-11 digit of
# the barcode without position 4.
from __future__ import annotations

from brdocs.domain.checksum.weighted import digitos_de, modulo_10, modulo_11_boleto
from brdocs.domain.formatacao import only_digits

TAMANHO_LINHA = 47
POSICAO_DV_GERAL = 4

# (inicio, fim) do campo e indice do seu digito modulo 10
_CAMPOS_MODULO_10: tuple[tuple[int, int, int], ...] = (
    (0, 9, 9),
    (10, 20, 20),
    (21, 31, 31),
)

# Fatias da linha, na ordem do codigo de barras
_LINHA_PARA_CODIGO: tuple[tuple[int, int], ...] = (
    (0, 4),
    (32, 47),
    (4, 9),
    (10, 20),
    (21, 31),
)


def to_codigo_barras(linha: str) -> str | None:
    """Rebuild the 44-digit barcode from a digitable line (punctuation allowed)."""
    linha = only_digits(linha)
    if len(linha) != TAMANHO_LINHA:
        return None
    return "".join(linha[inicio:fim] for inicio, fim in _LINHA_PARA_CODIGO)


def _campos_validos(linha: str) -> bool:
    return all(
        modulo_10(digitos_de(linha[inicio:fim])) == int(linha[indice])
        for inicio, fim, indice in _CAMPOS_MODULO_10
    )


def _dv_geral_valido(codigo: str) -> bool:
    sem_dv = codigo[:POSICAO_DV_GERAL] + codigo[POSICAO_DV_GERAL + 1:]
    return modulo_11_boleto(digitos_de(sem_dv)) == int(codigo[POSICAO_DV_GERAL])


def validate(linha: str) -> bool:
    """Validate a digitable line; spaces and dots are ignored."""
    codigo = to_codigo_barras(linha)
    if codigo is None:
        return False
    return _campos_validos(only_digits(linha)) and _dv_geral_valido(codigo)
