# brdocs/domain/checksum/weighted.py
#
# Weighted-sum check-digit engine shared by every document type.
#
# Design decisions:
#   - Every function is pure and takes plain digit sequences, so document
#     modules chain calls explicitly (CPF/CNPJ: second digit over base + first).
#   - Mismatched digit/weight lengths are a programming error and raise
#     ValueError. Malformed user input never reaches this module: validators
#     reject it before computing anything.
#   - The remainder-to-digit step is a closed enum (RegraResto) rather than a
#     callable so DocumentSpec records stay hashable and printable.
#
# Invariants:
#   - calcular_digito always returns an int in 0..9.
#   - modulo_97 always returns a two-character string.
from __future__ import annotations

from collections.abc import Sequence
from enum import StrEnum


class RegraResto(StrEnum):
    """Mapping from ``soma % modulo`` to the final check digit."""

    COMPLEMENTO_11 = "complemento_11"  # 0 se resto < 2, senao 11 - resto
    RESTO = "resto"                    # o proprio resto; 10 vira 0


def digitos_de(valor: str) -> list[int]:
    """Convert a digit-only string into a list of ints."""
    return [int(c) for c in valor]


def soma_ponderada(digitos: Sequence[int], pesos: Sequence[int]) -> int:
    """Dot product of digits and weights.

    Raises:
        ValueError: if the sequences differ in length.
    """
    if len(digitos) != len(pesos):
        raise ValueError(
            f"Tabela de pesos incompativel: {len(digitos)} digitos, {len(pesos)} pesos"
        )
    return sum(d * p for d, p in zip(digitos, pesos))


def aplicar_regra(resto: int, regra: RegraResto) -> int:
    if regra is RegraResto.COMPLEMENTO_11:
        return 0 if resto < 2 else 11 - resto
    return 0 if resto == 10 else resto


def calcular_digito(
    digitos: Sequence[int],
    pesos: Sequence[int],
    regra: RegraResto = RegraResto.COMPLEMENTO_11,
    modulo: int = 11,
) -> int:
    """Compute one check digit from a weight table.

    Args:
        digitos: Digits covered by the weight table, left to right.
        pesos:   One positive weight per digit.
        regra:   Remainder-to-digit rule.
        modulo:  Modulus of the reduction (11 for every document in the family).

    Returns:
        The check digit, 0..9.
    """
    resto = soma_ponderada(digitos, pesos) % modulo
    return aplicar_regra(resto, regra)


def pesos_ciclicos(tamanho: int, inicio: int = 2, fim: int = 9) -> tuple[int, ...]:
    """Left-to-right weights for the "2..9 from the right, repeating" scheme."""
    pesos: list[int] = []
    peso = inicio
    for _ in range(tamanho):
        pesos.append(peso)
        peso = peso + 1 if peso < fim else inicio
    return tuple(reversed(pesos))


def modulo_10(digitos: Sequence[int]) -> int:
    """Boleto field check digit (weights 2,1 alternating from the right).

    Products above 9 contribute the sum of their two digits.
    """
    soma = 0
    for i, d in enumerate(reversed(digitos)):
        produto = d * (2 if i % 2 == 0 else 1)
        soma += produto - 9 if produto > 9 else produto
    resto = soma % 10
    return 10 - resto if resto else 0


def modulo_11_boleto(digitos: Sequence[int]) -> int:
    """Boleto general check digit: remainders 0 and 1 map to 1."""
    resto = soma_ponderada(digitos, pesos_ciclicos(len(digitos))) % 11
    return 1 if resto in (0, 1) else 11 - resto


def modulo_97(numero: str) -> str:
    """Two check digits for the CNJ unified process number.

    ``numero`` is the digit string with the check digits removed.
    """
    resto = (int(numero) * 100) % 97
    return f"{97 - resto:02d}"
