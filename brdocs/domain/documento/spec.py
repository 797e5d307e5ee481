# brdocs/domain/documento/spec.py
#
# Per-document check-digit configuration.
#
# Design decisions:
#   - One frozen DocumentSpec per TipoDocumento, looked up in ESPECIFICACOES.
#     Validator and generator read the same record, so a generated number is
#     always accepted by the validator.
#   - Each check digit carries its own weight table and the window of the
#     prefix (base digits + earlier check digits) it applies to. This covers
#     the chained CPF/CNPJ scheme and the voter ID, whose second digit covers
#     only the state code and the first check digit.
#   - RENAVAM weights are written left to right (the usual statement of the
#     algorithm reverses the base and applies 2..9,2,3).
#
# Invariants:
#   - For every spec, each DigitoVerificador window lies inside the prefix
#     available when that digit is computed.
#   - tamanho == tamanho_base + len(digitos).
from __future__ import annotations

from dataclasses import dataclass

from brdocs.domain.checksum.weighted import RegraResto

from .enums import TipoDocumento


@dataclass(frozen=True)
class DigitoVerificador:
    """Weight table for one check digit, applied to prefix[inicio:inicio+len(pesos)]."""

    pesos: tuple[int, ...]
    inicio: int = 0

    def __post_init__(self) -> None:
        if not self.pesos or any(p <= 0 for p in self.pesos):
            raise ValueError("Pesos devem ser inteiros positivos")


@dataclass(frozen=True)
class DocumentSpec:
    tipo: TipoDocumento
    tamanho: int
    digitos: tuple[DigitoVerificador, ...]
    regra: RegraResto = RegraResto.COMPLEMENTO_11
    modulo: int = 11

    def __post_init__(self) -> None:
        for i, dv in enumerate(self.digitos):
            if dv.inicio + len(dv.pesos) > self.tamanho_base + i:
                raise ValueError(
                    f"{self.tipo}: janela do digito {i + 1} excede o prefixo disponivel"
                )

    @property
    def tamanho_base(self) -> int:
        return self.tamanho - len(self.digitos)

    @property
    def lista_negra(self) -> frozenset[str]:
        """All-identical sequences: well formed, always rejected."""
        return frozenset(str(d) * self.tamanho for d in range(10))


ESPECIFICACOES: dict[TipoDocumento, DocumentSpec] = {
    TipoDocumento.CPF: DocumentSpec(
        tipo=TipoDocumento.CPF,
        tamanho=11,
        digitos=(
            DigitoVerificador((10, 9, 8, 7, 6, 5, 4, 3, 2)),
            DigitoVerificador((11, 10, 9, 8, 7, 6, 5, 4, 3, 2)),
        ),
    ),
    TipoDocumento.CNPJ: DocumentSpec(
        tipo=TipoDocumento.CNPJ,
        tamanho=14,
        digitos=(
            DigitoVerificador((5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2)),
            DigitoVerificador((6, 5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2)),
        ),
    ),
    TipoDocumento.PIS: DocumentSpec(
        tipo=TipoDocumento.PIS,
        tamanho=11,
        digitos=(DigitoVerificador((3, 2, 9, 8, 7, 6, 5, 4, 3, 2)),),
    ),
    TipoDocumento.RENAVAM: DocumentSpec(
        tipo=TipoDocumento.RENAVAM,
        tamanho=11,
        digitos=(DigitoVerificador((3, 2, 9, 8, 7, 6, 5, 4, 3, 2)),),
    ),
    TipoDocumento.CNH: DocumentSpec(
        tipo=TipoDocumento.CNH,
        tamanho=11,
        digitos=(
            DigitoVerificador((9, 8, 7, 6, 5, 4, 3, 2, 1)),
            DigitoVerificador((1, 2, 3, 4, 5, 6, 7, 8, 9)),
        ),
        regra=RegraResto.RESTO,
    ),
    # 8 digitos sequenciais + 2 de UF + 2 verificadores
    TipoDocumento.TITULO_ELEITOR: DocumentSpec(
        tipo=TipoDocumento.TITULO_ELEITOR,
        tamanho=12,
        digitos=(
            DigitoVerificador((2, 3, 4, 5, 6, 7, 8, 9)),
            DigitoVerificador((7, 8, 9), inicio=8),
        ),
        regra=RegraResto.RESTO,
    ),
}


def get_spec(tipo: TipoDocumento | str) -> DocumentSpec:
    """Spec for a document type; accepts the enum or its string value.

    Raises:
        ValueError: for an unknown document type.
    """
    return ESPECIFICACOES[TipoDocumento(tipo)]
