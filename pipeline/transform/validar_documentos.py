# pipeline/transform/validar_documentos.py
#
# Column-level validation of identifier numbers in a DataFrame.
#
# Design decisions:
#   - Invalid rows are flagged, never dropped: the output keeps every input
#     row and adds <coluna>_valido (Boolean) and <coluna>_formatado (Utf8).
#   - map_elements calls the same domain functions the API uses. Throughput
#     is bounded by file I/O for the table sizes this pipeline targets.
#   - Null inputs yield _valido = False and _formatado = null.
#
# Invariants:
#   - validar_coluna never mutates its input and preserves row order.
#   - <coluna>_formatado is non-null exactly where <coluna>_valido is True.
from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

import polars as pl

from brdocs.domain.boleto import linha_digitavel
from brdocs.domain.documento import validator
from brdocs.domain.documento.enums import TipoDocumento
from brdocs.domain.formatacao import (
    format_cnpj,
    format_cpf,
    format_pis,
    format_titulo_eleitor,
    only_digits,
    remove_symbols,
)
from brdocs.domain.placa import transcoder
from brdocs.domain.processo import numero_unico


@dataclass(frozen=True)
class RegraColuna:
    limpar: Callable[[str], str]
    validar: Callable[[str], bool]
    formatar: Callable[[str], str | None]


def _sem_mascara(validar: Callable[[str], bool]) -> Callable[[str], str | None]:
    return lambda valor: valor if validar(valor) else None


def _limpar_placa(valor: str) -> str:
    return remove_symbols(valor, "- ").upper()


REGRAS: dict[str, RegraColuna] = {
    TipoDocumento.CPF: RegraColuna(remove_symbols, validator.validate_cpf, format_cpf),
    TipoDocumento.CNPJ: RegraColuna(remove_symbols, validator.validate_cnpj, format_cnpj),
    TipoDocumento.PIS: RegraColuna(remove_symbols, validator.validate_pis, format_pis),
    TipoDocumento.RENAVAM: RegraColuna(
        remove_symbols, validator.validate_renavam, _sem_mascara(validator.validate_renavam)
    ),
    TipoDocumento.CNH: RegraColuna(
        remove_symbols, validator.validate_cnh, _sem_mascara(validator.validate_cnh)
    ),
    TipoDocumento.TITULO_ELEITOR: RegraColuna(
        remove_symbols,
        validator.validate_titulo_eleitor,
        lambda v: format_titulo_eleitor(v) or _sem_mascara(validator.validate_titulo_eleitor)(v),
    ),
    "placa": RegraColuna(_limpar_placa, transcoder.is_valid, transcoder.format_placa),
    "processo": RegraColuna(
        numero_unico.clean,
        numero_unico.validate,
        lambda v: numero_unico.format_processo(v) if numero_unico.validate(v) else None,
    ),
    "boleto": RegraColuna(
        only_digits, linha_digitavel.validate, _sem_mascara(linha_digitavel.validate)
    ),
}


def validar_coluna(df: pl.DataFrame, coluna: str, tipo: str) -> pl.DataFrame:
    """Add validity and formatted columns for one identifier column.

    Args:
        df:     Input DataFrame containing *coluna* as Utf8.
        coluna: Name of the column holding raw identifiers (any punctuation).
        tipo:   One of the TipoDocumento values, "placa", "processo" or "boleto".

    Returns:
        New DataFrame with ``<coluna>_valido`` and ``<coluna>_formatado``.

    Raises:
        ValueError: for an unknown *tipo*.
        polars.exceptions.ColumnNotFoundError: if *coluna* is missing.
    """
    regra = REGRAS.get(tipo)
    if regra is None:
        raise ValueError(f"Tipo de coluna desconhecido: {tipo!r}. Use um de {sorted(REGRAS)}")

    limpo = pl.col(coluna).map_elements(regra.limpar, return_dtype=pl.Utf8)
    return df.with_columns(
        limpo.map_elements(regra.validar, return_dtype=pl.Boolean)
        .fill_null(False)
        .alias(f"{coluna}_valido"),
        limpo.map_elements(regra.formatar, return_dtype=pl.Utf8).alias(f"{coluna}_formatado"),
    )


def contar_validos(df: pl.DataFrame, coluna: str) -> tuple[int, int]:
    """(validos, invalidos) for a column already passed through validar_coluna."""
    flags = df[f"{coluna}_valido"]
    validos = int(flags.sum())
    return validos, len(flags) - validos
