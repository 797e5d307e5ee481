# pipeline/sources/tabela/parse.py
#
# Parse delimited text files whose columns hold identifier numbers.
#
# Design decisions:
#   - Every column is read as Utf8 (infer_schema_length=0): CPFs, CNPJs and
#     RENAVAMs routinely start with zeros that numeric inference would drop.
#   - Values are stripped of surrounding whitespace; empty strings become null.
from __future__ import annotations

from pathlib import Path

import polars as pl


def parse_tabela(path: Path, separator: str = ";", encoding: str = "utf8") -> pl.DataFrame:
    """Read a CSV file with every column as string.

    Raises:
        FileNotFoundError: if ``path`` does not exist.
    """
    if not path.exists():
        raise FileNotFoundError(f"Arquivo de entrada nao encontrado: {path}")

    df = pl.read_csv(
        path,
        separator=separator,
        encoding=encoding,  # type: ignore[arg-type]
        infer_schema_length=0,
    )
    return df.with_columns(
        pl.when(pl.col(c).str.strip_chars() == "")
        .then(None)
        .otherwise(pl.col(c).str.strip_chars())
        .alias(c)
        for c in df.columns
    )
