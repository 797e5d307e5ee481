# pipeline/staging/parquet_writer.py
#
# Parquet persistence for validated tables.
#
# Design decisions:
#   - Thin wrappers around Polars I/O; the rest of the pipeline never calls
#     polars for file I/O directly.
#   - write_parquet creates parent directories.
from __future__ import annotations

from pathlib import Path

import polars as pl


def write_parquet(df: pl.DataFrame, path: Path) -> Path:
    """Write a validated DataFrame, creating parent directories as needed.

    Returns:
        ``path``, for call-chain convenience.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    df.write_parquet(path)
    return path


def read_parquet(path: Path) -> pl.DataFrame:
    """Read a staging Parquet file.

    Raises:
        FileNotFoundError: if ``path`` does not exist (raised by Polars).
    """
    return pl.read_parquet(path)
