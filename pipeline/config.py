# pipeline/config.py
#
# Batch validation configuration loaded from environment variables.
#
# Design decisions:
#   - Frozen dataclass + python-dotenv, same as the API settings.
#   - Paths default to pipeline/data relative to this file, so a fresh
#     checkout works without any environment.
#
# Invariants:
#   - csv_separator is exactly one character.
#   - raw_dir / staging_dir are derived from data_dir, never configured apart.
from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

_PIPELINE_DIR = Path(__file__).parent


@dataclass(frozen=True)
class PipelineConfig:
    """Immutable pipeline configuration."""

    data_dir: Path
    csv_separator: str = ";"
    csv_encoding: str = "utf8"

    @property
    def raw_dir(self) -> Path:
        """Directory holding the input CSV files."""
        return self.data_dir / "raw"

    @property
    def staging_dir(self) -> Path:
        """Directory for the validated Parquet files."""
        return self.data_dir / "staging"


def load_config() -> PipelineConfig:
    """Build PipelineConfig from environment variables.

    Raises:
        ValueError: if PIPELINE_CSV_SEPARATOR is not a single character, or
            PIPELINE_CSV_ENCODING is not one Polars can read.
    """
    separator = os.environ.get("PIPELINE_CSV_SEPARATOR", ";")
    if len(separator) != 1:
        raise ValueError(
            f"PIPELINE_CSV_SEPARATOR deve ter exatamente 1 caractere, recebido {separator!r}"
        )

    encoding = os.environ.get("PIPELINE_CSV_ENCODING", "utf8")
    if encoding not in ("utf8", "utf8-lossy"):
        raise ValueError(
            f"PIPELINE_CSV_ENCODING deve ser 'utf8' ou 'utf8-lossy', recebido {encoding!r}"
        )

    data_dir = Path(os.environ.get("PIPELINE_DATA_DIR", str(_PIPELINE_DIR / "data")))
    return PipelineConfig(data_dir=data_dir, csv_separator=separator, csv_encoding=encoding)
