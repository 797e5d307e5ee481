# pipeline/main.py
#
# Batch orchestrator: validates identifier columns of CSV files and writes
# the annotated tables to Parquet staging files.
#
# Design decisions:
#   - run_pipeline is the single entry point. It takes a PipelineConfig and a
#     list of jobs; each job names one CSV file under raw_dir and the columns
#     to validate with their document type.
#   - Every job is parsed and validated before anything is written, so a bad
#     job (missing file, unknown type, missing column) leaves staging_dir
#     untouched.
#   - Each step logs progress to stdout through pipeline.log.
from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from pathlib import Path

import polars as pl

from pipeline.config import PipelineConfig
from pipeline.log import log
from pipeline.sources.tabela.parse import parse_tabela
from pipeline.staging.parquet_writer import write_parquet
from pipeline.transform.validar_documentos import contar_validos, validar_coluna


@dataclass(frozen=True)
class JobValidacao:
    """One input file and the identifier columns to check in it.

    ``colunas`` maps column name -> tipo (see validar_documentos.REGRAS).
    """

    arquivo: str
    colunas: Mapping[str, str] = field(default_factory=dict)

    @property
    def nome_saida(self) -> str:
        return f"{Path(self.arquivo).stem}.parquet"


def run_pipeline(config: PipelineConfig, jobs: Sequence[JobValidacao]) -> list[Path]:
    """Validate every job and write one Parquet file per job.

    Args:
        config: Pipeline configuration (paths, CSV dialect).
        jobs:   Files and columns to validate.

    Returns:
        Paths of the written Parquet files, in job order.

    Raises:
        FileNotFoundError: if a job's CSV is missing from raw_dir.
        ValueError: for an unknown column type.
        polars.exceptions.ColumnNotFoundError: if a job names a missing column.
    """
    resultados: list[tuple[JobValidacao, pl.DataFrame]] = []
    for job in jobs:
        log(f"Validando {job.arquivo}...")
        df = parse_tabela(config.raw_dir / job.arquivo, config.csv_separator, config.csv_encoding)
        for coluna, tipo in job.colunas.items():
            df = validar_coluna(df, coluna, tipo)
            validos, invalidos = contar_validos(df, coluna)
            log(f"  {coluna} ({tipo}): {validos:,} validos, {invalidos:,} invalidos")
        resultados.append((job, df))

    config.staging_dir.mkdir(parents=True, exist_ok=True)
    escritos: list[Path] = []
    for job, df in resultados:
        path = write_parquet(df, config.staging_dir / job.nome_saida)
        log(f"  -> {path} ({len(df):,} linhas)")
        escritos.append(path)

    log(f"Pipeline concluido: {len(escritos)} arquivo(s)")
    return escritos
