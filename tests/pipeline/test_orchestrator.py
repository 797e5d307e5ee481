# tests/pipeline/test_orchestrator.py
#
# Smoke tests for the pipeline orchestrator (main.py): CSV in raw_dir ->
# validated Parquet in staging_dir.
from __future__ import annotations

import re
from pathlib import Path

import polars as pl
import pytest

from pipeline.config import PipelineConfig, load_config
from pipeline.main import JobValidacao, run_pipeline
from pipeline.sources.tabela.parse import parse_tabela
from pipeline.staging.parquet_writer import read_parquet


def _write_raw(config: PipelineConfig, nome: str, conteudo: str) -> Path:
    config.raw_dir.mkdir(parents=True, exist_ok=True)
    path = config.raw_dir / nome
    path.write_text(conteudo, encoding="utf-8")
    return path


def test_pipeline_escreve_parquet(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    config = PipelineConfig(data_dir=tmp_path)
    _write_raw(
        config,
        "clientes.csv",
        "nome;cpf;placa\n"
        "Ana;111.444.777-35;ABC-1234\n"
        "Bia;00000000000;ABC1C34\n"
        "Caio; ;XYZ\n",
    )

    paths = run_pipeline(
        config, [JobValidacao("clientes.csv", {"cpf": "cpf", "placa": "placa"})]
    )

    assert paths == [config.staging_dir / "clientes.parquet"]
    df = read_parquet(paths[0])
    assert df["cpf_valido"].to_list() == [True, False, False]
    assert df["placa_valido"].to_list() == [True, True, False]
    assert df["cpf_formatado"][0] == "111.444.777-35"

    saida = capsys.readouterr().out
    assert "[brdocs " in saida
    assert "cpf (cpf): 1 validos, 2 invalidos" in saida
    assert "Pipeline concluido: 1 arquivo(s)" in saida


def test_pipeline_job_invalido_nao_escreve_nada(tmp_path: Path) -> None:
    config = PipelineConfig(data_dir=tmp_path)
    _write_raw(config, "a.csv", "cpf\n11144477735\n")
    _write_raw(config, "b.csv", "cpf\n11144477735\n")

    with pytest.raises(ValueError):
        run_pipeline(
            config,
            [JobValidacao("a.csv", {"cpf": "cpf"}), JobValidacao("b.csv", {"cpf": "cep"})],
        )

    assert not config.staging_dir.exists()


def test_pipeline_arquivo_ausente(tmp_path: Path) -> None:
    config = PipelineConfig(data_dir=tmp_path)
    with pytest.raises(FileNotFoundError):
        run_pipeline(config, [JobValidacao("nao_existe.csv", {"cpf": "cpf"})])


def test_parse_tabela_mantem_zeros_a_esquerda(tmp_path: Path) -> None:
    path = tmp_path / "t.csv"
    path.write_text("renavam,obs\n01234567897,  x \n98765432103,\n", encoding="utf-8")

    df = parse_tabela(path, separator=",")

    assert df.schema["renavam"] == pl.Utf8
    assert df["renavam"].to_list() == ["01234567897", "98765432103"]
    assert df["obs"].to_list() == ["x", None]


def test_load_config_padrao(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("PIPELINE_DATA_DIR", str(tmp_path))
    monkeypatch.delenv("PIPELINE_CSV_SEPARATOR", raising=False)
    monkeypatch.delenv("PIPELINE_CSV_ENCODING", raising=False)

    config = load_config()

    assert config.data_dir == tmp_path
    assert config.raw_dir == tmp_path / "raw"
    assert config.staging_dir == tmp_path / "staging"
    assert config.csv_separator == ";"
    assert config.csv_encoding == "utf8"


def test_load_config_separador_invalido(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PIPELINE_CSV_SEPARATOR", ";;")
    with pytest.raises(ValueError, match="PIPELINE_CSV_SEPARATOR"):
        load_config()


def test_load_config_encoding_invalido(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("PIPELINE_CSV_SEPARATOR", raising=False)
    monkeypatch.setenv("PIPELINE_CSV_ENCODING", "latin1")
    with pytest.raises(ValueError, match="PIPELINE_CSV_ENCODING"):
        load_config()


def test_log_prefixo_com_tempo_decorrido(capsys: pytest.CaptureFixture[str]) -> None:
    from pipeline.log import log

    log("Validando x.csv...")

    saida = capsys.readouterr().out
    assert re.fullmatch(r"\[brdocs \d{2}:\d{2}\] Validando x\.csv\.\.\.\n", saida)
