# pipeline/log.py
#
# Progress lines for batch validation runs.
#
# run_pipeline reports each input file, the valid/invalid count per validated
# column and each Parquet file written. Every line carries the time elapsed
# since the pipeline package was imported, e.g.
#
#   [brdocs 00:03] Validando clientes.csv...
#   [brdocs 00:03]   cpf (cpf): 1,203 validos, 17 invalidos
#
# Output goes to stdout, flushed per line, so counts show up while a long
# file is still being processed.
from __future__ import annotations

import sys
import time

_inicio = time.monotonic()


def _decorrido() -> str:
    minutos, segundos = divmod(int(time.monotonic() - _inicio), 60)
    return f"{minutos:02d}:{segundos:02d}"


def log(mensagem: str) -> None:
    sys.stdout.write(f"[brdocs {_decorrido()}] {mensagem}\n")
    sys.stdout.flush()
