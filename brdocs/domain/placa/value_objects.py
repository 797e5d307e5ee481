# brdocs/domain/placa/value_objects.py
from __future__ import annotations

from dataclasses import dataclass

from brdocs.domain.formatacao import remove_symbols

from .transcoder import FormatoPlaca, detect_format, legacy_to_mercosul


@dataclass(frozen=True)
class Placa:
    """Placa de veiculo imutavel, antiga ou Mercosul. Guarda sem hifen, maiuscula."""

    _valor: str

    def __init__(self, raw: str) -> None:
        valor = remove_symbols(raw.strip(), "- ").upper()
        if detect_format(valor) is FormatoPlaca.INVALIDO:
            raise ValueError(f"Placa invalida: {raw!r}")
        object.__setattr__(self, "_valor", valor)

    @property
    def valor(self) -> str:
        return self._valor

    @property
    def formato(self) -> FormatoPlaca:
        return detect_format(self._valor)

    @property
    def mercosul(self) -> Placa:
        """Equivalente Mercosul (a propria placa, se ja for Mercosul)."""
        if self.formato is FormatoPlaca.MERCOSUL:
            return self
        return Placa(legacy_to_mercosul(self._valor))  # type: ignore[arg-type]

    def __repr__(self) -> str:
        return f"Placa({self._valor!r})"

    def __str__(self) -> str:
        return self._valor
