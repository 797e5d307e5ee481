# brdocs/domain/documento/value_objects.py
from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from brdocs.domain.formatacao import aplicar_mascara, remove_symbols

from .enums import TipoDocumento
from .spec import get_spec
from .validator import validar, validate_titulo_eleitor


@dataclass(frozen=True, eq=False)
class _DocumentoNumerico:
    """Base imutavel: aceita pontuacao (. - / espaco), guarda so digitos, valida no construtor."""

    _valor: str
    TIPO: ClassVar[TipoDocumento]
    MASCARA: ClassVar[str | None] = None
    NOME: ClassVar[str]

    def __init__(self, raw: str) -> None:
        digitos = remove_symbols(raw)
        tamanho = get_spec(self.TIPO).tamanho
        if len(digitos) != tamanho:
            raise ValueError(
                f"{self.NOME} invalido: comprimento {len(digitos)}, esperado {tamanho}"
            )
        if len(set(digitos)) == 1:
            raise ValueError(f"{self.NOME} invalido: todos digitos iguais")
        if not self._verificar(digitos):
            raise ValueError(f"{self.NOME} invalido: digitos verificadores incorretos")
        object.__setattr__(self, "_valor", digitos)

    def _verificar(self, digitos: str) -> bool:
        return validar(self.TIPO, digitos)

    @property
    def valor(self) -> str:
        """Digitos sem formatacao."""
        return self._valor

    @property
    def formatado(self) -> str:
        if self.MASCARA is None:
            return self._valor
        return aplicar_mascara(self._valor, self.MASCARA)

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._valor == other._valor  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((self.TIPO, self._valor))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.formatado!r})"

    def __str__(self) -> str:
        return self.formatado


class CPF(_DocumentoNumerico):
    """CPF. NUNCA expoe valor completo em repr/str (LGPD)."""

    TIPO = TipoDocumento.CPF
    MASCARA = "###.###.###-##"
    NOME = "CPF"

    @property
    def mascarado(self) -> str:
        """***.XXX.XXX-**: formato seguro para logs."""
        d = self._valor
        return f"***.{d[3:6]}.{d[6:9]}-**"

    def __repr__(self) -> str:
        return f"CPF({self.mascarado!r})"

    def __str__(self) -> str:
        return self.mascarado


class CNPJ(_DocumentoNumerico):
    TIPO = TipoDocumento.CNPJ
    MASCARA = "##.###.###/####-##"
    NOME = "CNPJ"

    @property
    def raiz(self) -> str:
        """8 primeiros digitos, comuns a matriz e filiais."""
        return self._valor[:8]

    @property
    def filial(self) -> str:
        return self._valor[8:12]

    @property
    def is_matriz(self) -> bool:
        return self.filial == "0001"


class PIS(_DocumentoNumerico):
    TIPO = TipoDocumento.PIS
    MASCARA = "###.#####.##-#"
    NOME = "PIS"


class Renavam(_DocumentoNumerico):
    TIPO = TipoDocumento.RENAVAM
    NOME = "RENAVAM"


class CNH(_DocumentoNumerico):
    TIPO = TipoDocumento.CNH
    NOME = "CNH"


class TituloEleitor(_DocumentoNumerico):
    """Titulo de eleitor de 12 digitos."""

    TIPO = TipoDocumento.TITULO_ELEITOR
    MASCARA = "#### #### ## ##"
    NOME = "Titulo de eleitor"

    def _verificar(self, digitos: str) -> bool:
        return validate_titulo_eleitor(digitos)

    @property
    def codigo_uf(self) -> str:
        return self._valor[8:10]
