# brdocs/domain/processo/numero_unico.py
#
# CNJ unified legal-process number: NNNNNNN-DD.AAAA.J.TR.OOOO
#
#   NNNNNNN  sequential number within the origin unit and year
#   DD       check digits (modulo 97 over N, A, J, TR, O)
#   AAAA     filing year
#   J        justice segment (1..9)
#   TR       court within the segment
#   OOOO     origin unit (0000 = the court itself)
#
# Design decisions:
#   - The court table comes from CNJ Resolution 65/2008. Origin units are not
#     enumerated: any 0000..9999 is accepted.
#   - generate() holds every supplied field fixed and draws the rest; an
#     impossible constraint returns None rather than raising.
#
# Invariants:
#   - validate(generate(...)) is True whenever generate returns a str.
from __future__ import annotations

import random
from dataclasses import dataclass, replace
from datetime import date

from brdocs.domain.checksum.weighted import modulo_97
from brdocs.domain.formatacao import aplicar_mascara, remove_symbols

TAMANHO = 20
MASCARA = "#######-##.####.#.##.####"

TRIBUNAIS_POR_SEGMENTO: dict[int, frozenset[int]] = {
    1: frozenset({0}),                # Supremo Tribunal Federal
    2: frozenset({0}),                # Conselho Nacional de Justica
    3: frozenset({0}),                # Superior Tribunal de Justica
    4: frozenset(range(1, 7)),        # Justica Federal (TRF1..TRF6)
    5: frozenset(range(0, 25)),       # Justica do Trabalho (00 = TST)
    6: frozenset(range(1, 28)),       # Justica Eleitoral (TREs)
    7: frozenset(range(1, 13)),       # Justica Militar da Uniao
    8: frozenset(range(1, 28)),       # Justica dos Estados e DF
    9: frozenset({13, 21, 26}),       # Justica Militar Estadual (MG, RS, SP)
}


@dataclass(frozen=True)
class NumeroProcesso:
    sequencial: str
    digitos: str
    ano: str
    segmento: str
    tribunal: str
    origem: str

    @classmethod
    def parse(cls, numero: str) -> NumeroProcesso | None:
        """Split a 20-digit number into its fields; None if not 20 digits."""
        if len(numero) != TAMANHO or not (numero.isascii() and numero.isdigit()):
            return None
        return cls(
            sequencial=numero[0:7],
            digitos=numero[7:9],
            ano=numero[9:13],
            segmento=numero[13],
            tribunal=numero[14:16],
            origem=numero[16:20],
        )

    @property
    def base(self) -> str:
        """Digits covered by the checksum (everything except DD)."""
        return self.sequencial + self.ano + self.segmento + self.tribunal + self.origem

    def __str__(self) -> str:
        return self.sequencial + self.digitos + self.ano + self.segmento + self.tribunal + self.origem


def clean(numero: str) -> str:
    return remove_symbols(numero, ".- ")


def validate(numero: str) -> bool:
    """Validate a legal-process number, with or without punctuation."""
    partes = NumeroProcesso.parse(clean(numero))
    if partes is None:
        return False
    tribunais = TRIBUNAIS_POR_SEGMENTO.get(int(partes.segmento))
    if tribunais is None or int(partes.tribunal) not in tribunais:
        return False
    return partes.digitos == modulo_97(partes.base)


def format_processo(numero: str) -> str | None:
    """NNNNNNN-DD.AAAA.J.TR.OOOO for any 20-digit string."""
    if NumeroProcesso.parse(numero) is None:
        return None
    return aplicar_mascara(numero, MASCARA)


def generate(
    ano: int | None = None,
    segmento: int | None = None,
    tribunal: int | None = None,
    origem: int | None = None,
    rng: random.Random | None = None,
) -> str | None:
    """Generate a valid process number.

    Args:
        ano:      Filing year; defaults to the current year. Past years and
                  years beyond 9999 are rejected.
        segmento: Justice segment 1..9; random when omitted.
        tribunal: Court code valid for the segment; random when omitted.
        origem:   Origin unit 0..9999; random when omitted.
        rng:      Optional random source.

    Returns:
        The 20-digit number, or None if any supplied field is invalid.
    """
    rng = rng or random.Random()
    ano_atual = date.today().year
    ano = ano_atual if ano is None else ano
    if not ano_atual <= ano <= 9999:
        return None

    if segmento is None:
        segmento = rng.choice(sorted(TRIBUNAIS_POR_SEGMENTO))
    tribunais = TRIBUNAIS_POR_SEGMENTO.get(segmento)
    if tribunais is None:
        return None

    if tribunal is None:
        tribunal = rng.choice(sorted(tribunais))
    elif tribunal not in tribunais:
        return None

    if origem is None:
        origem = rng.randrange(10000)
    elif not 0 <= origem <= 9999:
        return None

    partes = NumeroProcesso(
        sequencial=f"{rng.randrange(10_000_000):07d}",
        digitos="",
        ano=f"{ano:04d}",
        segmento=str(segmento),
        tribunal=f"{tribunal:02d}",
        origem=f"{origem:04d}",
    )
    return str(replace(partes, digitos=modulo_97(partes.base)))
