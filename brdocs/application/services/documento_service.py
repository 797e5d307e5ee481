# brdocs/application/services/documento_service.py
#
# Facade over the domain functions, shared by the HTTP API and the batch
# pipeline. Every method takes raw user input (punctuation allowed).
from __future__ import annotations

from collections.abc import Callable

from brdocs.domain.boleto import linha_digitavel
from brdocs.domain.documento import generator, validator
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

from ..dtos.documento_dto import GeracaoDTO, ValidacaoDTO
from ..dtos.placa_dto import PlacaDTO

_VALIDADORES: dict[TipoDocumento, Callable[[str], bool]] = {
    TipoDocumento.CPF: validator.validate_cpf,
    TipoDocumento.CNPJ: validator.validate_cnpj,
    TipoDocumento.PIS: validator.validate_pis,
    TipoDocumento.RENAVAM: validator.validate_renavam,
    TipoDocumento.CNH: validator.validate_cnh,
    TipoDocumento.TITULO_ELEITOR: validator.validate_titulo_eleitor,
}

_FORMATADORES: dict[TipoDocumento, Callable[[str], str | None]] = {
    TipoDocumento.CPF: format_cpf,
    TipoDocumento.CNPJ: format_cnpj,
    TipoDocumento.PIS: format_pis,
    TipoDocumento.TITULO_ELEITOR: format_titulo_eleitor,
}


class GeracaoImpossivelError(ValueError):
    """Restricao de geracao que nenhum numero valido satisfaz."""


class DocumentoService:
    def validar(self, tipo: TipoDocumento, valor: str) -> ValidacaoDTO:
        """Letters and other non-symbol characters make the value invalid."""
        digitos = remove_symbols(valor)
        valido = _VALIDADORES[tipo](digitos)
        return ValidacaoDTO(
            tipo=tipo.value,
            entrada=valor,
            valido=valido,
            formatado=self.formatar(tipo, digitos) if valido else None,
        )

    def formatar(self, tipo: TipoDocumento, digitos: str) -> str | None:
        """Punctuated form; types without a display mask return the bare digits."""
        formatador = _FORMATADORES.get(tipo)
        if formatador is not None:
            return formatador(digitos)
        return digitos if _VALIDADORES[tipo](digitos) else None

    def gerar(
        self,
        tipo: TipoDocumento,
        uf: str | None = None,
        filial: int | None = None,
    ) -> GeracaoDTO:
        """Generate a valid number.

        Raises:
            GeracaoImpossivelError: if the constraint cannot be satisfied
                (unknown UF for a voter ID).
        """
        if tipo is TipoDocumento.TITULO_ELEITOR:
            valor = generator.generate_titulo_eleitor(uf or "ZZ")
            if valor is None:
                raise GeracaoImpossivelError(f"UF desconhecida: {uf}")
        elif tipo is TipoDocumento.CNPJ:
            valor = generator.generate_cnpj(1 if filial is None else filial)
        else:
            valor = generator.gerar(tipo)
            if valor is None:
                raise GeracaoImpossivelError(f"Nao foi possivel gerar {tipo.value}")
        return GeracaoDTO(
            tipo=tipo.value,
            valor=valor,
            formatado=self.formatar(tipo, valor) or valor,
        )

    def placa(self, entrada: str) -> PlacaDTO:
        placa = remove_symbols(entrada, "- ").upper()
        formato = transcoder.detect_format(placa)
        return PlacaDTO(
            entrada=entrada,
            formato=formato.value,
            valida=formato is not transcoder.FormatoPlaca.INVALIDO,
            formatada=transcoder.format_placa(placa),
            mercosul=(
                placa
                if formato is transcoder.FormatoPlaca.MERCOSUL
                else transcoder.legacy_to_mercosul(placa)
            ),
            antiga=(
                placa
                if formato is transcoder.FormatoPlaca.ANTIGO
                else transcoder.mercosul_to_legacy(placa)
            ),
        )

    def validar_processo(self, valor: str) -> ValidacaoDTO:
        valido = numero_unico.validate(valor)
        return ValidacaoDTO(
            tipo="processo",
            entrada=valor,
            valido=valido,
            formatado=numero_unico.format_processo(numero_unico.clean(valor)) if valido else None,
        )

    def gerar_processo(
        self,
        ano: int | None = None,
        segmento: int | None = None,
        tribunal: int | None = None,
        origem: int | None = None,
    ) -> GeracaoDTO:
        """Raises GeracaoImpossivelError for an invalid year/segment/court/origin."""
        valor = numero_unico.generate(ano=ano, segmento=segmento, tribunal=tribunal, origem=origem)
        if valor is None:
            raise GeracaoImpossivelError(
                "Restricao invalida para numero de processo "
                f"(ano={ano}, segmento={segmento}, tribunal={tribunal}, origem={origem})"
            )
        return GeracaoDTO(
            tipo="processo",
            valor=valor,
            formatado=numero_unico.format_processo(valor) or valor,
        )

    def validar_boleto(self, linha: str) -> ValidacaoDTO:
        valido = linha_digitavel.validate(linha)
        return ValidacaoDTO(
            tipo="boleto",
            entrada=linha,
            valido=valido,
            formatado=only_digits(linha) if valido else None,
        )
