from fastapi import APIRouter, Depends, HTTPException, Query

from brdocs.application.dtos.documento_dto import GeracaoDTO, ValidacaoDTO
from brdocs.application.services.documento_service import (
    DocumentoService,
    GeracaoImpossivelError,
)
from brdocs.domain.documento.enums import TipoDocumento
from brdocs.interfaces.api.dependencies import get_documento_service

router = APIRouter()


def _tipo(tipo: str) -> TipoDocumento:
    try:
        return TipoDocumento(tipo.lower())
    except ValueError:
        raise HTTPException(status_code=404, detail=f"Tipo de documento desconhecido: {tipo}") from None


@router.get("/documentos/{tipo}/validar", response_model=ValidacaoDTO)
def validar_documento(
    tipo: str,
    valor: str = Query(..., min_length=1, max_length=64),
    service: DocumentoService = Depends(get_documento_service),  # noqa: B008
) -> ValidacaoDTO:
    return service.validar(_tipo(tipo), valor)


@router.get("/documentos/{tipo}/gerar", response_model=GeracaoDTO)
def gerar_documento(
    tipo: str,
    uf: str | None = Query(default=None, min_length=2, max_length=2),
    filial: int | None = Query(default=None, ge=0),
    service: DocumentoService = Depends(get_documento_service),  # noqa: B008
) -> GeracaoDTO:
    try:
        return service.gerar(_tipo(tipo), uf=uf, filial=filial)
    except GeracaoImpossivelError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
