from fastapi import APIRouter, Depends, HTTPException, Query

from brdocs.application.dtos.documento_dto import GeracaoDTO, ValidacaoDTO
from brdocs.application.services.documento_service import (
    DocumentoService,
    GeracaoImpossivelError,
)
from brdocs.interfaces.api.dependencies import get_documento_service

router = APIRouter()


@router.get("/processos/validar", response_model=ValidacaoDTO)
def validar_processo(
    valor: str = Query(..., min_length=1, max_length=40),
    service: DocumentoService = Depends(get_documento_service),  # noqa: B008
) -> ValidacaoDTO:
    return service.validar_processo(valor)


@router.get("/processos/gerar", response_model=GeracaoDTO)
def gerar_processo(
    ano: int | None = Query(default=None),
    segmento: int | None = Query(default=None),
    tribunal: int | None = Query(default=None),
    origem: int | None = Query(default=None),
    service: DocumentoService = Depends(get_documento_service),  # noqa: B008
) -> GeracaoDTO:
    try:
        return service.gerar_processo(ano=ano, segmento=segmento, tribunal=tribunal, origem=origem)
    except GeracaoImpossivelError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
