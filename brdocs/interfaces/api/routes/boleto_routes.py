from fastapi import APIRouter, Depends, Query

from brdocs.application.dtos.documento_dto import ValidacaoDTO
from brdocs.application.services.documento_service import DocumentoService
from brdocs.interfaces.api.dependencies import get_documento_service

router = APIRouter()


@router.get("/boletos/validar", response_model=ValidacaoDTO)
def validar_boleto(
    linha: str = Query(..., min_length=1, max_length=80),
    service: DocumentoService = Depends(get_documento_service),  # noqa: B008
) -> ValidacaoDTO:
    return service.validar_boleto(linha)
