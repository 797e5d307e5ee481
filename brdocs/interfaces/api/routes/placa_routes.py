from fastapi import APIRouter, Depends, HTTPException, Query

from brdocs.application.dtos.placa_dto import PlacaDTO
from brdocs.application.services.documento_service import DocumentoService
from brdocs.domain.placa import transcoder
from brdocs.domain.placa.transcoder import FormatoPlaca
from brdocs.interfaces.api.dependencies import get_documento_service

router = APIRouter()


# /placas/gerar ANTES de /placas/{placa}
@router.get("/placas/gerar", response_model=PlacaDTO)
def gerar_placa(
    formato: FormatoPlaca = Query(default=FormatoPlaca.MERCOSUL),
    service: DocumentoService = Depends(get_documento_service),  # noqa: B008
) -> PlacaDTO:
    if formato is FormatoPlaca.INVALIDO:
        raise HTTPException(status_code=422, detail="Formato deve ser LLLNNNN ou LLLNLNN")
    return service.placa(transcoder.generate(formato))


@router.get("/placas/{placa}", response_model=PlacaDTO)
def consultar_placa(
    placa: str,
    service: DocumentoService = Depends(get_documento_service),  # noqa: B008
) -> PlacaDTO:
    return service.placa(placa)
