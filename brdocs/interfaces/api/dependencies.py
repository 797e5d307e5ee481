from brdocs.application.services.documento_service import DocumentoService


def get_documento_service() -> DocumentoService:
    return DocumentoService()
