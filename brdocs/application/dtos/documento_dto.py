from pydantic import BaseModel


class ValidacaoDTO(BaseModel):
    tipo: str
    entrada: str
    valido: bool
    formatado: str | None


class GeracaoDTO(BaseModel):
    tipo: str
    valor: str
    formatado: str
