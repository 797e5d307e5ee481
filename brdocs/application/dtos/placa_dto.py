from pydantic import BaseModel


class PlacaDTO(BaseModel):
    entrada: str
    formato: str
    valida: bool
    formatada: str | None
    mercosul: str | None
    antiga: str | None
