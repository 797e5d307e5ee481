# brdocs/interfaces/api/main.py
from __future__ import annotations

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware

from brdocs.infrastructure.config import get_settings
from brdocs.interfaces.api.middleware.rate_limit import RateLimitMiddleware

app = FastAPI(
    title="brdocs API",
    debug=get_settings().debug,
    docs_url="/api/docs",
    redoc_url=None,
)


@app.middleware("http")
async def add_security_headers(request: Request, call_next: object) -> Response:
    response = await call_next(request)  # type: ignore[misc]
    response.headers["X-Content-Type-Options"] = "nosniff"
    response.headers["X-Frame-Options"] = "DENY"
    response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"
    return response  # type: ignore[return-value]


app.add_middleware(RateLimitMiddleware)

app.add_middleware(
    CORSMiddleware,
    allow_origins=list(get_settings().cors_origins),
    allow_methods=["GET"],
    allow_headers=["*"],
)

from brdocs.interfaces.api.routes.boleto_routes import router as boleto_router  # noqa: E402
from brdocs.interfaces.api.routes.documento_routes import router as documento_router  # noqa: E402
from brdocs.interfaces.api.routes.placa_routes import router as placa_router  # noqa: E402
from brdocs.interfaces.api.routes.processo_routes import router as processo_router  # noqa: E402

app.include_router(documento_router, prefix="/api")
app.include_router(placa_router, prefix="/api")
app.include_router(processo_router, prefix="/api")
app.include_router(boleto_router, prefix="/api")
