# brdocs/interfaces/api/middleware/rate_limit.py
#
# Per-IP sliding window over the last 60 seconds, in process memory.
#
# Invariants:
#   - _requests never holds an empty list.
#   - An IP idle for a whole window is evicted at the next sweep (at most one
#     sweep per window), so the map only grows with recent clients.
from __future__ import annotations

import time

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint

from brdocs.infrastructure.config import get_settings

JANELA_SEGUNDOS = 60.0


class RateLimitMiddleware(BaseHTTPMiddleware):
    def __init__(self, app: object) -> None:
        super().__init__(app)  # type: ignore[arg-type]
        self._requests: dict[str, list[float]] = {}
        self._ultima_limpeza = time.time()

    def _purgar(self, now: float) -> None:
        """Drop every IP whose newest request fell out of the window."""
        expirados = [ip for ip, ts in self._requests.items() if now - ts[-1] >= JANELA_SEGUNDOS]
        for ip in expirados:
            del self._requests[ip]
        self._ultima_limpeza = now

    def _registrar(self, client_ip: str, now: float, limite: int) -> bool:
        """Record a request; False if the IP already used its quota."""
        recentes = [t for t in self._requests.get(client_ip, []) if now - t < JANELA_SEGUNDOS]
        if len(recentes) >= limite:
            self._requests[client_ip] = recentes
            return False
        recentes.append(now)
        self._requests[client_ip] = recentes
        return True

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        settings = get_settings()

        # 0 = sem limite (usado em testes)
        if settings.rate_limit_per_minute == 0:
            return await call_next(request)

        client_ip = request.client.host if request.client else "unknown"
        now = time.time()
        if now - self._ultima_limpeza >= JANELA_SEGUNDOS:
            self._purgar(now)

        if not self._registrar(client_ip, now, settings.rate_limit_per_minute):
            return Response(
                content='{"detail": "Rate limit excedido. Tente novamente em 1 minuto."}',
                status_code=429,
                media_type="application/json",
            )
        return await call_next(request)
