from __future__ import annotations

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, Response

from motor_cotacao.infrastructure.config import get_settings
from motor_cotacao.infrastructure.log import configurar_logging


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    from motor_cotacao.infrastructure.duckdb_connection import get_connection
    configurar_logging(get_settings().log_level)
    get_connection()  # valida conexao e aplica schema no startup
    yield


app = FastAPI(
    title="Motor de Cotacao API",
    debug=False,  # NUNCA True em producao
    lifespan=lifespan,
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


from motor_cotacao.interfaces.api.routes.cotacao_routes import router as cotacao_router  # noqa: E402
from motor_cotacao.interfaces.api.routes.health_routes import router as health_router  # noqa: E402
from motor_cotacao.interfaces.api.routes.rodizio_routes import router as rodizio_router  # noqa: E402

app.include_router(cotacao_router, prefix="/api")
app.include_router(rodizio_router, prefix="/api")
app.include_router(health_router, prefix="/api")
