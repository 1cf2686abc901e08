"""Entrypoint do serviço de normalização de emails ditados.

Inicializa o bootstrap e expõe a aplicação ASGI (FastAPI).

Uso (produção):
    uvicorn app.app:app --host 0.0.0.0 --port 8080

Uso (desenvolvimento):
    uvicorn app.app:app --reload --host 0.0.0.0 --port 8080
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI
from starlette.exceptions import HTTPException as StarletteHTTPException

from api.routes import create_api_router
from api.routes.email_dictation.router import method_not_allowed_handler
from app.bootstrap import get_email_text_normalizer, initialize_app, validate_runtime_settings
from config.logging import get_logger
from config.settings import get_base_settings

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

# Inicializar logging ANTES de qualquer import que use logger
initialize_app()

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Gerencia ciclo de vida da aplicação.

    Startup:
    - Valida configurações (falha rápido em staging/production)
    - Constrói o normalizador (vocabulário estendido pelas settings)
    """
    service = get_base_settings().service_name
    logger.info("app_starting", extra={"service_name": service})
    validate_runtime_settings()
    app.state.email_text_normalizer = get_email_text_normalizer()

    yield

    logger.info("app_shutting_down", extra={"service_name": service})


def create_app() -> FastAPI:
    """Cria e configura a aplicação FastAPI.

    CORS é aplicado pelo próprio endpoint de normalização (headers fixos
    em todas as respostas, inclusive 204/4xx/5xx). O handler de 405
    garante o mesmo para verbos HTTP sem rota registrada.

    Returns:
        Aplicação FastAPI configurada.
    """
    fastapi_app = FastAPI(
        title="Dictated Email",
        description="Normalização de emails ditados (voz → texto → email)",
        version="1.0.0",
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )

    fastapi_app.include_router(create_api_router())
    fastapi_app.add_exception_handler(StarletteHTTPException, method_not_allowed_handler)

    logger.info("app_configured")

    return fastapi_app


# Aplicação ASGI exposta para uvicorn
app = create_app()


def main() -> None:
    """Entrypoint para execução direta (desenvolvimento)."""
    import uvicorn

    logger.info("Starting dictated-email in development mode")
    uvicorn.run(
        "app.app:app",
        host="0.0.0.0",
        port=8080,
        reload=True,
    )


if __name__ == "__main__":
    main()
