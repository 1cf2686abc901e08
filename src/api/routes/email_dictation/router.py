"""Endpoint de normalização de emails ditados.

Endpoints (mesmo handler):
- /api/parse-email
- /api/format-email

Métodos:
- GET: `?text=raul%20dot%20smith%20at%20gmail%20dot%20com`
- POST: `{"text": "raul dot smith at gmail dot com"}`
- OPTIONS: preflight CORS (204 sem corpo)
- demais: 405

Toda resposta carrega os headers CORS abertos. O texto ditado e o email
resultante nunca vão para os logs.
"""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING, Any

from fastapi import APIRouter, Request, Response, status
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from api.connectors.email_text import (
    InvalidJsonError,
    MissingTextError,
    TextTooLongError,
    extract_text_from_body,
    extract_text_from_query,
    query_values,
    require_text,
)
from app.bootstrap import get_email_text_normalizer
from app.observability import (
    CORRELATION_ID_HEADER,
    get_correlation_id,
    record_confidence,
    record_latency,
    reset_correlation_id,
    set_correlation_id,
)
from config.settings import get_email_dictation_settings

if TYPE_CHECKING:
    from app.protocols import EmailTextNormalizerProtocol

logger = logging.getLogger(__name__)

router = APIRouter()

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET,POST,OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}

ROUTE_PATHS = ("/parse-email", "/format-email")

# Verbos fora desta lista chegam via `method_not_allowed_handler`
ALL_METHODS = ["GET", "POST", "OPTIONS", "PUT", "PATCH", "DELETE", "HEAD"]

MISSING_TEXT_ERROR = 'Falta el parámetro "text" (string).'
METHOD_NOT_ALLOWED_ERROR = "Method Not Allowed"
INTERNAL_ERROR = "Internal Server Error"


def _response_headers() -> dict[str, str]:
    return {**CORS_HEADERS, CORRELATION_ID_HEADER: get_correlation_id()}


def _json(content: dict[str, Any], status_code: int) -> JSONResponse:
    return JSONResponse(content=content, status_code=status_code, headers=_response_headers())


async def _read_text(request: Request) -> Any:
    """Lê `text` da query (GET) ou do corpo JSON (POST)."""
    if request.method == "GET":
        return extract_text_from_query(query_values(request.query_params))
    raw_body = await request.body()
    return extract_text_from_body(raw_body)


async def _handle(request: Request) -> Response:
    method = request.method

    if method == "OPTIONS":
        return Response(status_code=status.HTTP_204_NO_CONTENT, headers=_response_headers())

    if method not in ("GET", "POST"):
        logger.info(
            "email_dictation_rejected",
            extra={"method": method, "status_code": status.HTTP_405_METHOD_NOT_ALLOWED},
        )
        return _json({"error": METHOD_NOT_ALLOWED_ERROR}, status.HTTP_405_METHOD_NOT_ALLOWED)

    settings = get_email_dictation_settings()
    try:
        text = require_text(await _read_text(request), settings.max_input_chars)
    except MissingTextError:
        logger.info(
            "email_dictation_rejected",
            extra={"method": method, "status_code": 400, "reason": "missing_text"},
        )
        return _json({"error": MISSING_TEXT_ERROR}, status.HTTP_400_BAD_REQUEST)
    except TextTooLongError:
        logger.info(
            "email_dictation_rejected",
            extra={"method": method, "status_code": 400, "reason": "text_too_long"},
        )
        return _json(
            {
                "error": (
                    f'El parámetro "text" supera {settings.max_input_chars} caracteres.'
                )
            },
            status.HTTP_400_BAD_REQUEST,
        )
    except InvalidJsonError as exc:
        logger.warning(
            "email_dictation_failed",
            extra={"method": method, "status_code": 500, "error_type": type(exc).__name__},
        )
        return _json(
            {"error": INTERNAL_ERROR, "details": f"{type(exc).__name__}: {exc}"},
            status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    started_at = time.perf_counter()
    normalizer: EmailTextNormalizerProtocol = get_email_text_normalizer()
    result = normalizer.normalize(text)
    latency_ms = (time.perf_counter() - started_at) * 1000

    record_latency("email_dictation", "normalize", latency_ms, get_correlation_id())
    record_confidence(
        "email_dictation",
        "normalize",
        result.confidence,
        get_correlation_id(),
        is_valid=result.is_valid,
    )
    logger.info(
        "email_dictation_normalized",
        extra={
            "method": method,
            "status_code": 200,
            "is_valid": result.is_valid,
            "confidence": result.confidence,
            "input_chars": len(text),
            "latency_ms": round(latency_ms, 2),
        },
    )
    return _json(result.to_dict(), status.HTTP_200_OK)


@router.api_route(ROUTE_PATHS[0], methods=ALL_METHODS, response_model=None)
@router.api_route(ROUTE_PATHS[1], methods=ALL_METHODS, response_model=None)
async def normalize_dictated_email(request: Request) -> Response:
    """Normaliza um email ditado recebido via GET/POST.

    Returns:
        200 com o resultado, 204 no preflight, 400 sem `text`,
        405 para métodos não suportados, 500 em falha inesperada.
    """
    token = set_correlation_id(request.headers.get(CORRELATION_ID_HEADER))
    try:
        return await _handle(request)
    except Exception as exc:
        logger.exception(
            "email_dictation_failed",
            extra={"method": request.method, "status_code": 500, "error_type": type(exc).__name__},
        )
        return _json(
            {"error": INTERNAL_ERROR, "details": f"{type(exc).__name__}: {exc}"},
            status.HTTP_500_INTERNAL_SERVER_ERROR,
        )
    finally:
        reset_correlation_id(token)


async def method_not_allowed_handler(
    request: Request, exc: StarletteHTTPException
) -> Response:
    """Devolve ao endpoint os 405 do roteador para verbos não registrados.

    TRACE, CONNECT ou verbos customizados não casam com nenhuma rota e o
    Starlette responde `{"detail": ...}` sem CORS. Nos caminhos de
    normalização o pedido segue para o handler, que responde o 405 do
    contrato. Demais exceções HTTP mantêm o tratamento padrão do FastAPI.
    """
    if exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED and request.url.path.endswith(
        ROUTE_PATHS
    ):
        return await normalize_dictated_email(request)
    return await http_exception_handler(request, exc)
