"""Extração do parâmetro `text` de requests HTTP (sem PII nos erros)."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

TEXT_FIELD = "text"


class EmailTextRequestError(ValueError):
    """Erro base para requests de normalização."""


class InvalidJsonError(EmailTextRequestError):
    """Corpo do POST não é JSON válido."""


class MissingTextError(EmailTextRequestError):
    """Parâmetro `text` ausente, vazio ou não-string."""


class TextTooLongError(EmailTextRequestError):
    """Parâmetro `text` excede o tamanho máximo configurado."""


def extract_text_from_query(values: Sequence[str]) -> str:
    """Retorna o primeiro valor de `text` na query string (ou vazio).

    Args:
        values: Todos os valores de `text` (ex: `request.query_params.getlist("text")`).
    """
    return values[0] if values else ""


def extract_text_from_body(raw_body: bytes) -> Any:
    """Parseia o corpo JSON e retorna o campo `text`.

    Corpo vazio equivale a `{}`. Payloads JSON que não são objeto não
    têm `text` e retornam None.

    Raises:
        InvalidJsonError: Se o corpo não for JSON válido (ou não for UTF-8).
    """
    try:
        payload = json.loads(raw_body or b"{}")
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise InvalidJsonError(str(exc)) from exc

    if not isinstance(payload, dict):
        return None
    return payload.get(TEXT_FIELD)


def require_text(value: Any, max_chars: int | None = None) -> str:
    """Garante que `text` é string não vazia dentro do limite.

    Raises:
        MissingTextError: Se ausente, vazio ou não-string.
        TextTooLongError: Se exceder `max_chars`.
    """
    if not value or not isinstance(value, str):
        raise MissingTextError("missing_text")
    if max_chars is not None and len(value) > max_chars:
        raise TextTooLongError(f"text_too_long:{len(value)}")
    return value


def query_values(query_params: Mapping[str, Any]) -> list[str]:
    """Lê todos os valores de `text` de um mapping de query params."""
    getlist = getattr(query_params, "getlist", None)
    if callable(getlist):
        return list(getlist(TEXT_FIELD))
    value = query_params.get(TEXT_FIELD)
    return [value] if isinstance(value, str) else []
