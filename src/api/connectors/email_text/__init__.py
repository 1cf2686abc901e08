"""Connector HTTP da normalização de emails ditados: parsing seguro do `text`."""

from .request import (
    TEXT_FIELD,
    EmailTextRequestError,
    InvalidJsonError,
    MissingTextError,
    TextTooLongError,
    extract_text_from_body,
    extract_text_from_query,
    query_values,
    require_text,
)

__all__ = [
    "TEXT_FIELD",
    "EmailTextRequestError",
    "InvalidJsonError",
    "MissingTextError",
    "TextTooLongError",
    "extract_text_from_body",
    "extract_text_from_query",
    "query_values",
    "require_text",
]
