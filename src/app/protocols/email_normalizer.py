"""Protocolo de normalização de emails ditados."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from app.domain.email_dictation import NormalizedEmailResult


@runtime_checkable
class EmailTextNormalizerProtocol(Protocol):
    """Contrato mínimo para converter texto ditado em email."""

    def normalize(self, text: Any) -> NormalizedEmailResult: ...
