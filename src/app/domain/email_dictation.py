"""Modelos de domínio para normalização de emails ditados.

Contratos compartilhados entre o normalizador (app/services) e a borda HTTP
(api/routes). O formato de `to_dict()` é o contrato público da API.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Final

EMPTY_INPUT_REASON: Final = "Empty input"


class Confidence:
    """Valores discretos de confiança produzidos pela validação."""

    EMPTY: Final = 0.0
    NO_SEPARATOR: Final = 0.4
    MALFORMED: Final = 0.6
    PARTIAL: Final = 0.8
    VALID: Final = 0.99


CONFIDENCE_LEVELS: Final = frozenset(
    {
        Confidence.EMPTY,
        Confidence.NO_SEPARATOR,
        Confidence.MALFORMED,
        Confidence.PARTIAL,
        Confidence.VALID,
    }
)


@dataclass(frozen=True, slots=True)
class CandidateValidation:
    """Resultado da validação estrutural de um candidato a email."""

    is_valid: bool
    confidence: float
    local: str = ""
    domain: str = ""


@dataclass(frozen=True, slots=True)
class NormalizedEmailResult:
    """Resultado da normalização de um texto ditado.

    Attributes:
        input: Texto original, sem alteração (None no guard de entrada vazia).
        email: Email normalizado (pode estar incompleto).
        is_valid: True se local e domínio passaram na validação.
        confidence: Um dos valores de `Confidence`.
        local: Parte antes do `@` (vazia se não houver separador).
        domain: Parte depois do `@` (vazia se não houver separador).
        reason: Motivo de rejeição (apenas no guard de entrada vazia).
    """

    input: str | None
    email: str
    is_valid: bool
    confidence: float
    local: str = ""
    domain: str = ""
    reason: str | None = None

    @classmethod
    def empty_input(cls) -> NormalizedEmailResult:
        """Resultado do guard para entrada ausente, vazia ou não-string."""
        return cls(
            input=None,
            email="",
            is_valid=False,
            confidence=Confidence.EMPTY,
            reason=EMPTY_INPUT_REASON,
        )

    @property
    def is_rejected(self) -> bool:
        return self.reason is not None

    def to_dict(self) -> dict[str, Any]:
        """Serializa no formato de resposta da API (chaves camelCase)."""
        if self.is_rejected:
            return {
                "email": self.email,
                "isValid": self.is_valid,
                "confidence": self.confidence,
                "reason": self.reason,
            }
        return {
            "input": self.input,
            "email": self.email,
            "isValid": self.is_valid,
            "confidence": self.confidence,
            "local": self.local,
            "domain": self.domain,
        }
