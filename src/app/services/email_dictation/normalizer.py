"""Orquestração do pipeline de normalização de emails ditados.

Pipeline: canonicalize → tokenize → rewrite_tokens → cleanup_candidate →
validate_candidate. Função pura: sem IO, sem estado compartilhado mutável,
nunca levanta exceção para entradas string.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from app.domain.email_dictation import CandidateValidation, Confidence, NormalizedEmailResult
from app.services.email_dictation.cleanup import cleanup_candidate
from app.services.email_dictation.domain_inference import DEFAULT_PROVIDERS, infer_separator
from app.services.email_dictation.rewriter import rewrite_tokens
from app.services.email_dictation.text import canonicalize, tokenize
from app.services.email_dictation.validator import validate_candidate
from app.services.email_dictation.vocabulary import DEFAULT_VOCABULARY

if TYPE_CHECKING:
    from collections.abc import Iterable

    from app.services.email_dictation.vocabulary import DictationVocabulary


class EmailTextNormalizer:
    """Converte texto ditado ("raul dot smith at gmail dot com") em email.

    Args:
        vocabulary: Tabelas de palavras → símbolos.
        infer_domain: Ativa a heurística de `@` inferido por provedor conhecido.
        providers: Provedores usados pela heurística.
    """

    def __init__(
        self,
        vocabulary: DictationVocabulary = DEFAULT_VOCABULARY,
        *,
        infer_domain: bool = False,
        providers: Iterable[str] = DEFAULT_PROVIDERS,
    ) -> None:
        self._vocabulary = vocabulary
        self._infer_domain = infer_domain
        self._providers = tuple(providers)

    @property
    def vocabulary(self) -> DictationVocabulary:
        return self._vocabulary

    @property
    def infer_domain(self) -> bool:
        return self._infer_domain

    def normalize(self, text: Any) -> NormalizedEmailResult:
        """Normaliza o texto ditado.

        Args:
            text: Texto transcrito. Valores ausentes, vazios ou não-string
                retornam o resultado de entrada vazia (confidence 0.0).

        Returns:
            NormalizedEmailResult com o texto original preservado em `input`.
        """
        if not text or not isinstance(text, str):
            return NormalizedEmailResult.empty_input()

        tokens = tokenize(canonicalize(text))
        email = cleanup_candidate(rewrite_tokens(tokens, self._vocabulary))
        validation = validate_candidate(email)

        if self._infer_domain and "@" not in email:
            email, validation = self._apply_domain_inference(email, validation)

        return NormalizedEmailResult(
            input=text,
            email=email,
            is_valid=validation.is_valid,
            confidence=validation.confidence,
            local=validation.local,
            domain=validation.domain,
        )

    def _apply_domain_inference(
        self,
        email: str,
        validation: CandidateValidation,
    ) -> tuple[str, CandidateValidation]:
        inferred = infer_separator(email, self._providers)
        if inferred is None:
            return email, validation

        inferred_validation = validate_candidate(inferred)
        # Separador inferido nunca é reportado como email válido
        return inferred, CandidateValidation(
            is_valid=False,
            confidence=min(inferred_validation.confidence, Confidence.PARTIAL),
            local=inferred_validation.local,
            domain=inferred_validation.domain,
        )


_default_normalizer = EmailTextNormalizer()


def normalize_email_text(text: Any) -> NormalizedEmailResult:
    """Normaliza texto ditado com o vocabulário padrão."""
    return _default_normalizer.normalize(text)
