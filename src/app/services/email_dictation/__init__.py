"""Normalização de emails ditados (voz → texto → email).

Uso:
    from app.services.email_dictation import normalize_email_text

    result = normalize_email_text("raul dot smith at gmail dot com")
    result.email       # "raul.smith@gmail.com"
    result.confidence  # 0.99
"""

from app.services.email_dictation.cleanup import cleanup_candidate
from app.services.email_dictation.domain_inference import DEFAULT_PROVIDERS, infer_separator
from app.services.email_dictation.normalizer import EmailTextNormalizer, normalize_email_text
from app.services.email_dictation.rewriter import rewrite_tokens
from app.services.email_dictation.text import canonicalize, tokenize
from app.services.email_dictation.validator import validate_candidate
from app.services.email_dictation.vocabulary import (
    DEFAULT_VOCABULARY,
    DictationVocabulary,
    build_vocabulary,
)

__all__ = [
    "DEFAULT_PROVIDERS",
    "DEFAULT_VOCABULARY",
    "DictationVocabulary",
    "EmailTextNormalizer",
    "build_vocabulary",
    "canonicalize",
    "cleanup_candidate",
    "infer_separator",
    "normalize_email_text",
    "rewrite_tokens",
    "tokenize",
    "validate_candidate",
]
