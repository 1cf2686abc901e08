"""Bootstrap da aplicação: inicialização e wiring.

Composition root: configura logging, valida settings e constrói o
normalizador de emails ditados a partir das settings.

Uso:
    from app.bootstrap import initialize_app, get_email_text_normalizer

    initialize_app()
    normalizer = get_email_text_normalizer()
"""

from __future__ import annotations

import logging
import os
from functools import lru_cache

from app.observability import get_correlation_id
from app.services.email_dictation import (
    DEFAULT_PROVIDERS,
    EmailTextNormalizer,
    build_vocabulary,
)
from config.logging import configure_logging
from config.settings import get_base_settings, get_email_dictation_settings

SERVICE_NAME = "dictated_email"

DEFAULT_LOG_LEVEL = "INFO"

logger = logging.getLogger(__name__)


def initialize_app() -> None:
    """Inicializa logging estruturado JSON com correlation_id.

    Deve ser chamada uma vez no início do serviço.
    """
    log_level = os.getenv("LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()

    configure_logging(
        level=log_level,
        service_name=SERVICE_NAME,
        correlation_id_getter=get_correlation_id,
    )


def initialize_test_app() -> None:
    """Inicializa a aplicação para testes (nível DEBUG)."""
    configure_logging(
        level="DEBUG",
        service_name=f"{SERVICE_NAME}_test",
        correlation_id_getter=get_correlation_id,
    )


def validate_runtime_settings() -> None:
    """Valida settings obrigatórias no startup.

    Em `staging`/`production` falha rápido para impedir boot inválido.
    Em `development` mantém alerta sem bloquear execução local.
    """
    base_settings = get_base_settings()
    environment = base_settings.environment
    errors: list[str] = []

    errors.extend(f"base: {error}" for error in base_settings.validate())
    errors.extend(
        f"email_dictation: {error}" for error in get_email_dictation_settings().validate()
    )

    if not errors:
        logger.info(
            "settings_validated",
            extra={"component": "bootstrap", "result": "ok", "environment": environment},
        )
        return

    logger.warning(
        "settings_validation_failed",
        extra={
            "component": "bootstrap",
            "result": "failed",
            "environment": environment,
            "error_count": len(errors),
            "errors": errors,
        },
    )
    if base_settings.strict_validation:
        details = "\n".join(f"- {error}" for error in errors)
        raise RuntimeError(f"Configuração inválida para {environment}:\n{details}")


@lru_cache(maxsize=1)
def get_email_text_normalizer() -> EmailTextNormalizer:
    """Obtém o normalizador configurado pelas settings (singleton)."""
    settings = get_email_dictation_settings()
    vocabulary = build_vocabulary(
        extra_ignore=settings.extra_ignore_words,
        extra_at_aliases=settings.extra_at_aliases,
    )
    logger.info(
        "email_text_normalizer_created",
        extra={
            "component": "bootstrap",
            "ignore_words": len(vocabulary.ignore_words),
            "single_tokens": len(vocabulary.single_tokens),
            "infer_domain": settings.infer_domain,
        },
    )
    return EmailTextNormalizer(
        vocabulary,
        infer_domain=settings.infer_domain,
        providers=settings.providers or DEFAULT_PROVIDERS,
    )
