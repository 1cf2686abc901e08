"""Configuração de logging estruturado (JSON).

Uso:
    from config.logging import configure_logging, get_logger

    # Na inicialização (app/bootstrap)
    configure_logging(level="INFO", service_name="dictated_email")

    # Em qualquer módulo
    logger = get_logger(__name__)
    logger.info("email_dictation_normalized", extra={"confidence": 0.99})

Todo log carrega correlation_id, service, level, logger, message e asctime.
Nunca registrar o texto ditado nem o email resultante (PII).
"""

from config.logging.config import configure_logging, get_logger
from config.logging.filters import CorrelationIdFilter
from config.logging.formatters import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    create_json_formatter,
)

__all__ = [
    "FIELD_RENAME_MAP",
    "REQUIRED_LOG_FIELDS",
    "CorrelationIdFilter",
    "configure_logging",
    "create_json_formatter",
    "get_logger",
]
