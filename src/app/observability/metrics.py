"""Métricas registradas como logs estruturados.

Agregáveis depois por qualquer backend de logs (BigQuery, CloudWatch
Insights etc.). Nenhuma métrica carrega o texto ditado.
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


def record_latency(
    component: str,
    operation: str,
    latency_ms: float,
    correlation_id: str | None = None,
) -> None:
    """Registra latência de operação.

    Args:
        component: Nome do componente (ex: "email_dictation")
        operation: Nome da operação (ex: "normalize")
        latency_ms: Latência em milissegundos
        correlation_id: ID de correlação para rastreamento
    """
    logger.info(
        "metric_latency",
        extra={
            "metric_type": "latency",
            "component": component,
            "operation": operation,
            "latency_ms": round(latency_ms, 2),
            "correlation_id": correlation_id,
        },
    )


def record_confidence(
    component: str,
    operation: str,
    confidence: float,
    correlation_id: str | None = None,
    *,
    is_valid: bool | None = None,
) -> None:
    """Registra a confiança atribuída a um resultado.

    Args:
        component: Nome do componente (ex: "email_dictation")
        operation: Nome da operação (ex: "normalize")
        confidence: Valor de confidence (0.0-1.0)
        correlation_id: ID de correlação para rastreamento
        is_valid: Resultado da validação, quando aplicável
    """
    extra: dict[str, object] = {
        "metric_type": "confidence",
        "component": component,
        "operation": operation,
        "confidence": round(confidence, 3),
        "correlation_id": correlation_id,
    }
    if is_valid is not None:
        extra["is_valid"] = is_valid

    logger.info("metric_confidence", extra=extra)
