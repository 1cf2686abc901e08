"""Settings base do serviço de emails ditados.

Ambiente, nome do serviço (logs e /health) e modo debug.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Literal

Environment = Literal["development", "staging", "production"]

DEFAULT_SERVICE_NAME = "dictated-email"

_ENVIRONMENT_ALIASES: dict[str, Environment] = {
    "development": "development",
    "dev": "development",
    "staging": "staging",
    "stage": "staging",
    "production": "production",
    "prod": "production",
}

# Ambientes em que configuração inválida impede o boot
_STRICT_ENVIRONMENTS = frozenset({"staging", "production"})


@dataclass(frozen=True)
class BaseSettings:
    """Configurações base do serviço.

    Attributes:
        environment: development | staging | production
        service_name: Nome exposto nos logs e no /health
        debug: Modo debug ativo
    """

    environment: Environment = "development"
    service_name: str = DEFAULT_SERVICE_NAME
    debug: bool = False

    @property
    def strict_validation(self) -> bool:
        """True quando erros de configuração devem abortar o startup."""
        return self.environment in _STRICT_ENVIRONMENTS

    def validate(self) -> list[str]:
        errors: list[str] = []
        if self.environment not in _ENVIRONMENT_ALIASES.values():
            errors.append(f"ENVIRONMENT inválido: {self.environment}")
        if not self.service_name:
            errors.append("SERVICE_NAME não pode ser vazio")
        return errors


def _parse_environment(raw: str) -> Environment:
    """Resolve aliases (prod, stage, dev); valores desconhecidos viram development."""
    return _ENVIRONMENT_ALIASES.get(raw.strip().lower(), "development")


@lru_cache(maxsize=1)
def get_base_settings() -> BaseSettings:
    """Retorna instância cacheada de BaseSettings lida do ambiente."""
    return BaseSettings(
        environment=_parse_environment(os.getenv("ENVIRONMENT", "development")),
        service_name=os.getenv("SERVICE_NAME", DEFAULT_SERVICE_NAME),
        debug=os.getenv("DEBUG", "").lower() in ("true", "1", "yes"),
    )
