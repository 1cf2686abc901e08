"""Agregador de settings do serviço de emails ditados.

Re-exporta todas as settings e funções de cada módulo.
Organização por domínio para isolamento de mudanças.
"""

from __future__ import annotations

# Base settings
from config.settings.base import (
    DEFAULT_SERVICE_NAME,
    BaseSettings,
    Environment,
    get_base_settings,
)

# Normalização de emails ditados
from config.settings.email_dictation import (
    EmailDictationSettings,
    get_email_dictation_settings,
)

__all__ = [
    "DEFAULT_SERVICE_NAME",
    # Base
    "BaseSettings",
    # Email dictation
    "EmailDictationSettings",
    "Environment",
    "get_base_settings",
    "get_email_dictation_settings",
]
