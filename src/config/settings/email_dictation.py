"""Settings da normalização de emails ditados.

Permite estender o vocabulário sem alterar código (variantes de "arroba"
mal transcritas, palavras de preenchimento regionais) e ativar a
heurística de `@` inferido.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from functools import lru_cache

def _parse_csv(raw: str) -> tuple[str, ...]:
    """Converte "a, b,,c" em ("a", "b", "c")."""
    return tuple(item.strip() for item in raw.split(",") if item.strip())


def _parse_max_chars(raw: str) -> int | None:
    """Vazio ou "0" desativa o limite de tamanho."""
    value = int(raw) if raw.strip() else 0
    return value or None


@dataclass(frozen=True)
class EmailDictationSettings:
    """Configurações do normalizador de emails ditados.

    Attributes:
        extra_ignore_words: Palavras de preenchimento adicionais (ex: "porfa")
        extra_at_aliases: Variantes adicionais de "arroba"
        infer_domain: Ativa inferência de `@` por provedor conhecido
        providers: Provedores usados pela inferência (vazio = padrão)
        max_input_chars: Limite opcional de tamanho do texto na API
            (None = sem limite)
    """

    extra_ignore_words: tuple[str, ...] = field(default_factory=tuple)
    extra_at_aliases: tuple[str, ...] = field(default_factory=tuple)
    infer_domain: bool = False
    providers: tuple[str, ...] = field(default_factory=tuple)
    max_input_chars: int | None = None

    def validate(self) -> list[str]:
        """Valida configurações do normalizador.

        Returns:
            Lista de erros (vazia = OK).
        """
        errors: list[str] = []

        if self.max_input_chars is not None and self.max_input_chars < 1:
            errors.append("EMAIL_DICTATION_MAX_INPUT_CHARS deve ser >= 1 (0 desativa)")

        if any(" " in word for word in (*self.extra_ignore_words, *self.extra_at_aliases)):
            errors.append("Palavras extras do vocabulário não podem conter espaços")

        return errors


def _load_email_dictation_from_env() -> EmailDictationSettings:
    """Carrega EmailDictationSettings de variáveis de ambiente."""
    return EmailDictationSettings(
        extra_ignore_words=_parse_csv(os.getenv("EMAIL_DICTATION_EXTRA_IGNORE", "")),
        extra_at_aliases=_parse_csv(os.getenv("EMAIL_DICTATION_EXTRA_AT_ALIASES", "")),
        infer_domain=os.getenv("EMAIL_DICTATION_INFER_DOMAIN", "false").lower()
        in ("true", "1", "yes"),
        providers=_parse_csv(os.getenv("EMAIL_DICTATION_PROVIDERS", "")),
        max_input_chars=_parse_max_chars(os.getenv("EMAIL_DICTATION_MAX_INPUT_CHARS", "")),
    )


@lru_cache(maxsize=1)
def get_email_dictation_settings() -> EmailDictationSettings:
    """Retorna instância cacheada de EmailDictationSettings."""
    return _load_email_dictation_from_env()
