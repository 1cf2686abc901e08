"""Heurística opcional para inferir o `@` quando nenhum separador foi ditado.

Exemplo: "juan perez gmail punto com" vira "juanperezgmail.com"; como o
candidato termina em um provedor conhecido, o `@` é inserido antes dele
("juanperez@gmail.com"). Desativada por padrão.
"""

from __future__ import annotations

import re
from functools import lru_cache
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

DEFAULT_PROVIDERS: tuple[str, ...] = (
    "gmail",
    "googlemail",
    "hotmail",
    "outlook",
    "live",
    "msn",
    "yahoo",
    "ymail",
    "icloud",
    "aol",
    "protonmail",
    "proton",
    "gmx",
    "telefonica",
    "movistar",
)


@lru_cache(maxsize=8)
def _suffix_pattern(providers: tuple[str, ...]) -> re.Pattern[str]:
    alternatives = "|".join(
        re.escape(provider) for provider in sorted(providers, key=len, reverse=True)
    )
    return re.compile(
        rf"^(?P<local>[a-z0-9._+-]+?)\.?"
        rf"(?P<domain>(?:{alternatives})\.[a-z]{{2,}}(?:\.[a-z]{{2,}})?)$"
    )


def infer_separator(
    candidate: str,
    providers: Iterable[str] = DEFAULT_PROVIDERS,
) -> str | None:
    """Insere `@` antes de um domínio de provedor conhecido no fim do candidato.

    Args:
        candidate: Candidato limpo, sem `@`.
        providers: Rótulos de provedores (ex: "gmail", "hotmail").

    Returns:
        Candidato com `@` inferido, ou None se a heurística não se aplica.
    """
    if not candidate or "@" in candidate:
        return None

    labels = tuple(sorted({p.strip().lower() for p in providers if p and p.strip()}))
    if not labels:
        return None

    match = _suffix_pattern(labels).fullmatch(candidate)
    if match is None:
        return None

    local = match.group("local").strip(".")
    if not local:
        return None
    return f"{local}@{match.group('domain')}"
