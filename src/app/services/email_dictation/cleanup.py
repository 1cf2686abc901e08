"""Limpezas finais de pontos sobre o candidato reescrito."""

from __future__ import annotations

import re

_DOT_RUN = re.compile(r"\.+")
_DOT_BEFORE_AT = re.compile(r"\.@")
_DOT_AFTER_AT = re.compile(r"@\.?")


def _strip_dots(value: str) -> str:
    return value.strip(".")


def cleanup_candidate(candidate: str) -> str:
    """Colapsa pontos repetidos e remove pontos soltos ao redor do `@`.

    Se houver mais de um `@`, apenas o primeiro é respeitado e tudo depois
    do segundo é descartado.
    """
    out = _DOT_RUN.sub(".", candidate)
    out = _DOT_BEFORE_AT.sub("@", out)
    out = _DOT_AFTER_AT.sub("@", out)

    if "@" not in out:
        return _strip_dots(out)

    local, domain = out.split("@", 2)[:2]
    domain = _DOT_RUN.sub(".", _strip_dots(domain))
    return f"{_strip_dots(local)}@{domain}"
