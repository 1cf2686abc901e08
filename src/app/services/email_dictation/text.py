"""Canonicalização e tokenização do texto ditado."""

from __future__ import annotations

import re
import unicodedata

# Bloco "Combining Diacritical Marks" (U+0300 a U+036F)
_DIACRITICS_RE = re.compile("[\u0300-\u036f]")


def canonicalize(text: str) -> str:
    """Remove espaços das bordas, passa para minúsculas e remove acentos.

    A decomposição NFD separa a letra base da marca diacrítica
    ("é" → "e" + U+0301), e as marcas do bloco U+0300 a U+036F são
    descartadas. Outras marcas combinantes ficam para o rewriter, que
    remove qualquer caractere fora do alfabeto de email.
    """
    lowered = text.strip().lower()
    return _DIACRITICS_RE.sub("", unicodedata.normalize("NFD", lowered))


def tokenize(text: str) -> list[str]:
    """Divide em tokens por sequências de espaço em branco (sem tokens vazios)."""
    return text.split()
