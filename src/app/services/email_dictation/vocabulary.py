"""Vocabulário de palavras ditadas → símbolos de email.

As tabelas são imutáveis e construídas uma única vez no import.
Extensões (via settings) geram um NOVO vocabulário com `build_vocabulary`,
sem nunca alterar `DEFAULT_VOCABULARY`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING

from app.services.email_dictation.text import canonicalize

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

AT_SYMBOL = "@"
EMAIL_SYMBOLS = frozenset({"@", ".", "-", "_", "+"})
LITERAL_SYMBOLS = frozenset({".", "_", "-", "+"})

# Palavras de "relleno" que o ASR costuma transcrever junto com o email
DEFAULT_IGNORE_WORDS = frozenset(
    {
        "espacio",
        "espacios",
        "todo",
        "junto",
        "todojunto",
        "sin",
        "y",
        "con",
        "la",
        "el",
        "los",
        "las",
        "por",
        "favor",
        "porfavor",
    }
)

DEFAULT_SINGLE_TOKENS: dict[str, str] = {
    "@": "@",
    "arroba": "@",
    "aroba": "@",
    "arzroba": "@",
    "at": "@",
    "punto": ".",
    "puntos": ".",
    "dot": ".",
    "guion": "-",
    "guionmedio": "-",
    "guion-medio": "-",
    "dash": "-",
    "hyphen": "-",
    "guionbajo": "_",
    "underscore": "_",
    "mas": "+",
    "plus": "+",
}

BIGRAM_HEAD = "guion"
DEFAULT_BIGRAM_TAILS: dict[str, str] = {
    "bajo": "_",
    "medio": "-",
    "alto": "-",
}


def _frozen_mapping(data: Mapping[str, str]) -> Mapping[str, str]:
    return MappingProxyType(dict(data))


@dataclass(frozen=True, slots=True)
class DictationVocabulary:
    """Tabelas de lookup usadas pelo reescritor de tokens.

    Attributes:
        ignore_words: Tokens descartados sem emitir nada.
        single_tokens: Token → símbolo (`@`, `.`, `-`, `_`, `+`).
        bigram_head: Primeiro token dos bigramas ("guion").
        bigram_tails: Segundo token do bigrama → símbolo.
        literal_symbols: Símbolos já digitados que passam sem alteração.
    """

    ignore_words: frozenset[str] = DEFAULT_IGNORE_WORDS
    single_tokens: Mapping[str, str] = field(
        default_factory=lambda: _frozen_mapping(DEFAULT_SINGLE_TOKENS)
    )
    bigram_head: str = BIGRAM_HEAD
    bigram_tails: Mapping[str, str] = field(
        default_factory=lambda: _frozen_mapping(DEFAULT_BIGRAM_TAILS)
    )
    literal_symbols: frozenset[str] = LITERAL_SYMBOLS

    def symbol_for(self, token: str) -> str | None:
        return self.single_tokens.get(token)

    def bigram_symbol(self, head: str, tail: str) -> str | None:
        if head != self.bigram_head:
            return None
        return self.bigram_tails.get(tail)


DEFAULT_VOCABULARY = DictationVocabulary()


def _canonical_words(words: Iterable[str]) -> list[str]:
    canonical: list[str] = []
    for word in words:
        cleaned = canonicalize(word)
        if cleaned and " " not in cleaned:
            canonical.append(cleaned)
    return canonical


def build_vocabulary(
    *,
    extra_ignore: Iterable[str] = (),
    extra_at_aliases: Iterable[str] = (),
    extra_symbols: Mapping[str, str] | None = None,
    base: DictationVocabulary = DEFAULT_VOCABULARY,
) -> DictationVocabulary:
    """Cria vocabulário estendido a partir de `base`.

    Palavras extras são canonicalizadas (minúsculas, sem acentos) antes de
    entrar nas tabelas; entradas vazias ou com espaços são ignoradas.

    Args:
        extra_ignore: Palavras de preenchimento adicionais (ex: "porfa").
        extra_at_aliases: Variantes de "arroba" mal transcritas.
        extra_symbols: Mapeamentos adicionais palavra → símbolo.
        base: Vocabulário de partida (não é alterado).

    Raises:
        ValueError: Se algum símbolo não for um símbolo de email suportado.

    Returns:
        Novo DictationVocabulary.
    """
    single = dict(base.single_tokens)
    for alias in _canonical_words(extra_at_aliases):
        single[alias] = AT_SYMBOL

    for word, symbol in (extra_symbols or {}).items():
        if symbol not in EMAIL_SYMBOLS:
            raise ValueError(
                f"Símbolo inválido para '{word}': {symbol!r}. "
                f"Válidos: {' '.join(sorted(EMAIL_SYMBOLS))}"
            )
        for canonical in _canonical_words([word]):
            single[canonical] = symbol

    return DictationVocabulary(
        ignore_words=base.ignore_words | frozenset(_canonical_words(extra_ignore)),
        single_tokens=_frozen_mapping(single),
        bigram_head=base.bigram_head,
        bigram_tails=base.bigram_tails,
        literal_symbols=base.literal_symbols,
    )
