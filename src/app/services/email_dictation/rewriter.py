"""Reescrita de tokens ditados em uma string de símbolos de email.

Passada única, gulosa e sem backtracking. Em cada posição as regras são
aplicadas nesta ordem:

1. Token de preenchimento → descartado.
2. Bigrama "guion bajo" / "guion medio" / "guion alto" → símbolo (consome 2).
3. Palavra mapeada → símbolo. Apenas o primeiro `@` é emitido.
4. Símbolo literal já digitado (`.`, `_`, `-`, `+`) → emitido como está.
5. Demais tokens → apenas os caracteres `[a-z0-9._+-]`.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from app.services.email_dictation.vocabulary import AT_SYMBOL, DEFAULT_VOCABULARY

if TYPE_CHECKING:
    from collections.abc import Sequence

    from app.services.email_dictation.vocabulary import DictationVocabulary

_UNSUPPORTED_CHARS = re.compile(r"[^a-z0-9._+-]")


def strip_unsupported(token: str) -> str:
    """Remove caracteres que não podem aparecer no email."""
    return _UNSUPPORTED_CHARS.sub("", token)


def rewrite_tokens(
    tokens: Sequence[str],
    vocabulary: DictationVocabulary = DEFAULT_VOCABULARY,
) -> str:
    """Converte a sequência de tokens em uma string candidata a email.

    Args:
        tokens: Tokens canonicalizados, na ordem ditada.
        vocabulary: Tabelas de lookup.

    Returns:
        Candidato bruto (ainda sem as limpezas de pontos).
    """
    out: list[str] = []
    seen_at = False
    i = 0
    total = len(tokens)

    while i < total:
        token = tokens[i]

        if token in vocabulary.ignore_words:
            i += 1
            continue

        if i + 1 < total:
            bigram = vocabulary.bigram_symbol(token, tokens[i + 1])
            if bigram is not None:
                out.append(bigram)
                i += 2
                continue

        symbol = vocabulary.symbol_for(token)
        if symbol is not None:
            if symbol != AT_SYMBOL:
                out.append(symbol)
            elif not seen_at:
                out.append(AT_SYMBOL)
                seen_at = True
            i += 1
            continue

        if token in vocabulary.literal_symbols:
            out.append(token)
        else:
            out.append(strip_unsupported(token))
        i += 1

    return "".join(out)
