"""Testes para as limpezas finais de pontos."""

from __future__ import annotations

import pytest

from app.services.email_dictation.cleanup import cleanup_candidate


@pytest.mark.parametrize(
    ("candidate", "expected"),
    [
        ("ana..garcia@gmail..com", "ana.garcia@gmail.com"),
        ("ana.@gmail.com", "ana@gmail.com"),
        ("ana@.gmail.com", "ana@gmail.com"),
        (".ana@gmail.com.", "ana@gmail.com"),
        ("...ana...", "ana"),
        ("ana.garcia", "ana.garcia"),
        ("...", ""),
        ("", ""),
        ("@", "@"),
    ],
)
def test_cleanup_candidate(candidate: str, expected: str) -> None:
    assert cleanup_candidate(candidate) == expected


def test_only_first_at_is_honored() -> None:
    assert cleanup_candidate("ana@gmail.com@extra.org") == "ana@gmail.com"


def test_domain_never_keeps_consecutive_dots() -> None:
    cleaned = cleanup_candidate("ana@.....gmail....com....")
    assert cleaned == "ana@gmail.com"
    assert ".." not in cleaned
