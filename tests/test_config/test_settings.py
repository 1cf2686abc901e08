"""Testes para config.settings (base e email_dictation)."""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from config.settings import (
    DEFAULT_SERVICE_NAME,
    BaseSettings,
    EmailDictationSettings,
    get_base_settings,
    get_email_dictation_settings,
)


@pytest.fixture(autouse=True)
def fresh_settings() -> Iterator[None]:
    get_base_settings.cache_clear()
    get_email_dictation_settings.cache_clear()
    yield
    get_base_settings.cache_clear()
    get_email_dictation_settings.cache_clear()


class TestBaseSettings:
    """Testes para BaseSettings."""

    def test_default_values(self) -> None:
        settings = BaseSettings()

        assert settings.environment == "development"
        assert settings.service_name == DEFAULT_SERVICE_NAME
        assert settings.strict_validation is False
        assert settings.validate() == []

    @pytest.mark.parametrize(
        ("environment", "strict"),
        [("development", False), ("staging", True), ("production", True)],
    )
    def test_strict_validation_by_environment(self, environment: str, strict: bool) -> None:
        assert BaseSettings(environment=environment).strict_validation is strict  # type: ignore[arg-type]

    def test_empty_service_name_is_invalid(self) -> None:
        assert BaseSettings(service_name="").validate() == ["SERVICE_NAME não pode ser vazio"]

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("prod", "production"),
            ("STAGE", "staging"),
            (" dev ", "development"),
            ("qualquer", "development"),
        ],
    )
    def test_environment_aliases(
        self, monkeypatch: pytest.MonkeyPatch, raw: str, expected: str
    ) -> None:
        monkeypatch.setenv("ENVIRONMENT", raw)

        assert get_base_settings().environment == expected

    def test_immutable(self) -> None:
        settings = BaseSettings()

        with pytest.raises(AttributeError):
            settings.debug = True  # type: ignore[misc]


class TestEmailDictationSettings:
    """Testes para EmailDictationSettings."""

    def test_default_values(self) -> None:
        settings = EmailDictationSettings()

        assert settings.extra_ignore_words == ()
        assert settings.extra_at_aliases == ()
        assert settings.infer_domain is False
        assert settings.providers == ()
        assert settings.max_input_chars is None
        assert settings.validate() == []

    def test_loads_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("EMAIL_DICTATION_EXTRA_IGNORE", "porfa, ,gracias")
        monkeypatch.setenv("EMAIL_DICTATION_EXTRA_AT_ALIASES", "arrova")
        monkeypatch.setenv("EMAIL_DICTATION_INFER_DOMAIN", "1")
        monkeypatch.setenv("EMAIL_DICTATION_PROVIDERS", "gmail,empresa")
        monkeypatch.setenv("EMAIL_DICTATION_MAX_INPUT_CHARS", "300")

        settings = get_email_dictation_settings()

        assert settings.extra_ignore_words == ("porfa", "gracias")
        assert settings.extra_at_aliases == ("arrova",)
        assert settings.infer_domain is True
        assert settings.providers == ("gmail", "empresa")
        assert settings.max_input_chars == 300

    @pytest.mark.parametrize("raw", ["", "0", "  "])
    def test_max_input_chars_disabled_from_env(
        self, monkeypatch: pytest.MonkeyPatch, raw: str
    ) -> None:
        monkeypatch.setenv("EMAIL_DICTATION_MAX_INPUT_CHARS", raw)

        assert get_email_dictation_settings().max_input_chars is None

    def test_invalid_max_input_chars(self) -> None:
        errors = EmailDictationSettings(max_input_chars=-1).validate()

        assert errors == ["EMAIL_DICTATION_MAX_INPUT_CHARS deve ser >= 1 (0 desativa)"]

    def test_words_with_spaces_are_invalid(self) -> None:
        errors = EmailDictationSettings(extra_at_aliases=("a roba",)).validate()

        assert errors == ["Palavras extras do vocabulário não podem conter espaços"]
