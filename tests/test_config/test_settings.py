"""Testes das settings carregadas do ambiente."""

from __future__ import annotations

import pytest

from config.settings import (
    BaseSettings,
    RelaySettings,
    TelegramSettings,
    get_base_settings,
    get_github_settings,
    get_relay_settings,
    get_telegram_settings,
)

_ENV_VARS = (
    "ENVIRONMENT",
    "SERVICE_NAME",
    "DEBUG",
    "LOG_LEVEL",
    "TELEGRAM_BOT_TOKEN",
    "TELEGRAM_API_BASE_URL",
    "TELEGRAM_REQUEST_TIMEOUT_SECONDS",
    "TELEGRAM_WEBHOOK_PATH",
    "RELAY_SIGN_KEY",
    "RELAY_ADMIN_KEY",
    "RELAY_DEFAULT_CHAT_ID",
    "GITHUB_WEBHOOK_SECRET",
)


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


class TestBaseSettings:
    """Testes de BaseSettings."""

    def test_defaults(self, clean_env: pytest.MonkeyPatch) -> None:
        settings = get_base_settings()

        assert settings.environment == "development"
        assert settings.service_name == "hook-relay"
        assert settings.debug is False
        assert settings.log_level == "INFO"
        assert settings.validate() == []

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [("prod", "production"), ("STAGE", "staging"), ("qa", "development")],
    )
    def test_environment_aliases(
        self, clean_env: pytest.MonkeyPatch, raw: str, expected: str
    ) -> None:
        clean_env.setenv("ENVIRONMENT", raw)

        assert get_base_settings().environment == expected

    def test_invalid_log_level(self) -> None:
        errors = BaseSettings(log_level="LOUD").validate()

        assert errors == ["LOG_LEVEL inválido: LOUD"]

    def test_settings_are_cached(self, clean_env: pytest.MonkeyPatch) -> None:
        assert get_base_settings() is get_base_settings()


class TestTelegramSettings:
    """Testes de TelegramSettings."""

    def test_from_env(self, clean_env: pytest.MonkeyPatch) -> None:
        clean_env.setenv("TELEGRAM_BOT_TOKEN", "123:abc")
        clean_env.setenv("TELEGRAM_API_BASE_URL", "https://tg.test/")
        clean_env.setenv("TELEGRAM_REQUEST_TIMEOUT_SECONDS", "2.5")

        settings = get_telegram_settings()

        assert settings.request_timeout_seconds == 2.5
        assert settings.method_url("sendMessage") == "https://tg.test/bot123:abc/sendMessage"
        assert settings.bot_webhook_path == "/webhook/telegram"
        assert settings.validate() == []

    def test_api_endpoint_requires_token(self) -> None:
        with pytest.raises(ValueError, match="bot_token"):
            _ = TelegramSettings().api_endpoint

    def test_validate_reports_problems(self) -> None:
        errors = TelegramSettings(
            request_timeout_seconds=0,
            bot_webhook_path="webhook",
        ).validate()

        assert "TELEGRAM_BOT_TOKEN não configurado" in errors
        assert len(errors) == 3


class TestRelaySettings:
    """Testes de RelaySettings."""

    def test_from_env(self, clean_env: pytest.MonkeyPatch) -> None:
        clean_env.setenv("RELAY_SIGN_KEY", "sign")
        clean_env.setenv("RELAY_ADMIN_KEY", "admin")
        clean_env.setenv("RELAY_DEFAULT_CHAT_ID", " -100123 ")

        settings = get_relay_settings()

        assert settings == RelaySettings(
            sign_key="sign",
            admin_key="admin",
            default_chat_id=-100123,
        )
        assert settings.validate() == []

    def test_default_chat_id_is_optional(self, clean_env: pytest.MonkeyPatch) -> None:
        assert get_relay_settings().default_chat_id is None

    def test_invalid_default_chat_id_is_reported_by_validate(
        self, clean_env: pytest.MonkeyPatch
    ) -> None:
        clean_env.setenv("RELAY_SIGN_KEY", "sign")
        clean_env.setenv("RELAY_ADMIN_KEY", "admin")
        clean_env.setenv("RELAY_DEFAULT_CHAT_ID", "@channel")

        settings = get_relay_settings()

        assert settings.default_chat_id is None
        assert settings.validate() == ["RELAY_DEFAULT_CHAT_ID inválido: '@channel'"]

    def test_validate_missing_keys(self) -> None:
        assert RelaySettings().validate() == [
            "RELAY_SIGN_KEY não configurado",
            "RELAY_ADMIN_KEY não configurado",
        ]


def test_github_signature_enabled(clean_env: pytest.MonkeyPatch) -> None:
    assert get_github_settings().signature_enabled is False

    get_github_settings.cache_clear()
    clean_env.setenv("GITHUB_WEBHOOK_SECRET", "s")

    assert get_github_settings().signature_enabled is True
