"""Settings específicas de Telegram.

Configurações do canal Telegram via Bot API.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

# Constantes da Telegram Bot API
TELEGRAM_API_BASE_URL: str = "https://api.telegram.org"
DEFAULT_BOT_WEBHOOK_PATH: str = "/webhook/telegram"


@dataclass(frozen=True)
class TelegramSettings:
    """Configurações do canal Telegram.

    Attributes:
        bot_token: Token do bot Telegram (obtido via @BotFather)
        api_base_url: URL base da API
        request_timeout_seconds: Timeout para requisições HTTP
        bot_webhook_path: Caminho público onde o bot recebe updates
    """

    # Credenciais
    bot_token: str = ""

    # API
    api_base_url: str = TELEGRAM_API_BASE_URL

    # Timeouts
    request_timeout_seconds: float = 10.0

    # Webhook do próprio bot (usado pelo /register)
    bot_webhook_path: str = DEFAULT_BOT_WEBHOOK_PATH

    @property
    def api_endpoint(self) -> str:
        """URL base completa da API com token do bot."""
        if not self.bot_token:
            raise ValueError("bot_token é obrigatório")
        return f"{self.api_base_url.rstrip('/')}/bot{self.bot_token}"

    def method_url(self, method: str) -> str:
        """Retorna URL de um método da Bot API (ex: sendMessage)."""
        return f"{self.api_endpoint}/{method}"

    def validate(self) -> list[str]:
        """Valida configurações mínimas de Telegram."""
        errors: list[str] = []
        if not self.bot_token:
            errors.append("TELEGRAM_BOT_TOKEN não configurado")
        if self.request_timeout_seconds <= 0:
            errors.append("TELEGRAM_REQUEST_TIMEOUT_SECONDS deve ser > 0")
        if not self.bot_webhook_path.startswith("/"):
            errors.append("TELEGRAM_WEBHOOK_PATH deve começar com '/'")
        return errors


def _load_from_env() -> TelegramSettings:
    """Carrega TelegramSettings de variáveis de ambiente."""
    return TelegramSettings(
        bot_token=os.getenv("TELEGRAM_BOT_TOKEN", ""),
        api_base_url=os.getenv("TELEGRAM_API_BASE_URL", TELEGRAM_API_BASE_URL),
        request_timeout_seconds=float(
            os.getenv("TELEGRAM_REQUEST_TIMEOUT_SECONDS", "10")
        ),
        bot_webhook_path=os.getenv("TELEGRAM_WEBHOOK_PATH", DEFAULT_BOT_WEBHOOK_PATH),
    )


@lru_cache(maxsize=1)
def get_telegram_settings() -> TelegramSettings:
    """Retorna instância cacheada de TelegramSettings."""
    return _load_from_env()
