"""Agregador de settings do relay.

Re-exporta todas as settings e funções de cada módulo.
Organização por domínio para isolamento de mudanças.
"""

from __future__ import annotations

# Base settings
from config.settings.base import (
    BaseSettings,
    Environment,
    get_base_settings,
)

# Channel-specific settings
from config.settings.github import (
    GitHubSettings,
    get_github_settings,
)
from config.settings.relay import (
    RelaySettings,
    get_relay_settings,
)
from config.settings.telegram import (
    DEFAULT_BOT_WEBHOOK_PATH,
    TELEGRAM_API_BASE_URL,
    TelegramSettings,
    get_telegram_settings,
)

__all__ = [
    # Constants
    "DEFAULT_BOT_WEBHOOK_PATH",
    "TELEGRAM_API_BASE_URL",
    # Base
    "BaseSettings",
    "Environment",
    # Channels
    "GitHubSettings",
    "RelaySettings",
    "TelegramSettings",
    "get_base_settings",
    "get_github_settings",
    "get_relay_settings",
    "get_telegram_settings",
]
