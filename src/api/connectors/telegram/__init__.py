"""Conector Telegram: adapter de borda para a Bot API.

Único ponto de IO com o Telegram: sendMessage, setWebhook, getWebhookInfo.
"""

from .bot_api_errors import BotApiResult, parse_bot_api_result
from .http_client import TelegramBotClient, create_telegram_bot_client

__all__ = [
    "BotApiResult",
    "TelegramBotClient",
    "create_telegram_bot_client",
    "parse_bot_api_result",
]
