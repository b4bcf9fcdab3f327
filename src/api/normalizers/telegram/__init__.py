"""Normalizer Telegram: extração de comandos dos updates do bot.

Responsabilidades:
- Extrair a mensagem do update da Bot API (webhook)
- Reduzir para BotCommand (chat id + texto)
"""

from .extractor import extract_update_message
from .normalizer import extract_bot_command

__all__ = ["extract_bot_command", "extract_update_message"]
