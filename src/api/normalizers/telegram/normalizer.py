"""Normalizer Telegram: converte updates em comandos do bot."""

from __future__ import annotations

from typing import Any

from app.domain.messages import BotCommand

from .extractor import extract_chat_id, extract_update_message


def extract_bot_command(update: dict[str, Any]) -> BotCommand | None:
    """Reduz o update a (chat_id, text).

    Returns:
        BotCommand, ou None quando o update não traz chat id
    """
    message = extract_update_message(update)
    if message is None:
        return None

    chat_id = extract_chat_id(message)
    if chat_id is None:
        return None

    text = message.get("text")
    return BotCommand(chat_id=chat_id, text=text if isinstance(text, str) else "")
