"""Extrator de updates da Telegram Bot API.

Estrutura do webhook Telegram:
- update_id
- message (ou edited_message, channel_post, callback_query, etc.)

Só ``message`` é considerado: é por ele que chegam os comandos do bot.
"""

from __future__ import annotations

from typing import Any


def extract_update_message(update: dict[str, Any]) -> dict[str, Any] | None:
    """Retorna o objeto ``message`` do update, se houver."""
    message = update.get("message")
    if isinstance(message, dict):
        return message
    return None


def extract_chat_id(message: dict[str, Any]) -> int | None:
    """Retorna ``message.chat.id`` quando for um inteiro."""
    chat = message.get("chat")
    if not isinstance(chat, dict):
        return None
    chat_id = chat.get("id")
    if isinstance(chat_id, bool) or not isinstance(chat_id, int):
        return None
    return chat_id
