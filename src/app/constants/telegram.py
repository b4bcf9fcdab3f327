"""Comandos do bot e textos fixos enviados ao Telegram."""

from __future__ import annotations

TOKEN_COMMAND = "/token"

TOKEN_REPLY_TEMPLATE = (
    "Your chat token:\n\n"
    "<code>{token}</code>\n\n"
    "Add ?token={token} to the GitHub webhook URL to receive notifications in this chat."
)
