"""Builders de payload para a Telegram Bot API."""

from api.payload_builders.telegram.text import SendMessagePayloadBuilder

__all__ = ["SendMessagePayloadBuilder"]
