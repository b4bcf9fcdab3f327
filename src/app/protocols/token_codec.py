"""Protocolo do codec de tokens de chat."""

from __future__ import annotations

from typing import Protocol


class InvalidChatTokenError(Exception):
    """Token rejeitado pelo codec (erro esperado pelos consumidores)."""


class TokenCodecProtocol(Protocol):
    """Transformação reversível chat id <-> token opaco.

    decode levanta InvalidChatTokenError (nunca devolve outro id) para tokens
    inválidos.
    """

    def encode(self, chat_id: int) -> str: ...

    def decode(self, token: str) -> int: ...
