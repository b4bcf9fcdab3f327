"""Modelos compartilhados entre protocolos e implementações."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Literal


@dataclass(frozen=True, slots=True)
class SendResult:
    """Resultado de um envio à plataforma de chat.

    ok=False é falha de entrega, não exceção; description vem da Bot API.
    """

    ok: bool
    description: str | None = None
    message_id: int | None = None


@dataclass(frozen=True, slots=True)
class ChatTargetContext:
    """Dados do request disponíveis para resolver o chat de destino."""

    query_params: Mapping[str, str] = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class RelayResult:
    """Resultado do relay de um evento GitHub."""

    delivered: bool
    event_type: str
    reason: str | None = None


@dataclass(frozen=True, slots=True)
class BotUpdateResult:
    """Resultado do processamento de um update do bot."""

    status: Literal["token_sent", "ignored"]
    chat_id: int
