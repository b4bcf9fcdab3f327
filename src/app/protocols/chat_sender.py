"""Protocolo de envio outbound para a plataforma de chat."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from app.domain.messages import OutboundMessage

    from .models import SendResult


class ChatSenderProtocol(Protocol):
    """Contrato mínimo para enviar uma mensagem (sendMessage)."""

    async def send_message(self, message: OutboundMessage) -> SendResult: ...
