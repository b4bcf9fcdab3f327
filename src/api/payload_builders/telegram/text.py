"""Builder para sendMessage."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from app.domain.messages import OutboundMessage


class SendMessagePayloadBuilder:
    """Builder para mensagens de texto da Bot API."""

    def build(self, message: OutboundMessage) -> dict[str, Any]:
        """Constrói o corpo JSON de sendMessage.

        Args:
            message: Mensagem a enviar

        Returns:
            Payload conforme a Bot API (parse_mode só quando definido)
        """
        payload: dict[str, Any] = {
            "chat_id": message.chat_id,
            "text": message.text,
            "disable_web_page_preview": message.disable_web_page_preview,
        }
        if message.parse_mode:
            payload["parse_mode"] = message.parse_mode
        return payload
