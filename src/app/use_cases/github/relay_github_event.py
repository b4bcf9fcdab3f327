"""Use case: relay de um evento GitHub para um chat do Telegram.

Pipeline linear por request: normaliza -> formata -> envia (uma chamada à
Bot API, aguardada antes de responder). Sem retry e sem deduplicação: dois
requests iguais geram duas entregas.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from app.domain.errors import UpstreamError
from app.domain.messages import OutboundMessage
from app.protocols.models import RelayResult
from app.services.notification_formatter import format_notification

if TYPE_CHECKING:
    from app.protocols.chat_sender import ChatSenderProtocol
    from app.protocols.normalizer import GitHubEventNormalizerProtocol

logger = logging.getLogger(__name__)


class RelayGitHubEventUseCase:
    """Orquestra normalização, formatação e envio de um evento GitHub."""

    def __init__(
        self,
        normalizer: GitHubEventNormalizerProtocol,
        sender: ChatSenderProtocol,
    ) -> None:
        self._normalizer = normalizer
        self._sender = sender

    async def execute(
        self,
        *,
        event_type: str,
        payload: dict[str, Any],
        chat_id: int,
    ) -> RelayResult:
        """Entrega a notificação do evento ao chat informado.

        Raises:
            UpstreamError: Se a Bot API responder ok=false
        """
        record = self._normalizer.normalize(event_type, payload)
        text = format_notification(record)
        if not text:
            logger.info(
                "github_event_without_message",
                extra={"event_type": event_type, "record": type(record).__name__},
            )
            return RelayResult(delivered=False, event_type=event_type, reason="no_message")

        result = await self._sender.send_message(OutboundMessage(chat_id=chat_id, text=text))
        if not result.ok:
            logger.warning(
                "notification_delivery_failed",
                extra={"event_type": event_type, "description": result.description},
            )
            raise UpstreamError(result.description or "Failed to send message")

        logger.info(
            "notification_sent",
            extra={"event_type": event_type, "record": type(record).__name__},
        )
        return RelayResult(delivered=True, event_type=event_type)
