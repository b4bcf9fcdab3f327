"""Protocolo de normalização de eventos GitHub."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from app.domain.notifications import NotificationRecord


class GitHubEventNormalizerProtocol(Protocol):
    """Converte (tipo de evento, payload) em um record canônico."""

    def normalize(self, event_type: str, payload: dict[str, Any]) -> NotificationRecord: ...
