"""Modelos de domínio do relay (records canônicos, mensagens e erros)."""

from app.domain.errors import (
    AuthError,
    InternalError,
    RelayError,
    RoutingError,
    UpstreamError,
    ValidationError,
)
from app.domain.messages import BotCommand, OutboundMessage
from app.domain.notifications import (
    GenericEvent,
    IssueUpdate,
    NotificationRecord,
    PullRequestUpdate,
    PushUpdate,
    ReleaseUpdate,
    Unrecognized,
)

__all__ = [
    "AuthError",
    "BotCommand",
    "GenericEvent",
    "InternalError",
    "IssueUpdate",
    "NotificationRecord",
    "OutboundMessage",
    "PullRequestUpdate",
    "PushUpdate",
    "RelayError",
    "ReleaseUpdate",
    "RoutingError",
    "Unrecognized",
    "UpstreamError",
    "ValidationError",
]
