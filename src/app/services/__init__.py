"""Serviços de aplicação.

Unidades reutilizáveis sem IO direto: formatação e resolução de destino.
"""

from app.services.chat_target import (
    DefaultChatTargetResolver,
    TokenChatTargetResolver,
    resolve_chat_target,
)
from app.services.notification_formatter import format_notification

__all__ = [
    "DefaultChatTargetResolver",
    "TokenChatTargetResolver",
    "format_notification",
    "resolve_chat_target",
]
