"""Protocolos e contratos do core da aplicação."""

from .chat_sender import ChatSenderProtocol
from .chat_target import ChatTargetResolverProtocol
from .models import BotUpdateResult, ChatTargetContext, RelayResult, SendResult
from .normalizer import GitHubEventNormalizerProtocol
from .token_codec import InvalidChatTokenError, TokenCodecProtocol

__all__ = [
    "BotUpdateResult",
    "ChatSenderProtocol",
    "ChatTargetContext",
    "ChatTargetResolverProtocol",
    "GitHubEventNormalizerProtocol",
    "InvalidChatTokenError",
    "RelayResult",
    "SendResult",
    "TokenCodecProtocol",
]
