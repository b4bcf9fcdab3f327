"""Factories de dependências: criação de implementações concretas.

Tudo aqui é barato e sem estado mutável: as factories são chamadas a cada
request, lendo apenas settings imutáveis (cacheadas).
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from api.connectors.telegram import create_telegram_bot_client
from api.normalizers.github import GitHubEventNormalizer
from app.infra.crypto import ChatTokenCodec
from app.services.chat_target import DefaultChatTargetResolver, TokenChatTargetResolver
from app.use_cases.github import RelayGitHubEventUseCase
from app.use_cases.telegram import HandleBotUpdateUseCase
from config.settings import get_relay_settings

if TYPE_CHECKING:
    from app.protocols.chat_target import ChatTargetResolverProtocol

logger = logging.getLogger(__name__)


def create_token_codec() -> ChatTokenCodec:
    """Cria o codec de tokens com a chave configurada.

    Raises:
        ChatTokenError: Se RELAY_SIGN_KEY não estiver configurado
    """
    return ChatTokenCodec(get_relay_settings().sign_key)


def create_chat_target_resolvers() -> list[ChatTargetResolverProtocol]:
    """Cria a cadeia de resolução do chat de destino (ordem = prioridade)."""
    settings = get_relay_settings()
    resolvers: list[ChatTargetResolverProtocol] = [
        DefaultChatTargetResolver(settings.default_chat_id),
    ]
    if settings.sign_key:
        resolvers.append(TokenChatTargetResolver(ChatTokenCodec(settings.sign_key)))
    else:
        logger.debug("chat_token_resolver_disabled", extra={"reason": "missing_sign_key"})
    return resolvers


def create_relay_github_event_use_case() -> RelayGitHubEventUseCase:
    """Cria o use case de relay GitHub -> Telegram."""
    return RelayGitHubEventUseCase(
        normalizer=GitHubEventNormalizer(),
        sender=create_telegram_bot_client(),
    )


def create_handle_bot_update_use_case() -> HandleBotUpdateUseCase:
    """Cria o use case de comandos do bot."""
    return HandleBotUpdateUseCase(
        codec=create_token_codec(),
        sender=create_telegram_bot_client(),
    )
