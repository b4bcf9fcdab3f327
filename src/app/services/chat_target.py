"""Resolução do chat de destino de um webhook GitHub.

Cadeia ordenada de estratégias; a primeira que resolver vence:
1. chat padrão configurado (RELAY_DEFAULT_CHAT_ID)
2. parâmetro ``token`` da query string, decifrado pelo codec

Novas estratégias (ex: mapeamento por repositório) entram como mais um item
da lista, sem mexer nas existentes.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from app.domain.errors import AuthError, RoutingError
from app.protocols.token_codec import InvalidChatTokenError

if TYPE_CHECKING:
    from collections.abc import Sequence

    from app.protocols.chat_target import ChatTargetResolverProtocol
    from app.protocols.models import ChatTargetContext
    from app.protocols.token_codec import TokenCodecProtocol

logger = logging.getLogger(__name__)

TOKEN_QUERY_PARAM = "token"


class DefaultChatTargetResolver:
    """Usa o chat padrão configurado, quando houver."""

    name = "default_chat_id"

    def __init__(self, default_chat_id: int | None) -> None:
        self._default_chat_id = default_chat_id

    def resolve(self, context: ChatTargetContext) -> int | None:
        return self._default_chat_id


class TokenChatTargetResolver:
    """Decifra o token de chat recebido na query string."""

    name = "chat_token"

    def __init__(self, codec: TokenCodecProtocol) -> None:
        self._codec = codec

    def resolve(self, context: ChatTargetContext) -> int | None:
        token = context.query_params.get(TOKEN_QUERY_PARAM)
        if not token:
            return None
        try:
            return self._codec.decode(token)
        except InvalidChatTokenError as exc:
            # O motivo exato fica só no log; a resposta é genérica
            logger.warning(
                "chat_token_decode_failed",
                extra={"error_type": type(exc).__name__, "reason": str(exc)},
            )
            raise AuthError("Invalid token") from exc


def resolve_chat_target(
    resolvers: Sequence[ChatTargetResolverProtocol],
    context: ChatTargetContext,
) -> int:
    """Percorre as estratégias em ordem e retorna o primeiro chat resolvido.

    Raises:
        AuthError: Se um token presente não puder ser decifrado
        RoutingError: Se nenhuma estratégia resolver um chat
    """
    for resolver in resolvers:
        chat_id = resolver.resolve(context)
        if chat_id is not None:
            logger.debug("chat_target_resolved", extra={"resolver": resolver.name})
            return chat_id
    raise RoutingError("No valid chat_id provided")
