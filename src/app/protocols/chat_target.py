"""Protocolo de estratégias de resolução do chat de destino."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from .models import ChatTargetContext


class ChatTargetResolverProtocol(Protocol):
    """Estratégia que tenta resolver o chat id; None = passa para a próxima."""

    name: str

    def resolve(self, context: ChatTargetContext) -> int | None: ...
