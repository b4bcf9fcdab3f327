"""Testes da cadeia de resolução do chat de destino."""

from __future__ import annotations

import pytest

from app.domain.errors import AuthError, RoutingError
from app.infra.crypto import ChatTokenCodec
from app.protocols.models import ChatTargetContext
from app.services.chat_target import (
    DefaultChatTargetResolver,
    TokenChatTargetResolver,
    resolve_chat_target,
)

CODEC = ChatTokenCodec("sign-key")


def _context(**params: str) -> ChatTargetContext:
    return ChatTargetContext(query_params=params)


def test_default_chat_wins_over_token() -> None:
    resolvers = [DefaultChatTargetResolver(111), TokenChatTargetResolver(CODEC)]

    chat_id = resolve_chat_target(resolvers, _context(token=CODEC.encode(222)))

    assert chat_id == 111


def test_token_used_without_default() -> None:
    resolvers = [DefaultChatTargetResolver(None), TokenChatTargetResolver(CODEC)]

    assert resolve_chat_target(resolvers, _context(token=CODEC.encode(-1002))) == -1002


def test_no_target_raises_routing_error() -> None:
    resolvers = [DefaultChatTargetResolver(None), TokenChatTargetResolver(CODEC)]

    with pytest.raises(RoutingError) as exc_info:
        resolve_chat_target(resolvers, _context())

    assert exc_info.value.status_code == 422
    assert exc_info.value.message == "No valid chat_id provided"


def test_empty_token_is_ignored() -> None:
    with pytest.raises(RoutingError):
        resolve_chat_target([TokenChatTargetResolver(CODEC)], _context(token=""))


def test_undecodable_token_raises_auth_error() -> None:
    with pytest.raises(AuthError) as exc_info:
        resolve_chat_target([TokenChatTargetResolver(CODEC)], _context(token="garbage"))

    assert exc_info.value.status_code == 401
    assert exc_info.value.message == "Invalid token"


def test_token_from_other_key_raises_auth_error() -> None:
    token = ChatTokenCodec("other-key").encode(5)

    with pytest.raises(AuthError):
        resolve_chat_target([TokenChatTargetResolver(CODEC)], _context(token=token))


def test_default_chat_zero_is_a_valid_target() -> None:
    assert resolve_chat_target([DefaultChatTargetResolver(0)], _context()) == 0
