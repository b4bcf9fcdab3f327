"""Testes do endpoint POST /webhook/telegram."""

from __future__ import annotations

import json
from types import SimpleNamespace

import pytest

from api.routes.telegram import webhook
from app.protocols.models import SendResult
from app.use_cases.telegram import HandleBotUpdateUseCase
from tests.fakes.asgi_request import build_request
from tests.fakes.fake_chat_sender import FakeChatSender, FakeTokenCodec


def _body(response) -> dict[str, object]:
    return json.loads(response.body.decode("utf-8"))


def _request(payload: object = None, *, raw: bytes | None = None):
    body = raw if raw is not None else json.dumps(payload).encode("utf-8")
    return build_request(method="POST", path="/webhook/telegram", body=body)


def _install(monkeypatch: pytest.MonkeyPatch, sender: FakeChatSender, bot_token: str = "1:x"):
    monkeypatch.setattr(
        webhook,
        "get_telegram_settings",
        lambda: SimpleNamespace(bot_token=bot_token),
    )
    monkeypatch.setattr(
        webhook,
        "create_handle_bot_update_use_case",
        lambda: HandleBotUpdateUseCase(codec=FakeTokenCodec(), sender=sender),
    )


@pytest.mark.asyncio
async def test_token_command(monkeypatch: pytest.MonkeyPatch) -> None:
    sender = FakeChatSender()
    _install(monkeypatch, sender)

    response = await webhook.receive_bot_update(
        _request({"message": {"chat": {"id": 42}, "text": "/token"}})
    )

    assert response.status_code == 200
    assert _body(response) == {"code": 200, "message": "success"}
    assert sender.sent[0].chat_id == 42
    assert "tok-42" in sender.sent[0].text


@pytest.mark.asyncio
async def test_other_text_is_acknowledged(monkeypatch: pytest.MonkeyPatch) -> None:
    sender = FakeChatSender()
    _install(monkeypatch, sender)

    response = await webhook.receive_bot_update(
        _request({"message": {"chat": {"id": 42}, "text": "hello"}})
    )

    assert response.status_code == 200
    assert sender.sent == []


@pytest.mark.asyncio
async def test_missing_chat_id(monkeypatch: pytest.MonkeyPatch) -> None:
    _install(monkeypatch, FakeChatSender())

    response = await webhook.receive_bot_update(_request({"update_id": 1}))

    assert response.status_code == 400
    assert _body(response) == {"code": 400, "message": "No chat_id found"}


@pytest.mark.asyncio
async def test_invalid_json(monkeypatch: pytest.MonkeyPatch) -> None:
    _install(monkeypatch, FakeChatSender())

    response = await webhook.receive_bot_update(_request(raw=b"not json"))

    assert response.status_code == 400


@pytest.mark.asyncio
async def test_non_object_json(monkeypatch: pytest.MonkeyPatch) -> None:
    _install(monkeypatch, FakeChatSender())

    response = await webhook.receive_bot_update(_request([1, 2]))

    assert response.status_code == 400


@pytest.mark.asyncio
async def test_missing_bot_token(monkeypatch: pytest.MonkeyPatch) -> None:
    sender = FakeChatSender()
    _install(monkeypatch, sender, bot_token="")

    response = await webhook.receive_bot_update(
        _request({"message": {"chat": {"id": 42}, "text": "/token"}})
    )

    assert response.status_code == 500
    assert _body(response) == {"code": 500, "message": "Bot token not configured"}
    assert sender.sent == []


@pytest.mark.asyncio
async def test_send_failure_still_acknowledged(monkeypatch: pytest.MonkeyPatch) -> None:
    sender = FakeChatSender(SendResult(ok=False, description="Forbidden"))
    _install(monkeypatch, sender)

    response = await webhook.receive_bot_update(
        _request({"message": {"chat": {"id": 42}, "text": "/token"}})
    )

    assert response.status_code == 200
    assert _body(response) == {"code": 200, "message": "success"}


@pytest.mark.asyncio
async def test_codec_failure_still_acknowledged(monkeypatch: pytest.MonkeyPatch) -> None:
    from app.infra.crypto import ChatTokenError

    _install(monkeypatch, FakeChatSender())

    def _no_sign_key() -> HandleBotUpdateUseCase:
        raise ChatTokenError("sign_key é obrigatório")

    monkeypatch.setattr(webhook, "create_handle_bot_update_use_case", _no_sign_key)

    response = await webhook.receive_bot_update(
        _request({"message": {"chat": {"id": 42}, "text": "/token"}})
    )

    assert response.status_code == 200
