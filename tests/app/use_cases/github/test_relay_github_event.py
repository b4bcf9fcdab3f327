"""Testes do use case de relay GitHub -> Telegram."""

from __future__ import annotations

import pytest

from api.normalizers.github import GitHubEventNormalizer
from app.domain.errors import UpstreamError
from app.protocols.models import SendResult
from app.use_cases.github import RelayGitHubEventUseCase
from tests.fakes.fake_chat_sender import FakeChatSender

PUSH_PAYLOAD = {
    "ref": "refs/heads/main",
    "repository": {"full_name": "a/b", "html_url": "u"},
    "sender": {"login": "alice"},
    "head_commit": {"message": "x" * 150, "url": "c"},
}


def _use_case(sender: FakeChatSender) -> RelayGitHubEventUseCase:
    return RelayGitHubEventUseCase(normalizer=GitHubEventNormalizer(), sender=sender)


@pytest.mark.asyncio
async def test_push_is_delivered_as_html() -> None:
    sender = FakeChatSender()

    result = await _use_case(sender).execute(event_type="push", payload=PUSH_PAYLOAD, chat_id=42)

    assert result.delivered is True
    assert result.event_type == "push"
    assert len(sender.sent) == 1
    message = sender.sent[0]
    assert message.chat_id == 42
    assert message.parse_mode == "HTML"
    assert "main" in message.text
    assert "alice" in message.text
    assert f"Commit: {'x' * 100}..." in message.text


@pytest.mark.asyncio
async def test_merged_pull_request_uses_merged_verb() -> None:
    sender = FakeChatSender()
    payload = {
        "action": "closed",
        "pull_request": {"merged": True, "title": "T", "number": 7, "html_url": "h"},
        "repository": {"full_name": "a/b"},
        "sender": {"login": "bob"},
    }

    await _use_case(sender).execute(event_type="pull_request", payload=payload, chat_id=1)

    assert "bob merged pull request: T" in sender.sent[0].text


@pytest.mark.asyncio
async def test_missing_required_fields_skips_delivery() -> None:
    sender = FakeChatSender()

    result = await _use_case(sender).execute(
        event_type="pull_request",
        payload={"repository": {"full_name": "a/b"}},
        chat_id=1,
    )

    assert result.delivered is False
    assert result.reason == "no_message"
    assert sender.sent == []


@pytest.mark.asyncio
async def test_unknown_event_still_sends_generic_message() -> None:
    sender = FakeChatSender()

    result = await _use_case(sender).execute(event_type="star", payload={}, chat_id=1)

    assert result.delivered is True
    assert sender.sent[0].text == "Received GitHub event: star"


@pytest.mark.asyncio
async def test_bot_api_rejection_raises_upstream_error() -> None:
    sender = FakeChatSender(SendResult(ok=False, description="Forbidden: bot was blocked"))

    with pytest.raises(UpstreamError) as exc_info:
        await _use_case(sender).execute(event_type="push", payload=PUSH_PAYLOAD, chat_id=1)

    assert exc_info.value.status_code == 422
    assert exc_info.value.message == "Forbidden: bot was blocked"


@pytest.mark.asyncio
async def test_same_event_twice_is_delivered_twice() -> None:
    sender = FakeChatSender()
    use_case = _use_case(sender)

    await use_case.execute(event_type="push", payload=PUSH_PAYLOAD, chat_id=1)
    await use_case.execute(event_type="push", payload=PUSH_PAYLOAD, chat_id=1)

    assert len(sender.sent) == 2
    assert sender.sent[0] == sender.sent[1]
