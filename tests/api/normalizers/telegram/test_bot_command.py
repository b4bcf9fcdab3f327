"""Testes da extração de comandos dos updates do bot."""

from __future__ import annotations

from api.normalizers import extract_bot_command
from app.domain.messages import BotCommand


def test_extracts_chat_id_and_text() -> None:
    update = {"update_id": 1, "message": {"chat": {"id": -100}, "text": "/token"}}

    assert extract_bot_command(update) == BotCommand(chat_id=-100, text="/token")


def test_text_defaults_to_empty() -> None:
    update = {"message": {"chat": {"id": 5}, "photo": []}}

    assert extract_bot_command(update) == BotCommand(chat_id=5, text="")


def test_missing_message_returns_none() -> None:
    assert extract_bot_command({"edited_message": {"chat": {"id": 5}}}) is None


def test_missing_chat_id_returns_none() -> None:
    assert extract_bot_command({"message": {"chat": {}, "text": "/token"}}) is None
    assert extract_bot_command({"message": {"text": "/token"}}) is None


def test_non_integer_chat_id_returns_none() -> None:
    assert extract_bot_command({"message": {"chat": {"id": "5"}, "text": "hi"}}) is None
    assert extract_bot_command({"message": {"chat": {"id": True}, "text": "hi"}}) is None
