"""Renderização de records canônicos em texto HTML do Telegram.

Vocabulário fixo: título em negrito, uma linha de link, linha(s) de corpo.
Títulos e mensagens de commit são interpolados sem escape HTML (limitação
conhecida: o texto do usuário pode quebrar o parse_mode HTML).
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from app.domain.notifications import (
    GenericEvent,
    IssueUpdate,
    NotificationRecord,
    PullRequestUpdate,
    PushUpdate,
    ReleaseUpdate,
    Unrecognized,
)


def _format_pull_request(record: PullRequestUpdate) -> str:
    return (
        "<b>GitHub Pull Request</b>\n\n"
        f'<a href="{record.url}">{record.repository} #{record.number}</a>\n'
        f"{record.actor} {record.verb} pull request: {record.title}"
    )


def _format_issue(record: IssueUpdate) -> str:
    return (
        "<b>GitHub Issue</b>\n\n"
        f'<a href="{record.url}">{record.repository} #{record.number}</a>\n'
        f"{record.actor} {record.verb} issue: {record.title}"
    )


def _format_push(record: PushUpdate) -> str:
    return (
        "<b>GitHub Push</b>\n\n"
        f'<a href="{record.repository_url}">{record.repository}</a>\n'
        f"{record.actor} pushed to {record.branch}\n"
        f"Commit: {record.commit_excerpt}"
    )


def _format_release(record: ReleaseUpdate) -> str:
    return (
        "<b>GitHub Release</b>\n\n"
        f'<a href="{record.url}">{record.repository}</a>\n'
        f"{record.actor} {record.verb} release: {record.name}"
    )


def _format_generic(record: GenericEvent) -> str:
    return f"Received GitHub event: {record.event_type}"


def _format_unrecognized(record: Unrecognized) -> str:
    return ""


_FORMATTERS: dict[type, Callable[[Any], str]] = {
    PullRequestUpdate: _format_pull_request,
    IssueUpdate: _format_issue,
    PushUpdate: _format_push,
    ReleaseUpdate: _format_release,
    GenericEvent: _format_generic,
    Unrecognized: _format_unrecognized,
}


def format_notification(record: NotificationRecord) -> str:
    """Retorna o texto da notificação; string vazia = nada a enviar."""
    formatter = _FORMATTERS.get(type(record))
    if formatter is None:
        raise TypeError(f"Record não suportado: {type(record).__name__}")
    return formatter(record)
