"""Normalizer GitHub: converte payloads de webhook para records canônicos.

Política por tipo de evento:
- pull_request / issues / release: exigem o objeto alvo e ``repository``;
  ausentes => Unrecognized (nenhuma mensagem)
- push: exige ``repository`` e ``head_commit``
- demais tipos: GenericEvent
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from app.constants.github import (
    EVENT_ISSUES,
    EVENT_PULL_REQUEST,
    EVENT_PUSH,
    EVENT_RELEASE,
    ISSUE_VERBS,
    PULL_REQUEST_VERBS,
    RELEASE_VERBS,
)
from app.domain.notifications import (
    GenericEvent,
    IssueUpdate,
    NotificationRecord,
    PullRequestUpdate,
    PushUpdate,
    ReleaseUpdate,
    Unrecognized,
)

from .extractor import (
    action_of,
    branch_from_ref,
    commit_excerpt,
    get_object,
    get_text,
    sender_login,
)

logger = logging.getLogger(__name__)


def fallback_verb(action: str) -> str:
    """Verbo genérico; a ação bruta é preservada literalmente."""
    return f"updated ({action})"


def _pull_request_verb(action: str, pull_request: dict[str, Any]) -> str:
    if action == "closed":
        return "merged" if pull_request.get("merged") is True else "closed"
    return PULL_REQUEST_VERBS.get(action) or fallback_verb(action)


def _normalize_pull_request(payload: dict[str, Any]) -> NotificationRecord:
    pull_request = get_object(payload, "pull_request")
    repository = get_object(payload, "repository")
    if pull_request is None or repository is None:
        return Unrecognized(event_type=EVENT_PULL_REQUEST)

    return PullRequestUpdate(
        actor=sender_login(payload),
        repository=get_text(repository, "full_name"),
        number=pull_request.get("number", ""),
        title=get_text(pull_request, "title"),
        url=get_text(pull_request, "html_url"),
        verb=_pull_request_verb(action_of(payload), pull_request),
    )


def _normalize_issue(payload: dict[str, Any]) -> NotificationRecord:
    issue = get_object(payload, "issue")
    repository = get_object(payload, "repository")
    if issue is None or repository is None:
        return Unrecognized(event_type=EVENT_ISSUES)

    action = action_of(payload)
    return IssueUpdate(
        actor=sender_login(payload),
        repository=get_text(repository, "full_name"),
        number=issue.get("number", ""),
        title=get_text(issue, "title"),
        url=get_text(issue, "html_url"),
        verb=ISSUE_VERBS.get(action) or fallback_verb(action),
    )


def _normalize_push(payload: dict[str, Any]) -> NotificationRecord:
    repository = get_object(payload, "repository")
    head_commit = get_object(payload, "head_commit")
    if repository is None or head_commit is None:
        return Unrecognized(event_type=EVENT_PUSH)

    return PushUpdate(
        actor=sender_login(payload),
        repository=get_text(repository, "full_name"),
        repository_url=get_text(repository, "html_url"),
        branch=branch_from_ref(get_text(payload, "ref")),
        commit_excerpt=commit_excerpt(get_text(head_commit, "message")),
    )


def _normalize_release(payload: dict[str, Any]) -> NotificationRecord:
    release = get_object(payload, "release")
    repository = get_object(payload, "repository")
    if release is None or repository is None:
        return Unrecognized(event_type=EVENT_RELEASE)

    action = action_of(payload)
    return ReleaseUpdate(
        actor=sender_login(payload),
        repository=get_text(repository, "full_name"),
        name=get_text(release, "name") or get_text(release, "tag_name"),
        url=get_text(release, "html_url"),
        verb=RELEASE_VERBS.get(action) or fallback_verb(action),
    )


_NORMALIZERS: dict[str, Callable[[dict[str, Any]], NotificationRecord]] = {
    EVENT_PULL_REQUEST: _normalize_pull_request,
    EVENT_PUSH: _normalize_push,
    EVENT_ISSUES: _normalize_issue,
    EVENT_RELEASE: _normalize_release,
}


def normalize_github_event(event_type: str, payload: dict[str, Any]) -> NotificationRecord:
    """Mapeia (X-GitHub-Event, payload) para um record canônico."""
    normalizer = _NORMALIZERS.get(event_type)
    if normalizer is None:
        return GenericEvent(event_type=event_type)

    record = normalizer(payload)
    if isinstance(record, Unrecognized):
        logger.info(
            "github_event_unrecognized",
            extra={"event_type": event_type, "reason": record.reason},
        )
    return record


class GitHubEventNormalizer:
    """Implementação de GitHubEventNormalizerProtocol."""

    def normalize(self, event_type: str, payload: dict[str, Any]) -> NotificationRecord:
        return normalize_github_event(event_type, payload)
