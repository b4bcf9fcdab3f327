"""Records canônicos de notificação.

Cada evento GitHub aceito vira exatamente um destes records, independente do
formato bruto do payload. São transientes: existem apenas durante o request.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class PullRequestUpdate:
    """Ação sobre um pull request."""

    actor: str
    repository: str
    number: int | str
    title: str
    url: str
    verb: str


@dataclass(frozen=True, slots=True)
class IssueUpdate:
    """Ação sobre uma issue."""

    actor: str
    repository: str
    number: int | str
    title: str
    url: str
    verb: str


@dataclass(frozen=True, slots=True)
class PushUpdate:
    """Push em um branch (apenas o head commit é exibido)."""

    actor: str
    repository: str
    repository_url: str
    branch: str
    commit_excerpt: str


@dataclass(frozen=True, slots=True)
class ReleaseUpdate:
    """Ação sobre uma release."""

    actor: str
    repository: str
    name: str
    url: str
    verb: str


@dataclass(frozen=True, slots=True)
class GenericEvent:
    """Evento de tipo não mapeado: ainda gera uma mensagem de uma linha."""

    event_type: str


@dataclass(frozen=True, slots=True)
class Unrecognized:
    """Payload sem os campos obrigatórios: não gera mensagem."""

    event_type: str
    reason: str = "missing_required_fields"


NotificationRecord = (
    PullRequestUpdate | IssueUpdate | PushUpdate | ReleaseUpdate | GenericEvent | Unrecognized
)

__all__ = [
    "GenericEvent",
    "IssueUpdate",
    "NotificationRecord",
    "PullRequestUpdate",
    "PushUpdate",
    "ReleaseUpdate",
    "Unrecognized",
]
