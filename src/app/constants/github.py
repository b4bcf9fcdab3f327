"""Constantes dos eventos GitHub aceitos pelo relay."""

from __future__ import annotations

EVENT_PULL_REQUEST = "pull_request"
EVENT_PUSH = "push"
EVENT_ISSUES = "issues"
EVENT_RELEASE = "release"

BRANCH_REF_PREFIX = "refs/heads/"
COMMIT_EXCERPT_LIMIT = 100
TRUNCATION_SUFFIX = "..."

# Verbos por ação; ações fora do mapa usam "updated (<action>)"
PULL_REQUEST_VERBS = {
    "opened": "created",
    "reopened": "reopened",
    "edited": "edited",
}
ISSUE_VERBS = {
    "opened": "created",
    "closed": "closed",
    "reopened": "reopened",
    "edited": "edited",
}
RELEASE_VERBS = {
    "published": "published",
}
