"""Helpers de extração dos payloads de webhook GitHub.

Apenas extração estrutural: campos ausentes viram string vazia, sem regra
de negócio.
"""

from __future__ import annotations

from typing import Any

from app.constants.github import BRANCH_REF_PREFIX, COMMIT_EXCERPT_LIMIT, TRUNCATION_SUFFIX


def get_object(payload: dict[str, Any], key: str) -> dict[str, Any] | None:
    """Retorna o sub-objeto se a chave contiver um objeto (mesmo vazio)."""
    value = payload.get(key)
    if isinstance(value, dict):
        return value
    return None


def get_text(obj: dict[str, Any] | None, key: str) -> str:
    if not obj:
        return ""
    value = obj.get(key)
    return "" if value is None else str(value)


def sender_login(payload: dict[str, Any]) -> str:
    return get_text(get_object(payload, "sender"), "login")


def action_of(payload: dict[str, Any]) -> str:
    action = payload.get("action")
    return "" if action is None else str(action)


def branch_from_ref(ref: str) -> str:
    """Remove o prefixo literal ``refs/heads/`` (tags e outros refs intactos)."""
    if ref.startswith(BRANCH_REF_PREFIX):
        return ref[len(BRANCH_REF_PREFIX):]
    return ref


def commit_excerpt(message: str) -> str:
    """Trunca em 100 caracteres; reticências só quando houve corte."""
    if len(message) > COMMIT_EXCERPT_LIMIT:
        return message[:COMMIT_EXCERPT_LIMIT] + TRUNCATION_SUFFIX
    return message
