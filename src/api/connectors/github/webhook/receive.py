"""Recepção de uma entrega de webhook do GitHub.

Ordem das checagens (a primeira falha interrompe):
1. header X-GitHub-Event
2. assinatura X-Hub-Signature-256 sobre os bytes recebidos
3. corpo JSON com objeto na raiz (corpo vazio vale como ``{}``)

O payload nunca é logado aqui.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from ..signature import SignatureResult, get_header, verify_github_signature

if TYPE_CHECKING:
    from collections.abc import Mapping

EVENT_HEADER = "x-github-event"
DELIVERY_HEADER = "x-github-delivery"


class WebhookRequestError(ValueError):
    """Erro base para entregas de webhook rejeitadas."""


class MissingEventHeaderError(WebhookRequestError):
    """Entrega sem X-GitHub-Event."""


class InvalidSignatureError(WebhookRequestError):
    """Assinatura não confere com o corpo recebido."""


class InvalidJsonError(WebhookRequestError):
    """Corpo que não é um objeto JSON."""


@dataclass(frozen=True, slots=True)
class GitHubDelivery:
    """Entrega aceita: tipo do evento, payload e resultado da assinatura."""

    event_type: str
    signature: SignatureResult
    payload: dict[str, Any] = field(default_factory=dict)
    delivery_id: str | None = None


def _load_payload(raw_body: bytes) -> dict[str, Any]:
    if not raw_body:
        return {}
    try:
        payload = json.loads(raw_body)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise InvalidJsonError("invalid_json") from exc
    if not isinstance(payload, dict):
        raise InvalidJsonError("payload_not_object")
    return payload


def receive_github_delivery(
    raw_body: bytes,
    headers: Mapping[str, str],
    secret: str | None,
) -> GitHubDelivery:
    """Valida a entrega e retorna o evento pronto para normalização.

    Raises:
        MissingEventHeaderError: Se X-GitHub-Event estiver ausente ou vazio
        InvalidSignatureError: Se a assinatura presente não conferir
        InvalidJsonError: Se o corpo não for um objeto JSON
    """
    event_type = get_header(headers, EVENT_HEADER)
    if not event_type:
        raise MissingEventHeaderError("missing_event_header")

    signature = verify_github_signature(raw_body, headers, secret)
    if not signature.valid:
        raise InvalidSignatureError(signature.error or "invalid_signature")

    return GitHubDelivery(
        event_type=event_type,
        signature=signature,
        payload=_load_payload(raw_body),
        delivery_id=get_header(headers, DELIVERY_HEADER),
    )
