"""Política de verificação de assinatura dos webhooks GitHub."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from app.infra.crypto.signature import validate_hub_signature

if TYPE_CHECKING:
    from collections.abc import Mapping

logger = logging.getLogger(__name__)

SIGNATURE_HEADER = "x-hub-signature-256"


@dataclass(frozen=True, slots=True)
class SignatureResult:
    """Resultado da verificação de assinatura."""

    valid: bool
    skipped: bool = False
    error: str | None = None


def get_header(headers: Mapping[str, str], name: str) -> str | None:
    """Busca header sem diferenciar maiúsculas (aceita dict simples nos testes)."""
    for key, value in headers.items():
        if key.lower() == name:
            return value
    return None


def verify_github_signature(
    raw_body: bytes,
    headers: Mapping[str, str],
    secret: str | None,
) -> SignatureResult:
    """Verifica X-Hub-Signature-256 sobre o corpo bruto.

    A verificação é pulada quando não há secret configurado OU quando o
    header não veio. O segundo caso é permissivo (basta omitir o header para
    não ser verificado) e está mantido de propósito; fica registrado no log.
    """
    if not secret:
        return SignatureResult(valid=True, skipped=True)

    signature = get_header(headers, SIGNATURE_HEADER)
    if not signature:
        logger.warning("github_signature_header_missing")
        return SignatureResult(valid=True, skipped=True)

    if validate_hub_signature(raw_body, signature, secret.encode("utf-8")):
        return SignatureResult(valid=True)
    return SignatureResult(valid=False, error="signature_mismatch")
