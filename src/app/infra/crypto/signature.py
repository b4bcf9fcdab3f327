"""Validação de assinatura HMAC-SHA256 para webhooks."""

from __future__ import annotations

import hashlib
import hmac

from .constants import SIGNATURE_PREFIX


def validate_hub_signature(payload: bytes, signature: str, secret: bytes) -> bool:
    """Valida assinatura HMAC-SHA256 no formato do GitHub.

    O digest é calculado sobre os bytes brutos do corpo, antes de qualquer
    parsing JSON.

    Args:
        payload: Corpo bruto da requisição
        signature: Header X-Hub-Signature-256 (``sha256=<hex>``)
        secret: Secret do webhook em bytes

    Returns:
        True se assinatura válida
    """
    if not signature.startswith(SIGNATURE_PREFIX):
        return False

    expected = signature[len(SIGNATURE_PREFIX):]
    computed = hmac.new(secret, payload, hashlib.sha256).hexdigest()
    return hmac.compare_digest(computed.encode("ascii"), expected.encode("utf-8"))
