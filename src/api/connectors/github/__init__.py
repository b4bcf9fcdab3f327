"""Conector GitHub: entrada de webhooks (assinatura + parsing)."""

from .signature import SIGNATURE_HEADER, SignatureResult, verify_github_signature

__all__ = [
    "SIGNATURE_HEADER",
    "SignatureResult",
    "verify_github_signature",
]
