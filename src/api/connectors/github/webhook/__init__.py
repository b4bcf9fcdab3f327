"""Webhook GitHub: recepção de entregas (header, assinatura e JSON)."""

from .receive import (
    GitHubDelivery,
    InvalidJsonError,
    InvalidSignatureError,
    MissingEventHeaderError,
    WebhookRequestError,
    receive_github_delivery,
)

__all__ = [
    "GitHubDelivery",
    "InvalidJsonError",
    "InvalidSignatureError",
    "MissingEventHeaderError",
    "WebhookRequestError",
    "receive_github_delivery",
]
