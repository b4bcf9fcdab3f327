"""Normalizers por canal: conversão de payloads externos para modelos internos.

Estrutura:
- github/: eventos de webhook GitHub -> records canônicos de notificação
- telegram/: updates da Bot API -> comandos do bot
"""

from .github import GitHubEventNormalizer, normalize_github_event
from .telegram import extract_bot_command

__all__ = [
    "GitHubEventNormalizer",
    "extract_bot_command",
    "normalize_github_event",
]
