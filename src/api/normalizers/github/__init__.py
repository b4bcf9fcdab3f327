"""Normalizer GitHub: eventos de webhook para records canônicos.

Eventos com tratamento próprio: pull_request, push, issues, release.
Qualquer outro tipo vira GenericEvent (mensagem de uma linha).
"""

from .normalizer import GitHubEventNormalizer, normalize_github_event

__all__ = ["GitHubEventNormalizer", "normalize_github_event"]
