"""Use cases de webhooks GitHub."""

from .relay_github_event import RelayGitHubEventUseCase

__all__ = ["RelayGitHubEventUseCase"]
