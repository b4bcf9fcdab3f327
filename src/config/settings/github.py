"""Settings específicas do GitHub (webhooks de entrada)."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache


@dataclass(frozen=True)
class GitHubSettings:
    """Configurações dos webhooks GitHub.

    Attributes:
        webhook_secret: Secret compartilhado para validação HMAC
            (X-Hub-Signature-256). Vazio = validação desativada.
    """

    webhook_secret: str = ""

    @property
    def signature_enabled(self) -> bool:
        """True quando há secret configurado."""
        return bool(self.webhook_secret)


def _load_from_env() -> GitHubSettings:
    """Carrega GitHubSettings de variáveis de ambiente."""
    return GitHubSettings(
        webhook_secret=os.getenv("GITHUB_WEBHOOK_SECRET", ""),
    )


@lru_cache(maxsize=1)
def get_github_settings() -> GitHubSettings:
    """Retorna instância cacheada de GitHubSettings."""
    return _load_from_env()
