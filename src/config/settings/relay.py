"""Settings do relay: chave dos tokens de chat e chave administrativa."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache


@dataclass(frozen=True)
class RelaySettings:
    """Configurações do relay.

    Attributes:
        sign_key: Chave secreta usada para cifrar/decifrar tokens de chat
        admin_key: Chave exigida pelo endpoint de registro do webhook
        default_chat_id: Chat padrão (tem prioridade sobre o token da URL)
        invalid_default_chat_id: Valor bruto de RELAY_DEFAULT_CHAT_ID quando
            não é inteiro; nesse caso não há chat padrão
    """

    sign_key: str = ""
    admin_key: str = ""
    default_chat_id: int | None = None
    invalid_default_chat_id: str = ""

    def validate(self) -> list[str]:
        """Valida configurações mínimas do relay."""
        errors: list[str] = []
        if not self.sign_key:
            errors.append("RELAY_SIGN_KEY não configurado")
        if not self.admin_key:
            errors.append("RELAY_ADMIN_KEY não configurado")
        if self.invalid_default_chat_id:
            errors.append(f"RELAY_DEFAULT_CHAT_ID inválido: {self.invalid_default_chat_id!r}")
        return errors


def _parse_chat_id(raw: str) -> tuple[int | None, str]:
    """Retorna (chat id, valor inválido); só um dos dois é preenchido."""
    value = raw.strip()
    if not value:
        return None, ""
    try:
        return int(value), ""
    except ValueError:
        return None, value


def _load_from_env() -> RelaySettings:
    """Carrega RelaySettings de variáveis de ambiente."""
    default_chat_id, invalid_default_chat_id = _parse_chat_id(
        os.getenv("RELAY_DEFAULT_CHAT_ID", "")
    )
    return RelaySettings(
        sign_key=os.getenv("RELAY_SIGN_KEY", ""),
        admin_key=os.getenv("RELAY_ADMIN_KEY", ""),
        default_chat_id=default_chat_id,
        invalid_default_chat_id=invalid_default_chat_id,
    )


@lru_cache(maxsize=1)
def get_relay_settings() -> RelaySettings:
    """Retorna instância cacheada de RelaySettings."""
    return _load_from_env()
