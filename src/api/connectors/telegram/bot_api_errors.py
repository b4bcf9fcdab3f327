"""Parsing do envelope de resposta da Telegram Bot API.

Toda resposta da Bot API tem a forma ``{ok, result?, description?,
error_code?}``; ``ok: false`` é falha de entrega, não exceção.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class BotApiResult:
    """Resposta da Bot API."""

    ok: bool
    result: Any = None
    description: str | None = None
    error_code: int | None = None


def parse_bot_api_result(response_data: Any) -> BotApiResult:
    """Extrai o envelope da resposta; corpo inesperado vira ok=false."""
    if not isinstance(response_data, dict):
        return BotApiResult(ok=False, description="Unexpected Bot API response")

    ok = response_data.get("ok") is True
    description = response_data.get("description")
    error_code = response_data.get("error_code")
    if not ok and not description:
        description = "Unknown Bot API error"

    return BotApiResult(
        ok=ok,
        result=response_data.get("result"),
        description=description,
        error_code=error_code if isinstance(error_code, int) else None,
    )
