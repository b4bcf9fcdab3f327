"""Mensagens trocadas com a plataforma de chat."""

from __future__ import annotations

from dataclasses import dataclass

HTML_PARSE_MODE = "HTML"


@dataclass(frozen=True, slots=True)
class OutboundMessage:
    """Mensagem a ser entregue pelo sender (descartada após o envio)."""

    chat_id: int
    text: str
    parse_mode: str | None = HTML_PARSE_MODE
    disable_web_page_preview: bool = True


@dataclass(frozen=True, slots=True)
class BotCommand:
    """Mensagem recebida pelo bot, reduzida ao necessário para roteamento."""

    chat_id: int
    text: str = ""


__all__ = ["HTML_PARSE_MODE", "BotCommand", "OutboundMessage"]
