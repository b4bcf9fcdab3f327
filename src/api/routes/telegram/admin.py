"""Endpoints administrativos do bot.

Endpoints:
- GET /status: presença das configurações e estado do webhook no Telegram
- GET /register?key=&url=: registra a URL de updates do bot (exige chave)

Nenhum valor secreto sai nas respostas: /status só informa presença.
"""

from __future__ import annotations

import hmac
import logging
from datetime import UTC, datetime
from typing import Any

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from api.connectors.telegram import create_telegram_bot_client
from api.routes.responses import relay_error_response, relay_response
from app.domain.errors import AuthError, InternalError, UpstreamError
from app.infra.http import HttpError
from config.settings import (
    get_github_settings,
    get_relay_settings,
    get_telegram_settings,
)

logger = logging.getLogger(__name__)

router = APIRouter()


def _default_webhook_url(request: Request) -> str:
    host = request.url.hostname or ""
    return f"https://{host}{get_telegram_settings().bot_webhook_path}"


def _is_admin_key_valid(provided: str | None) -> bool:
    expected = get_relay_settings().admin_key
    if not expected or not provided:
        return False
    return hmac.compare_digest(provided.encode("utf-8"), expected.encode("utf-8"))


async def _fetch_webhook_info() -> dict[str, Any] | None:
    try:
        return await create_telegram_bot_client().get_webhook_info()
    except (HttpError, ValueError) as exc:
        logger.warning(
            "webhook_info_unavailable",
            extra={"error_type": type(exc).__name__},
        )
        return None


@router.get("/status")
async def relay_status(request: Request) -> JSONResponse:
    """Diagnóstico: flags de configuração e getWebhookInfo.

    Sempre 200; webhook_info é null quando a consulta falha.
    """
    telegram = get_telegram_settings()
    relay = get_relay_settings()
    content = {
        "environment": {
            "token": bool(telegram.bot_token),
            "sign_key": bool(relay.sign_key),
            "key": bool(relay.admin_key),
            "github_webhook_secret": get_github_settings().signature_enabled,
            "default_chat_id": relay.default_chat_id is not None,
        },
        "hostname": request.url.hostname,
        "webhook_url": _default_webhook_url(request),
        "webhook_info": await _fetch_webhook_info(),
        "timestamp": datetime.now(UTC).isoformat(),
    }
    return JSONResponse(content=content)


@router.get("/register", response_model=None)
async def register_webhook(request: Request) -> JSONResponse:
    """Registra no Telegram a URL que recebe os updates do bot.

    Query params:
    - key: deve ser igual a RELAY_ADMIN_KEY
    - url: URL do webhook (padrão: https://{host}{TELEGRAM_WEBHOOK_PATH})
    """
    if not _is_admin_key_valid(request.query_params.get("key")):
        logger.warning("webhook_register_unauthorized")
        return relay_error_response(AuthError("unauthorized"))

    if not get_telegram_settings().bot_token:
        logger.error("webhook_register_failed", extra={"reason": "missing_bot_token"})
        return relay_error_response(InternalError("Bot token not configured"))

    webhook_url = request.query_params.get("url") or _default_webhook_url(request)
    result = await create_telegram_bot_client().set_webhook(webhook_url)
    if not result.ok:
        logger.warning(
            "webhook_register_failed",
            extra={"reason": "bot_api_rejected", "description": result.description},
        )
        return relay_error_response(UpstreamError(result.description or "setWebhook failed"))

    logger.info("webhook_registered", extra={"webhook_url": webhook_url})
    return relay_response(200, f"Webhook set to {webhook_url}")
