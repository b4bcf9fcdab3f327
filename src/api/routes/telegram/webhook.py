"""Endpoint de updates do bot Telegram.

Endpoint:
- POST /webhook/telegram: recebe mensagens enviadas ao bot

O Telegram reenvia updates que não recebem 200. Depois das pré-condições
(JSON válido, chat id presente, token do bot configurado) a resposta é
sempre 200, mesmo se gerar ou enviar o token falhar; a falha fica no log.
"""

from __future__ import annotations

import json
import logging

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from api.normalizers.telegram import extract_bot_command
from api.routes.responses import relay_error_response, relay_response
from app.bootstrap.dependencies import create_handle_bot_update_use_case
from app.domain.errors import InternalError, ValidationError
from app.observability import correlation_scope
from config.settings import get_telegram_settings

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/webhook/telegram", response_model=None)
async def receive_bot_update(request: Request) -> JSONResponse:
    """Processa um update do bot e confirma o recebimento."""
    with correlation_scope(request.headers.get("x-correlation-id")) as correlation_id:
        raw_body = await request.body()
        try:
            update = json.loads(raw_body)
        except (json.JSONDecodeError, UnicodeDecodeError):
            logger.warning(
                "bot_update_rejected",
                extra={"correlation_id": correlation_id, "reason": "invalid_json"},
            )
            return relay_error_response(ValidationError("Invalid JSON payload"))

        command = extract_bot_command(update) if isinstance(update, dict) else None
        if command is None:
            logger.warning(
                "bot_update_rejected",
                extra={"correlation_id": correlation_id, "reason": "missing_chat_id"},
            )
            return relay_error_response(ValidationError("No chat_id found"))

        if not get_telegram_settings().bot_token:
            logger.error(
                "bot_update_rejected",
                extra={"correlation_id": correlation_id, "reason": "missing_bot_token"},
            )
            return relay_error_response(InternalError("Bot token not configured"))

        try:
            use_case = create_handle_bot_update_use_case()
            result = await use_case.execute(command)
        except Exception:
            logger.exception(
                "bot_update_processing_failed",
                extra={"correlation_id": correlation_id, "chat_id": command.chat_id},
            )
        else:
            logger.info(
                "bot_update_processed",
                extra={
                    "correlation_id": correlation_id,
                    "chat_id": result.chat_id,
                    "status": result.status,
                },
            )

        return relay_response(200, "success")
