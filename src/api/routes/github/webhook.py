"""Endpoint de webhook do GitHub.

Endpoint:
- POST /webhook/github: recebe eventos e notifica o chat resolvido

Fluxo:
1. Exige header X-GitHub-Event
2. Verifica assinatura HMAC (quando secret e header presentes)
3. Resolve o chat de destino (chat padrão, depois ?token=)
4. Normaliza, formata e envia uma única mensagem

Segurança:
- Mensagens de erro de autenticação são genéricas
- Payload e token nunca são logados
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from api.connectors.github.webhook.receive import (
    InvalidJsonError,
    InvalidSignatureError,
    MissingEventHeaderError,
    receive_github_delivery,
)
from api.routes.responses import relay_error_response, relay_response
from app.bootstrap.dependencies import (
    create_chat_target_resolvers,
    create_relay_github_event_use_case,
)
from app.domain.errors import AuthError, RelayError, ValidationError
from app.observability import correlation_scope
from app.protocols.models import ChatTargetContext
from app.services.chat_target import resolve_chat_target
from config.settings import get_github_settings

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/webhook/github", response_model=None)
async def receive_github_webhook(request: Request) -> JSONResponse:
    """Recebe um evento do GitHub e entrega a notificação no Telegram.

    Returns:
        Envelope {code, message} com o mesmo status HTTP.
    """
    with correlation_scope(request.headers.get("x-correlation-id")) as correlation_id:
        try:
            delivery = receive_github_delivery(
                raw_body=await request.body(),
                headers=request.headers,
                secret=get_github_settings().webhook_secret or None,
            )
        except MissingEventHeaderError as exc:
            logger.warning(
                "github_webhook_rejected",
                extra={"correlation_id": correlation_id, "reason": str(exc)},
            )
            return relay_error_response(ValidationError("Missing X-GitHub-Event header"))
        except InvalidSignatureError as exc:
            logger.warning(
                "github_webhook_rejected",
                extra={"correlation_id": correlation_id, "reason": str(exc)},
            )
            return relay_error_response(AuthError("Invalid signature"))
        except InvalidJsonError as exc:
            logger.warning(
                "github_webhook_rejected",
                extra={"correlation_id": correlation_id, "reason": str(exc)},
            )
            return relay_error_response(ValidationError("Invalid JSON payload"))

        logger.info(
            "github_webhook_received",
            extra={
                "correlation_id": correlation_id,
                "event_type": delivery.event_type,
                "delivery_id": delivery.delivery_id,
                "signature_skipped": delivery.signature.skipped,
            },
        )

        try:
            chat_id = resolve_chat_target(
                create_chat_target_resolvers(),
                ChatTargetContext(query_params=dict(request.query_params)),
            )
            use_case = create_relay_github_event_use_case()
            result = await use_case.execute(
                event_type=delivery.event_type,
                payload=delivery.payload,
                chat_id=chat_id,
            )
        except RelayError as exc:
            logger.warning(
                "github_webhook_failed",
                extra={
                    "correlation_id": correlation_id,
                    "event_type": delivery.event_type,
                    "error_type": type(exc).__name__,
                    "status_code": exc.status_code,
                },
            )
            return relay_error_response(exc)
        except Exception:
            logger.exception(
                "github_webhook_processing_error",
                extra={"correlation_id": correlation_id, "event_type": delivery.event_type},
            )
            return relay_response(500, "Server error")

        if not result.delivered:
            return relay_response(200, "No message to send")
        return relay_response(200, "Notification sent successfully")
