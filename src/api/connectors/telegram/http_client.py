"""Cliente HTTP da Telegram Bot API.

Métodos consumidos pelo relay:
- sendMessage: entrega de notificações e do token de chat
- setWebhook: registro da URL de updates do bot
- getWebhookInfo: diagnóstico no endpoint de status

A URL de cada método contém o token do bot: nunca logar a URL.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from api.connectors.telegram.bot_api_errors import BotApiResult, parse_bot_api_result
from api.payload_builders.telegram import SendMessagePayloadBuilder
from app.infra.http import HttpClient, HttpClientConfig, HttpError
from app.protocols.models import SendResult

if TYPE_CHECKING:
    import httpx

    from app.domain.messages import OutboundMessage
    from config.settings import TelegramSettings

logger: logging.Logger = logging.getLogger(__name__)


class TelegramBotClient(HttpClient):
    """Cliente da Bot API (implementa ChatSenderProtocol)."""

    def __init__(
        self,
        settings: TelegramSettings,
        config: HttpClientConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        if not settings.bot_token or not settings.bot_token.strip():
            raise ValueError(
                "bot_token é obrigatório para a Bot API. "
                "Verifique se TELEGRAM_BOT_TOKEN está configurado."
            )
        super().__init__(
            config or HttpClientConfig(timeout_seconds=settings.request_timeout_seconds),
            transport=transport,
        )
        self._settings = settings
        self._payload_builder = SendMessagePayloadBuilder()

    async def call(self, method: str, payload: dict[str, Any]) -> BotApiResult:
        """Chama um método da Bot API e devolve o envelope parseado.

        Raises:
            HttpError: Falha de transporte ou corpo que não é JSON
        """
        response = await self.post(self._settings.method_url(method), json=payload)
        try:
            response_data = response.json()
        except ValueError as exc:
            logger.error(
                "bot_api_invalid_json",
                extra={"method": method, "status_code": response.status_code},
            )
            raise HttpError("bot_api_invalid_json", status_code=response.status_code) from exc

        result = parse_bot_api_result(response_data)
        if result.ok:
            logger.debug(
                "bot_api_call_succeeded",
                extra={"method": method, "status_code": response.status_code},
            )
        else:
            logger.warning(
                "bot_api_call_failed",
                extra={
                    "method": method,
                    "status_code": response.status_code,
                    "error_code": result.error_code,
                    "description": result.description,
                },
            )
        return result

    async def send_message(self, message: OutboundMessage) -> SendResult:
        """Envia uma mensagem; falha de transporte vira SendResult(ok=False)."""
        payload = self._payload_builder.build(message)
        try:
            result = await self.call("sendMessage", payload)
        except HttpError as exc:
            return SendResult(ok=False, description=f"Telegram API request failed: {exc}")

        message_id = None
        if isinstance(result.result, dict):
            message_id = result.result.get("message_id")
        return SendResult(ok=result.ok, description=result.description, message_id=message_id)

    async def set_webhook(self, url: str) -> BotApiResult:
        """Registra a URL que receberá os updates do bot."""
        try:
            return await self.call("setWebhook", {"url": url})
        except HttpError as exc:
            return BotApiResult(ok=False, description=f"Telegram API request failed: {exc}")

    async def get_webhook_info(self) -> dict[str, Any]:
        """Retorna o objeto de resposta de getWebhookInfo.

        Raises:
            HttpError: Falha de transporte
        """
        result = await self.call("getWebhookInfo", {})
        return {
            "ok": result.ok,
            "result": result.result,
            "description": result.description,
        }


def create_telegram_bot_client(
    settings: TelegramSettings | None = None,
) -> TelegramBotClient:
    """Factory para criar cliente da Bot API com config padrão.

    Args:
        settings: TelegramSettings opcional. Se None, carrega do ambiente.
    """
    # Import local para evitar dependência circular
    from config.settings import get_telegram_settings

    return TelegramBotClient(settings or get_telegram_settings())
