"""Use case: roteamento de comandos recebidos pelo bot.

Hoje existe um único comando, ``/token``: gera o token do chat e responde no
próprio chat. Qualquer outro texto é ignorado.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from app.constants.telegram import TOKEN_COMMAND, TOKEN_REPLY_TEMPLATE
from app.domain.errors import UpstreamError
from app.domain.messages import OutboundMessage
from app.protocols.models import BotUpdateResult

if TYPE_CHECKING:
    from app.domain.messages import BotCommand
    from app.protocols.chat_sender import ChatSenderProtocol
    from app.protocols.token_codec import TokenCodecProtocol

logger = logging.getLogger(__name__)


class HandleBotUpdateUseCase:
    """Interpreta a mensagem do bot e emite tokens de chat."""

    def __init__(
        self,
        codec: TokenCodecProtocol,
        sender: ChatSenderProtocol,
    ) -> None:
        self._codec = codec
        self._sender = sender

    async def execute(self, command: BotCommand) -> BotUpdateResult:
        """Processa o comando.

        Raises:
            UpstreamError: Se a Bot API recusar a resposta com o token
        """
        if command.text != TOKEN_COMMAND:
            return BotUpdateResult(status="ignored", chat_id=command.chat_id)

        token = self._codec.encode(command.chat_id)
        reply = OutboundMessage(
            chat_id=command.chat_id,
            text=TOKEN_REPLY_TEMPLATE.format(token=token),
        )
        result = await self._sender.send_message(reply)
        if not result.ok:
            raise UpstreamError(f"Failed to send message: {result.description}")

        # O token em si não vai para o log
        logger.info("chat_token_sent", extra={"chat_id": command.chat_id})
        return BotUpdateResult(status="token_sent", chat_id=command.chat_id)
