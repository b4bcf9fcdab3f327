"""Use cases de updates do bot Telegram."""

from .handle_bot_update import HandleBotUpdateUseCase

__all__ = ["HandleBotUpdateUseCase"]
