"""Criptografia do relay: tokens de chat e assinatura de webhooks.

Localizado em app/infra/ para que use cases dependam apenas dos protocolos;
as implementações concretas são conectadas em app/bootstrap.
"""

from .constants import SIGNATURE_PREFIX, SIV_KEY_SIZE, SIV_TAG_SIZE
from .errors import ChatTokenError, TokenDecodeError
from .signature import validate_hub_signature
from .token_codec import (
    ChatTokenCodec,
    decode_chat_token,
    derive_token_key,
    encode_chat_token,
)

__all__ = [
    "SIGNATURE_PREFIX",
    "SIV_KEY_SIZE",
    "SIV_TAG_SIZE",
    "ChatTokenCodec",
    "ChatTokenError",
    "TokenDecodeError",
    "decode_chat_token",
    "derive_token_key",
    "encode_chat_token",
    "validate_hub_signature",
]
