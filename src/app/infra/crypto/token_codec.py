"""Codec de tokens de chat.

O token é o chat id cifrado com AES-SIV (criptografia autenticada
determinística) e serializado em base64 url-safe sem padding. Não há banco de
inscritos: o token viaja inteiro na URL do webhook configurada no GitHub.

Propriedades:
- mesmo (chat_id, chave) => mesmo token
- token adulterado, truncado ou de outra chave => TokenDecodeError
- alfabeto seguro para query string sem escaping

Expiração não é modelada; se necessária, embutir timestamp no plaintext e
checar no decode.
"""

from __future__ import annotations

import base64
import binascii
import re

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.ciphers.aead import AESSIV
from cryptography.hazmat.primitives.kdf.hkdf import HKDF

from .constants import SIV_KEY_SIZE, SIV_TAG_SIZE, TOKEN_KDF_INFO
from .errors import ChatTokenError, TokenDecodeError

_TOKEN_ALPHABET = re.compile(r"[A-Za-z0-9_\-]+")
_CHAT_ID_PATTERN = re.compile(r"-?[0-9]+")


def derive_token_key(sign_key: str) -> bytes:
    """Deriva a chave AES-SIV a partir da chave configurada (qualquer tamanho)."""
    if not sign_key:
        raise ChatTokenError("sign_key é obrigatório")
    hkdf = HKDF(
        algorithm=hashes.SHA256(),
        length=SIV_KEY_SIZE,
        salt=None,
        info=TOKEN_KDF_INFO,
    )
    return hkdf.derive(sign_key.encode("utf-8"))


def _encode_base64(raw: bytes) -> str:
    return base64.urlsafe_b64encode(raw).rstrip(b"=").decode("ascii")


def _decode_base64(token: str) -> bytes:
    if not _TOKEN_ALPHABET.fullmatch(token):
        raise TokenDecodeError("token_invalid_characters")
    padded = token + ("=" * (-len(token) % 4))
    try:
        raw = base64.urlsafe_b64decode(padded)
    except (ValueError, binascii.Error) as exc:
        raise TokenDecodeError("token_invalid_base64") from exc
    # Rejeita codificações não canônicas (bits de padding alterados)
    if _encode_base64(raw) != token:
        raise TokenDecodeError("token_non_canonical")
    return raw


class ChatTokenCodec:
    """Transformação reversível e autenticada entre chat id e token opaco."""

    def __init__(self, sign_key: str) -> None:
        self._aead = AESSIV(derive_token_key(sign_key))

    def encode(self, chat_id: int) -> str:
        """Cifra o chat id e retorna o token url-safe.

        Raises:
            ChatTokenError: Se chat_id não for inteiro
        """
        if isinstance(chat_id, bool) or not isinstance(chat_id, int):
            raise ChatTokenError("chat_id deve ser inteiro")
        sealed = self._aead.encrypt(str(chat_id).encode("ascii"), None)
        return _encode_base64(sealed)

    def decode(self, token: str) -> int:
        """Decifra o token e retorna o chat id original.

        Raises:
            TokenDecodeError: Se o token não passar na verificação de integridade
        """
        raw = _decode_base64(token)
        if len(raw) <= SIV_TAG_SIZE:
            raise TokenDecodeError("token_truncated")

        try:
            plaintext = self._aead.decrypt(raw, None)
        except InvalidTag as exc:
            raise TokenDecodeError("token_integrity_check_failed") from exc

        text = plaintext.decode("ascii", errors="replace")
        if not _CHAT_ID_PATTERN.fullmatch(text):
            raise TokenDecodeError("token_payload_not_chat_id")
        return int(text)


def encode_chat_token(chat_id: int, sign_key: str) -> str:
    """Atalho funcional: ``ChatTokenCodec(sign_key).encode(chat_id)``."""
    return ChatTokenCodec(sign_key).encode(chat_id)


def decode_chat_token(token: str, sign_key: str) -> int:
    """Atalho funcional: ``ChatTokenCodec(sign_key).decode(token)``."""
    return ChatTokenCodec(sign_key).decode(token)
