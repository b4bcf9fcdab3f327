"""Constantes criptográficas dos tokens de chat."""

SIV_KEY_SIZE = 64  # AES-256-SIV (duas chaves de 256 bits)
SIV_TAG_SIZE = 16  # 128 bits
TOKEN_KDF_INFO = b"hook-relay/chat-token/v1"
SIGNATURE_PREFIX = "sha256="
