"""Erros de criptografia do relay."""

from app.protocols.token_codec import InvalidChatTokenError


class ChatTokenError(Exception):
    """Erro em operação com token de chat (chave ausente, id inválido)."""


class TokenDecodeError(ChatTokenError, InvalidChatTokenError):
    """Token não produzido por este codec sob a chave atual.

    Cobre token truncado, corrompido, cifrado com outra chave ou com
    conteúdo que não é um chat id.
    """
