"""Taxonomia de erros do relay.

Cada erro carrega o status HTTP com que deve ser respondido. Nenhum é
retentado ou enfileirado: a falha é tratada dentro do próprio request.
"""

from __future__ import annotations


class RelayError(Exception):
    """Erro base do relay."""

    status_code: int = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(RelayError):
    """Header ou campo obrigatório ausente/malformado."""

    status_code = 400


class AuthError(RelayError):
    """Assinatura, chave administrativa ou token de chat inválidos.

    A mensagem deve ser genérica: não revelar qual etapa falhou.
    """

    status_code = 401


class RoutingError(RelayError):
    """Nenhum chat de destino pôde ser resolvido."""

    status_code = 422


class UpstreamError(RelayError):
    """A Bot API respondeu ok=false (description repassada ao chamador)."""

    status_code = 422


class InternalError(RelayError):
    """Falha inesperada; detalhes só nos logs."""

    status_code = 500
