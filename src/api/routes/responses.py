"""Envelope de resposta ``{code, message}`` das rotas do relay.

O campo ``code`` sempre repete o status HTTP.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi.responses import JSONResponse
from pydantic import BaseModel

if TYPE_CHECKING:
    from fastapi import Request
    from starlette.exceptions import HTTPException as StarletteHTTPException

    from app.domain.errors import RelayError


class RelayResponse(BaseModel):
    """Resposta padrão das rotas do relay."""

    code: int
    message: str


def relay_response(code: int, message: str) -> JSONResponse:
    """Monta a resposta JSON com status igual ao code."""
    body = RelayResponse(code=code, message=message)
    return JSONResponse(content=body.model_dump(), status_code=code)


def relay_error_response(exc: RelayError) -> JSONResponse:
    """Converte um erro da taxonomia do relay em resposta."""
    return relay_response(exc.status_code, exc.message)


async def http_exception_handler(
    request: Request,
    exc: StarletteHTTPException,
) -> JSONResponse:
    """Renderiza erros do roteamento (ex: 405) no mesmo envelope."""
    response = relay_response(exc.status_code, str(exc.detail))
    if exc.headers:
        response.headers.update(exc.headers)
    return response
