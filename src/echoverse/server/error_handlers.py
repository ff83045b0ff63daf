"""Exception handlers HTTP para o FastAPI.

Mapeia exceptions tipadas do EchoVerse para respostas {error, details?}
com status codes corretos. Nenhuma falha chega crua ao transporte.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from echoverse.exceptions import (
    EchoverseError,
    InvalidInputError,
    PayloadTooLargeError,
    UpstreamError,
)
from echoverse.logging import get_logger

if TYPE_CHECKING:
    from fastapi import FastAPI, Request

logger = get_logger("server.errors")


def error_response(status_code: int, error: str, details: str | None = None) -> JSONResponse:
    """Cria resposta de erro no formato {error, details?}."""
    content: dict[str, str] = {"error": error}
    if details is not None:
        content["details"] = details
    return JSONResponse(status_code=status_code, content=content)


def _get_request_id(request: Request) -> str | None:
    """Extrai request_id do request state, se disponivel."""
    return getattr(request.state, "request_id", None)


async def _handle_invalid_input(request: Request, exc: InvalidInputError) -> JSONResponse:
    logger.warning(
        "invalid_input",
        error=exc.message,
        path=request.url.path,
        request_id=_get_request_id(request),
    )
    return error_response(400, exc.message, exc.details)


async def _handle_request_validation(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    errors = exc.errors()
    details = "; ".join(
        f"{'.'.join(str(p) for p in err.get('loc', ()))}: {err.get('msg', '')}" for err in errors
    )
    logger.warning(
        "invalid_request_body",
        path=request.url.path,
        errors=len(errors),
        request_id=_get_request_id(request),
    )
    return error_response(400, "Invalid request body", details or None)


async def _handle_payload_too_large(request: Request, exc: PayloadTooLargeError) -> JSONResponse:
    logger.warning(
        "payload_too_large",
        size_bytes=exc.size_bytes,
        max_bytes=exc.max_bytes,
        path=request.url.path,
        request_id=_get_request_id(request),
    )
    return error_response(413, exc.message)


async def _handle_upstream_error(request: Request, exc: UpstreamError) -> JSONResponse:
    logger.error(
        "upstream_failure",
        provider=exc.provider,
        reason=exc.reason,
        path=request.url.path,
        request_id=_get_request_id(request),
    )
    return error_response(500, exc.public_message, exc.reason)


async def _handle_echoverse_error(request: Request, exc: EchoverseError) -> JSONResponse:
    logger.error(
        "unhandled_echoverse_error",
        error=str(exc),
        error_type=type(exc).__name__,
        request_id=_get_request_id(request),
        exc_info=True,
    )
    return error_response(500, "Internal server error")


async def _handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        "unexpected_error",
        error=str(exc),
        error_type=type(exc).__name__,
        request_id=_get_request_id(request),
        exc_info=True,
    )
    return error_response(500, "Internal server error")


def register_error_handlers(app: FastAPI) -> None:
    """Registra todos os exception handlers no FastAPI app."""
    app.add_exception_handler(InvalidInputError, _handle_invalid_input)
    app.add_exception_handler(RequestValidationError, _handle_request_validation)
    app.add_exception_handler(PayloadTooLargeError, _handle_payload_too_large)
    app.add_exception_handler(UpstreamError, _handle_upstream_error)
    app.add_exception_handler(EchoverseError, _handle_echoverse_error)
    app.add_exception_handler(Exception, _handle_unexpected_error)
