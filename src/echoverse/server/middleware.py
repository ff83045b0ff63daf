"""Middlewares HTTP do gateway: request_id e limite de tamanho de body JSON."""

from __future__ import annotations

import uuid
from typing import TYPE_CHECKING

from starlette.datastructures import Headers

from echoverse.logging import bind_request_context, clear_request_context, get_logger
from echoverse.server.error_handlers import error_response

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from fastapi import FastAPI, Request
    from starlette.responses import Response
    from starlette.types import ASGIApp, Message, Receive, Scope, Send

logger = get_logger("server.middleware")


def is_json_media_type(content_type: str) -> bool:
    """True para application/json e sufixos +json, sem diferenciar maiusculas."""
    media_type = content_type.split(";", 1)[0].strip().lower()
    return media_type == "application/json" or (
        media_type.startswith("application/") and media_type.endswith("+json")
    )


class JSONBodyLimitMiddleware:
    """Rejeita com 413 bodies JSON acima de `max_body_bytes`, antes do parsing.

    O Content-Length declarado e verificado primeiro. Em seguida o body e
    lido do canal ASGI contando bytes, o que cobre requests chunked sem
    Content-Length. Bodies aceitos sao reentregues intactos a aplicacao.
    """

    def __init__(self, app: ASGIApp, max_body_bytes: int) -> None:
        self.app = app
        self.max_body_bytes = max_body_bytes

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        headers = Headers(scope=scope)
        if not is_json_media_type(headers.get("content-type", "")):
            await self.app(scope, receive, send)
            return

        raw_length = headers.get("content-length")
        if raw_length is not None:
            try:
                declared = int(raw_length)
            except ValueError:
                await error_response(400, "Invalid Content-Length header")(scope, receive, send)
                return
            if declared > self.max_body_bytes:
                self._log_rejected(scope, declared)
                await self._reject(scope, receive, send)
                return

        chunks: list[bytes] = []
        received = 0
        more_body = True
        while more_body:
            message = await receive()
            if message["type"] == "http.disconnect":
                return
            chunk = message.get("body", b"")
            received += len(chunk)
            if received > self.max_body_bytes:
                self._log_rejected(scope, received)
                await self._reject(scope, receive, send)
                return
            chunks.append(chunk)
            more_body = message.get("more_body", False)

        body = b"".join(chunks)
        delivered = False

        async def replay() -> Message:
            nonlocal delivered
            if not delivered:
                delivered = True
                return {"type": "http.request", "body": body, "more_body": False}
            return await receive()

        await self.app(scope, replay, send)

    def _log_rejected(self, scope: Scope, size_bytes: int) -> None:
        logger.warning(
            "payload_too_large",
            size_bytes=size_bytes,
            max_bytes=self.max_body_bytes,
            path=scope.get("path"),
        )

    async def _reject(self, scope: Scope, receive: Receive, send: Send) -> None:
        await error_response(413, "Request body too large")(scope, receive, send)


def register_middleware(app: FastAPI, *, max_body_bytes: int) -> None:
    """Registra os middlewares no app.

    Ordem de execucao: request_context (externo) e depois o limite de body
    JSON. Uploads multipart tem limite proprio na rota.
    """
    app.add_middleware(JSONBodyLimitMiddleware, max_body_bytes=max_body_bytes)

    @app.middleware("http")
    async def request_context(
        request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        request_id = str(uuid.uuid4())
        request.state.request_id = request_id
        bind_request_context(request_id)
        try:
            response = await call_next(request)
        finally:
            clear_request_context()
        response.headers["X-Request-ID"] = request_id
        return response
