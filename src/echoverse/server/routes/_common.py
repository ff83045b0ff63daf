"""Logica compartilhada entre as rotas que chamam providers upstream."""

from __future__ import annotations

import contextlib
from typing import TYPE_CHECKING, Any

from echoverse.exceptions import UpstreamError
from echoverse.server.models.responses import ErrorResponse

if TYPE_CHECKING:
    from collections.abc import Iterator


@contextlib.contextmanager
def upstream_boundary(provider: str, public_message: str) -> Iterator[None]:
    """Converte qualquer falha do adapter em UpstreamError com a mensagem publica da rota.

    Args:
        provider: Nome do provider, usado em logs.
        public_message: Valor do campo `error` na resposta 500 (ex: "TTS failed").
    """
    try:
        yield
    except UpstreamError as exc:
        raise UpstreamError(exc.provider, exc.reason, public_message) from exc
    except Exception as exc:
        raise UpstreamError(provider, str(exc) or type(exc).__name__, public_message) from exc


def error_responses(*status_codes: int) -> dict[int | str, dict[str, Any]]:
    """Documenta no OpenAPI o corpo {error, details?} dos status de erro da rota."""
    return {code: {"model": ErrorResponse} for code in status_codes}
