"""Health check endpoint."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Request

import echoverse

router = APIRouter()

_PROVIDER_ATTRS = ("synthesizer", "translator", "recognizer", "answerer")


@router.get("/health")
async def health(request: Request) -> dict[str, Any]:
    """Health check do gateway.

    Retorna status basico (liveness) e, por provider, se as credenciais
    estao configuradas. Nao chama nenhum servico upstream.
    """
    providers: dict[str, str] = {}
    for attr in _PROVIDER_ATTRS:
        provider = getattr(request.app.state, attr, None)
        if provider is not None:
            providers[provider.name] = provider.status().value

    return {
        "status": "ok",
        "version": echoverse.__version__,
        "providers": providers,
    }
