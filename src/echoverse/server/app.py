"""FastAPI application factory para o EchoVerse."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

import httpx
from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

import echoverse
from echoverse.config import Settings
from echoverse.exceptions import ConfigError
from echoverse.logging import get_logger
from echoverse.providers.placeholder import PlaceholderAnswerer
from echoverse.providers.watson import (
    WatsonLanguageTranslator,
    WatsonSpeechToText,
    WatsonTextToSpeech,
)
from echoverse.server.error_handlers import register_error_handlers
from echoverse.server.middleware import register_middleware
from echoverse.server.routes import health, qa, speech, transcribe, translate

if TYPE_CHECKING:
    from collections.abc import AsyncIterator

    from echoverse.providers.interface import (
        Answerer,
        SpeechRecognizer,
        SpeechSynthesizer,
        Translator,
    )

logger = get_logger("server.app")


def create_app(
    settings: Settings | None = None,
    *,
    synthesizer: SpeechSynthesizer | None = None,
    translator: Translator | None = None,
    recognizer: SpeechRecognizer | None = None,
    answerer: Answerer | None = None,
    http_client: httpx.AsyncClient | None = None,
) -> FastAPI:
    """Cria a aplicacao FastAPI.

    Adapters nao informados sao construidos a partir de `settings` e
    compartilham um unico httpx.AsyncClient, fechado no shutdown.

    Args:
        settings: Configuracao imutavel (default: lida do ambiente).
        synthesizer: Adapter TTS (opcional, testes injetam stubs).
        translator: Adapter de traducao (opcional).
        recognizer: Adapter STT (opcional).
        answerer: Answerer de Q&A (default: PlaceholderAnswerer).
        http_client: Client HTTP compartilhado pelos adapters Watson (opcional).

    Returns:
        FastAPI application configurada.
    """
    settings = settings or Settings()
    if settings.max_body_bytes <= 0:
        raise ConfigError(f"max_body_bytes deve ser positivo: {settings.max_body_bytes}")

    owned_client: httpx.AsyncClient | None = None
    if http_client is None and (synthesizer is None or translator is None or recognizer is None):
        owned_client = httpx.AsyncClient(timeout=settings.upstream_timeout_s)
    client = http_client or owned_client

    if synthesizer is None:
        assert client is not None
        synthesizer = WatsonTextToSpeech(
            settings.text_to_speech, client, timeout_s=settings.upstream_timeout_s
        )
    if translator is None:
        assert client is not None
        translator = WatsonLanguageTranslator(
            settings.translator,
            client,
            version=settings.translator_version,
            timeout_s=settings.upstream_timeout_s,
        )
    if recognizer is None:
        assert client is not None
        recognizer = WatsonSpeechToText(
            settings.speech_to_text,
            client,
            model=settings.stt_model,
            timeout_s=settings.upstream_timeout_s,
        )
    if answerer is None:
        answerer = PlaceholderAnswerer()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        logger.info(
            "gateway_starting",
            providers={
                p.name: p.status().value for p in (synthesizer, translator, recognizer, answerer)
            },
            max_body_bytes=settings.max_body_bytes,
        )
        try:
            yield
        finally:
            if owned_client is not None:
                await owned_client.aclose()
            logger.info("gateway_stopped")

    app = FastAPI(
        title="EchoVerse",
        version=echoverse.__version__,
        description="Gateway HTTP para sintese de voz, traducao e Q&A",
        lifespan=lifespan,
    )

    app.state.settings = settings
    app.state.synthesizer = synthesizer
    app.state.translator = translator
    app.state.recognizer = recognizer
    app.state.answerer = answerer

    register_middleware(app, max_body_bytes=settings.max_body_bytes)

    # CORS por ultimo: middleware mais externo
    if settings.cors_origins:
        from fastapi.middleware.cors import CORSMiddleware

        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.cors_origins,
            allow_credentials="*" not in settings.cors_origins,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    register_error_handlers(app)

    app.include_router(health.router)
    app.include_router(speech.router)
    app.include_router(translate.router)
    app.include_router(qa.router)
    app.include_router(transcribe.router)

    # UI estatica por ultimo: rotas da API tem precedencia sobre "/"
    if settings.static_dir is not None and settings.static_dir.is_dir():
        app.mount("/", StaticFiles(directory=settings.static_dir, html=True), name="static")

    return app
