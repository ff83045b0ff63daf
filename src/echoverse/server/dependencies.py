"""FastAPI dependencies para injecao dos adapters e da configuracao."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import Request  # noqa: TC002

if TYPE_CHECKING:
    from echoverse.config import Settings
    from echoverse.providers.interface import (
        Answerer,
        SpeechRecognizer,
        SpeechSynthesizer,
        Translator,
    )


def get_settings(request: Request) -> Settings:
    """Retorna a Settings imutavel do app state."""
    return request.app.state.settings  # type: ignore[no-any-return]


def get_synthesizer(request: Request) -> SpeechSynthesizer:
    """Retorna o adapter TTS do app state."""
    return request.app.state.synthesizer  # type: ignore[no-any-return]


def get_translator(request: Request) -> Translator:
    """Retorna o adapter de traducao do app state."""
    return request.app.state.translator  # type: ignore[no-any-return]


def get_recognizer(request: Request) -> SpeechRecognizer:
    """Retorna o adapter STT do app state."""
    return request.app.state.recognizer  # type: ignore[no-any-return]


def get_answerer(request: Request) -> Answerer:
    """Retorna o answerer de Q&A do app state."""
    return request.app.state.answerer  # type: ignore[no-any-return]
