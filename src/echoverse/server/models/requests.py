"""Pydantic models dos bodies JSON aceitos pelo gateway.

Campos obrigatorios sao opcionais no schema: a ausencia e tratada na rota
com a mensagem de erro do contrato (400 {error}) em vez do 422 do FastAPI.
"""

from __future__ import annotations

from pydantic import AliasChoices, BaseModel, Field

from echoverse.config import DEFAULT_AUDIO_FORMAT


class SynthesisRequest(BaseModel):
    """Request body para POST /api/tts."""

    text: str | None = Field(default=None, description="Texto a ser sintetizado.")
    voice: str | None = Field(
        default=None,
        description="Identificador da voz. Default vem de TTS_VOICE.",
    )
    accept: str = Field(
        default=DEFAULT_AUDIO_FORMAT,
        validation_alias=AliasChoices("accept", "format"),
        description="MIME type do audio de saida (ex: audio/mp3, audio/wav).",
    )


class TranslationRequest(BaseModel):
    """Request body para POST /api/translate."""

    text: str | None = None
    source: str | None = Field(default=None, description="Codigo do idioma de origem (ex: en).")
    target: str | None = Field(default=None, description="Codigo do idioma de destino (ex: te).")


class QARequest(BaseModel):
    """Request body para POST /api/qa. `context` e aceito mas nao usado."""

    question: str | None = None
    context: str | None = None
