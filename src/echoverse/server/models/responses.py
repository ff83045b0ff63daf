"""Modelos de resposta da API — Pydantic models para serializacao JSON."""

from __future__ import annotations

from pydantic import BaseModel


class TranslationResponse(BaseModel):
    """Resposta de POST /api/translate: {"translation": "..."}."""

    translation: str


class QAResponse(BaseModel):
    """Resposta de POST /api/qa: {"answer": "..."}."""

    answer: str


class RecognitionResponse(BaseModel):
    """Resposta de POST /api/stt: {"transcript": "..."}."""

    transcript: str


class ErrorResponse(BaseModel):
    """Resposta de erro: {"error": "...", "details": "..."}.

    `details` so aparece em falhas de upstream e de validacao do body.
    """

    error: str
    details: str | None = None
