"""Tipos fundamentais do EchoVerse.

Resultados transientes produzidos pelos adapters. Nenhum deles e persistido:
sao criados por request e descartados apos a resposta.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ProviderStatus(Enum):
    """Estado de configuracao de um provider upstream."""

    CONFIGURED = "configured"
    MISSING_CREDENTIALS = "missing_credentials"


@dataclass(frozen=True, slots=True)
class SynthesisResult:
    """Audio sintetizado pelo provider TTS."""

    audio_data: bytes
    media_type: str


@dataclass(frozen=True, slots=True)
class TranslationResult:
    """Texto traduzido. Vazio quando o provider nao retorna candidato."""

    translation: str


@dataclass(frozen=True, slots=True)
class RecognitionResult:
    """Transcricao retornada pelo provider STT."""

    transcript: str


@dataclass(frozen=True, slots=True)
class QAResult:
    """Resposta do endpoint de Q&A."""

    answer: str
