"""Constantes compartilhadas do server."""

from __future__ import annotations

MAX_UPLOAD_SIZE_BYTES = 25 * 1024 * 1024  # 25MB

DEFAULT_UPLOAD_CONTENT_TYPE = "audio/webm"

ALLOWED_AUDIO_CONTENT_TYPES = frozenset(
    {
        "audio/wav",
        "audio/x-wav",
        "audio/wave",
        "audio/mpeg",
        "audio/mp3",
        "audio/flac",
        "audio/ogg",
        "audio/webm",
        "audio/x-flac",
        "audio/l16",
        "audio/mulaw",
        "audio/basic",
        "application/octet-stream",  # fallback generico
    }
)

# Mensagens de erro expostas ao cliente
MISSING_TEXT = "Missing text"
MISSING_QUESTION = "Missing question"
MISSING_AUDIO = "Missing audio"
MISSING_TRANSLATION_FIELDS = "Provide text, source, target (e.g., en→te, hi→en, te→en)"
TTS_FAILED = "TTS failed"
TRANSLATION_FAILED = "Translation failed"
STT_FAILED = "STT failed"
