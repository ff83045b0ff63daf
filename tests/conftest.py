"""Fixtures compartilhadas para todos os testes."""

from __future__ import annotations

import struct

import pytest

from echoverse.config import ProviderCredentials, Settings

# Marcador de tamanho desconhecido emitido por encoders em streaming
UNKNOWN_SIZE = 0xFFFFFFFF


@pytest.fixture
def settings() -> Settings:
    """Settings explicita, sem UI estatica e com credenciais ficticias."""
    return Settings(
        text_to_speech=ProviderCredentials("tts-secret-key", "https://tts.watson.test"),
        translator=ProviderCredentials("lt-secret-key", "https://lt.watson.test"),
        speech_to_text=ProviderCredentials("stt-secret-key", "https://stt.watson.test"),
        default_voice="en-US_AllisonV3Voice",
        static_dir=None,
        max_body_bytes=2 * 1024 * 1024,
        cors_origins=["*"],
    )


@pytest.fixture
def pcm_payload() -> bytes:
    """100 samples PCM 16-bit mono."""
    return struct.pack("<100h", *range(100))


@pytest.fixture
def streamed_wav_bytes(pcm_payload: bytes) -> bytes:
    """WAV 22050Hz mono com tamanhos RIFF e data desconhecidos (0xFFFFFFFF)."""
    sample_rate = 22050
    fmt = struct.pack("<HHIIHH", 1, 1, sample_rate, sample_rate * 2, 2, 16)
    return (
        b"RIFF"
        + struct.pack("<I", UNKNOWN_SIZE)
        + b"WAVE"
        + b"fmt "
        + struct.pack("<I", len(fmt))
        + fmt
        + b"data"
        + struct.pack("<I", UNKNOWN_SIZE)
        + pcm_payload
    )
