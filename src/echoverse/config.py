"""Configuracao do gateway carregada de variaveis de ambiente.

Construida uma unica vez no startup e nunca mutada depois. Os adapters
recebem a secao que lhes interessa por referencia.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

DEFAULT_VOICE = "en-US_AllisonV3Voice"
DEFAULT_AUDIO_FORMAT = "audio/mp3"
DEFAULT_STT_MODEL = "en-US_BroadbandModel"
DEFAULT_TRANSLATOR_VERSION = "2018-05-01"
DEFAULT_PORT = 3001
DEFAULT_MAX_BODY_BYTES = 2 * 1024 * 1024  # 2MB

STATIC_DIR = Path(__file__).resolve().parent / "static"


def _parse_origins(raw: str | None) -> list[str]:
    if not raw:
        return ["*"]
    parts = [item.strip() for item in raw.split(",") if item.strip()]
    return parts or ["*"]


def _optional_env(name: str) -> str | None:
    value = os.getenv(name, "").strip()
    return value or None


@dataclass(frozen=True, slots=True)
class ProviderCredentials:
    """API key e URL base de um servico Watson."""

    api_key: str | None = None
    url: str | None = None

    @property
    def configured(self) -> bool:
        return bool(self.api_key and self.url)


@dataclass(frozen=True, slots=True)
class Settings:
    """Parametros do gateway.

    Defaults vem do ambiente; testes constroem instancias explicitas.
    """

    text_to_speech: ProviderCredentials = field(
        default_factory=lambda: ProviderCredentials(
            _optional_env("TTS_API_KEY"), _optional_env("TTS_URL")
        ),
    )
    translator: ProviderCredentials = field(
        default_factory=lambda: ProviderCredentials(
            _optional_env("LT_API_KEY"), _optional_env("LT_URL")
        ),
    )
    speech_to_text: ProviderCredentials = field(
        default_factory=lambda: ProviderCredentials(
            _optional_env("STT_API_KEY"), _optional_env("STT_URL")
        ),
    )
    default_voice: str = field(default_factory=lambda: os.getenv("TTS_VOICE", DEFAULT_VOICE))
    translator_version: str = field(
        default_factory=lambda: os.getenv("LT_VERSION", DEFAULT_TRANSLATOR_VERSION),
    )
    stt_model: str = field(default_factory=lambda: os.getenv("STT_MODEL", DEFAULT_STT_MODEL))
    host: str = field(default_factory=lambda: os.getenv("ECHOVERSE_HOST", "127.0.0.1"))
    port: int = field(default_factory=lambda: int(os.getenv("PORT", str(DEFAULT_PORT))))
    static_dir: Path | None = field(
        default_factory=lambda: Path(os.getenv("ECHOVERSE_STATIC_DIR", str(STATIC_DIR))),
    )
    max_body_bytes: int = field(
        default_factory=lambda: int(
            os.getenv("ECHOVERSE_MAX_BODY_BYTES", str(DEFAULT_MAX_BODY_BYTES))
        ),
    )
    upstream_timeout_s: float = field(
        default_factory=lambda: float(os.getenv("ECHOVERSE_UPSTREAM_TIMEOUT", "60.0")),
    )
    cors_origins: list[str] = field(
        default_factory=lambda: _parse_origins(os.getenv("ECHOVERSE_CORS_ORIGINS")),
    )
