"""POST /api/stt — reconhecimento de fala (upload de audio in, texto out)."""

from __future__ import annotations

from fastapi import APIRouter, Depends, File, UploadFile

from echoverse.exceptions import InvalidInputError, PayloadTooLargeError
from echoverse.logging import get_logger
from echoverse.providers.interface import SpeechRecognizer  # noqa: TC001
from echoverse.server.constants import (
    ALLOWED_AUDIO_CONTENT_TYPES,
    DEFAULT_UPLOAD_CONTENT_TYPE,
    MAX_UPLOAD_SIZE_BYTES,
    MISSING_AUDIO,
    STT_FAILED,
)
from echoverse.server.dependencies import get_recognizer
from echoverse.server.models.responses import RecognitionResponse
from echoverse.server.routes._common import error_responses, upstream_boundary

router = APIRouter()

logger = get_logger("server.routes.transcribe")

_TOO_LARGE = "Audio file too large"


@router.post(
    "/api/stt",
    response_model=RecognitionResponse,
    responses=error_responses(400, 413, 500),
)
async def recognize(
    audio: UploadFile | None = File(default=None),  # noqa: B008
    recognizer: SpeechRecognizer = Depends(get_recognizer),  # noqa: B008
) -> RecognitionResponse:
    """Transcreve o arquivo enviado no campo multipart `audio`."""
    if audio is None:
        raise InvalidInputError(MISSING_AUDIO)

    content_type = audio.content_type or DEFAULT_UPLOAD_CONTENT_TYPE
    base_type = content_type.split(";", 1)[0].strip().lower()
    if base_type not in ALLOWED_AUDIO_CONTENT_TYPES:
        raise InvalidInputError(
            "Unsupported audio content type",
            f"'{content_type}' is not one of: WAV, MP3, FLAC, OGG, WebM",
        )

    # Validar tamanho (pre-leitura se disponivel)
    if audio.size is not None and audio.size > MAX_UPLOAD_SIZE_BYTES:
        raise PayloadTooLargeError(audio.size, MAX_UPLOAD_SIZE_BYTES, _TOO_LARGE)

    # Ler audio com limite para prevenir OOM em uploads sem Content-Length
    data = await audio.read(MAX_UPLOAD_SIZE_BYTES + 1)
    if len(data) > MAX_UPLOAD_SIZE_BYTES:
        raise PayloadTooLargeError(len(data), MAX_UPLOAD_SIZE_BYTES, _TOO_LARGE)
    if not data:
        raise InvalidInputError(MISSING_AUDIO)

    logger.info(
        "stt_request",
        content_type=content_type,
        audio_bytes=len(data),
    )

    with upstream_boundary(recognizer.name, STT_FAILED):
        result = await recognizer.recognize(data, content_type)

    logger.info("stt_done", transcript_length=len(result.transcript))
    return RecognitionResponse(transcript=result.transcript)
