"""POST /api/tts — sintese de voz (texto in, audio binario out)."""

from __future__ import annotations

from fastapi import APIRouter, Depends
from fastapi.responses import Response

from echoverse.audio import file_extension, repair_wav_header
from echoverse.config import Settings  # noqa: TC001
from echoverse.exceptions import InvalidInputError
from echoverse.logging import get_logger
from echoverse.providers.interface import SpeechSynthesizer  # noqa: TC001
from echoverse.server.constants import MISSING_TEXT, TTS_FAILED
from echoverse.server.dependencies import get_settings, get_synthesizer
from echoverse.server.models.requests import SynthesisRequest  # noqa: TC001
from echoverse.server.routes._common import error_responses, upstream_boundary

router = APIRouter()

logger = get_logger("server.routes.speech")


@router.post("/api/tts", responses=error_responses(400, 413, 500))
async def synthesize(
    body: SynthesisRequest,
    settings: Settings = Depends(get_settings),  # noqa: B008
    synthesizer: SpeechSynthesizer = Depends(get_synthesizer),  # noqa: B008
) -> Response:
    """Sintetiza audio a partir de texto.

    Retorna audio binario no body (nao JSON), com header WAV reparado
    quando o provider devolve tamanhos desconhecidos.
    """
    if body.text is None or not body.text.strip():
        raise InvalidInputError(MISSING_TEXT)

    voice = body.voice or settings.default_voice
    logger.info(
        "tts_request",
        voice=voice,
        accept=body.accept,
        text_length=len(body.text),
    )

    with upstream_boundary(synthesizer.name, TTS_FAILED):
        result = await synthesizer.synthesize(body.text, voice, body.accept)

    audio = repair_wav_header(result.audio_data)

    logger.info(
        "tts_done",
        audio_bytes=len(audio),
        repaired=audio is not result.audio_data,
    )

    return Response(
        content=audio,
        media_type=body.accept,
        headers={
            "Content-Disposition": f'inline; filename="speech.{file_extension(body.accept)}"',
            "Cache-Control": "no-store",
        },
    )
