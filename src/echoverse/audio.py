"""Normalizacao de containers de audio retornados pelo provider TTS.

O provider sintetiza em streaming e pode emitir WAV com tamanhos
desconhecidos no header (0 ou 0xFFFFFFFF). Players no browser usam esses
campos para calcular duracao e seek, entao o header e reescrito com os
tamanhos reais antes da resposta.
"""

from __future__ import annotations

import struct

from echoverse.logging import get_logger

logger = get_logger("audio")

_RIFF_HEADER_SIZE = 12
_CHUNK_HEADER_SIZE = 8

_EXTENSIONS: dict[str, str] = {
    "audio/mp3": "mp3",
    "audio/mpeg": "mp3",
    "audio/wav": "wav",
    "audio/wave": "wav",
    "audio/x-wav": "wav",
    "audio/ogg": "ogg",
    "audio/webm": "webm",
    "audio/flac": "flac",
    "audio/l16": "pcm",
    "audio/basic": "au",
    "audio/mulaw": "ulaw",
    "audio/alaw": "alaw",
}


def base_media_type(media_type: str) -> str:
    """Remove parametros do MIME type ("audio/ogg;codecs=opus" -> "audio/ogg")."""
    return media_type.split(";", 1)[0].strip().lower()


def file_extension(media_type: str) -> str:
    """Extensao de arquivo sugerida para o MIME type."""
    return _EXTENSIONS.get(base_media_type(media_type), "audio")


def is_wav(data: bytes) -> bool:
    return len(data) >= _RIFF_HEADER_SIZE and data[:4] == b"RIFF" and data[8:12] == b"WAVE"


def repair_wav_header(data: bytes) -> bytes:
    """Reescreve os tamanhos declarados num container RIFF/WAVE.

    - RIFF chunk size passa a ser len(data) - 8.
    - data chunk size passa a ser o numero de bytes apos o header do chunk,
      exceto quando o tamanho declarado ja cabe no payload: nesse caso e
      mantido, preservando chunks posteriores (ex: LIST) fora do audio.

    Payloads que nao sao WAV (mp3, ogg, ...) sao retornados sem alteracao.

    Args:
        data: Audio completo retornado pelo provider.

    Returns:
        Audio com header consistente com o tamanho do payload.
    """
    if not is_wav(data):
        return data

    offset = _find_data_chunk(data)
    if offset is None:
        logger.warning("wav_data_chunk_not_found", audio_bytes=len(data))
        return data

    buf = bytearray(data)
    struct.pack_into("<I", buf, 4, len(buf) - 8)
    available = len(buf) - offset - _CHUNK_HEADER_SIZE
    (declared,) = struct.unpack_from("<I", buf, offset + 4)
    data_size = declared if 0 < declared <= available else available
    struct.pack_into("<I", buf, offset + 4, data_size)
    return bytes(buf)


def _find_data_chunk(data: bytes) -> int | None:
    """Offset do header do chunk "data", ou None se ausente."""
    offset = _RIFF_HEADER_SIZE
    while offset + _CHUNK_HEADER_SIZE <= len(data):
        chunk_id = data[offset : offset + 4]
        if chunk_id == b"data":
            return offset
        (chunk_size,) = struct.unpack_from("<I", data, offset + 4)
        next_offset = offset + _CHUNK_HEADER_SIZE + chunk_size + (chunk_size & 1)
        if next_offset > len(data):
            break
        offset = next_offset

    # Chunks anteriores com tamanho invalido: busca linear pelo marcador
    found = data.find(b"data", _RIFF_HEADER_SIZE)
    if found == -1 or found + _CHUNK_HEADER_SIZE > len(data):
        return None
    return found
