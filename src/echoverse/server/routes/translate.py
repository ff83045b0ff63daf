"""POST /api/translate — traducao de texto (texto in, texto out)."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends

from echoverse._types import TranslationResult
from echoverse.exceptions import InvalidInputError
from echoverse.logging import get_logger
from echoverse.providers.interface import Translator  # noqa: TC001
from echoverse.server.constants import MISSING_TRANSLATION_FIELDS, TRANSLATION_FAILED
from echoverse.server.dependencies import get_translator
from echoverse.server.models.requests import TranslationRequest  # noqa: TC001
from echoverse.server.models.responses import TranslationResponse
from echoverse.server.routes._common import error_responses, upstream_boundary

router = APIRouter()

logger = get_logger("server.routes.translate")


@router.post(
    "/api/translate",
    response_model=TranslationResponse,
    responses=error_responses(400, 413, 500),
)
async def translate(
    body: TranslationRequest,
    translator: Translator = Depends(get_translator),  # noqa: B008
) -> TranslationResponse:
    """Traduz `text` de `source` para `target`.

    O par de idiomas nao e validado aqui: pares nao suportados voltam
    como erro do provider (500).
    """
    if not body.text or not body.source or not body.target:
        raise InvalidInputError(MISSING_TRANSLATION_FIELDS)

    logger.info(
        "translate_request",
        source=body.source,
        target=body.target,
        text_length=len(body.text),
    )

    with upstream_boundary(translator.name, TRANSLATION_FAILED):
        candidates = await translator.translate([body.text], body.source, body.target)

    result = TranslationResult(translation=first_translation(candidates))
    logger.info(
        "translate_done",
        candidates=len(candidates),
        translation_length=len(result.translation),
    )
    return TranslationResponse(translation=result.translation)


def first_translation(candidates: list[dict[str, Any]] | None) -> str:
    """Texto do primeiro candidato, ou "" se nao houver."""
    if not candidates:
        return ""
    value = candidates[0].get("translation")
    return value if isinstance(value, str) else ""
