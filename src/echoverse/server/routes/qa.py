"""POST /api/qa — Q&A placeholder (pergunta in, resposta out)."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from echoverse.exceptions import InvalidInputError
from echoverse.providers.interface import Answerer  # noqa: TC001
from echoverse.server.constants import MISSING_QUESTION
from echoverse.server.dependencies import get_answerer
from echoverse.server.models.requests import QARequest  # noqa: TC001
from echoverse.server.models.responses import QAResponse
from echoverse.server.routes._common import error_responses

router = APIRouter()


@router.post("/api/qa", response_model=QAResponse, responses=error_responses(400, 413))
async def answer(
    body: QARequest,
    answerer: Answerer = Depends(get_answerer),  # noqa: B008
) -> QAResponse:
    """Responde uma pergunta.

    Sem backend real: o answerer padrao ecoa a pergunta num template.
    """
    if body.question is None or not body.question.strip():
        raise InvalidInputError(MISSING_QUESTION)

    result = await answerer.answer(body.question, body.context)
    return QAResponse(answer=result.answer)
