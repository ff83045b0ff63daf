"""Answerer placeholder para o endpoint de Q&A.

Nao existe backend de Q&A: a resposta ecoa a pergunta num template fixo.
Este modulo existe para ser substituido por uma integracao real.
"""

from __future__ import annotations

from echoverse._types import ProviderStatus, QAResult
from echoverse.providers.interface import Answerer

PLACEHOLDER_NOTE = (
    "(Context-aware answers go here. Hook this endpoint to a grounded answering backend.)"
)


class PlaceholderAnswerer(Answerer):
    """Resposta deterministica derivada apenas da pergunta. `context` e aceito e ignorado."""

    async def answer(self, question: str, context: str | None = None) -> QAResult:
        return QAResult(answer=f"Q: {question}\n\n{PLACEHOLDER_NOTE}")

    def status(self) -> ProviderStatus:
        return ProviderStatus.CONFIGURED
