"""Interfaces abstratas para os adapters upstream.

Todo provider (Watson hoje, outro amanha) implementa uma destas interfaces
para ser plugavel no gateway. As rotas interagem com providers
exclusivamente atraves delas.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from echoverse._types import ProviderStatus, QAResult, RecognitionResult, SynthesisResult


class SpeechSynthesizer(ABC):
    """Contrato de sintese de voz: texto in, bytes de audio out."""

    name = "text_to_speech"

    @abstractmethod
    async def synthesize(self, text: str, voice: str, accept: str) -> SynthesisResult:
        """Sintetiza texto em audio.

        Args:
            text: Texto a ser sintetizado.
            voice: Identificador da voz no provider.
            accept: MIME type do audio de saida (ex: "audio/mp3", "audio/wav").

        Returns:
            SynthesisResult com o audio bruto, sem reparo de header.

        Raises:
            UpstreamError: Se a chamada ao provider falhar.
        """
        ...

    @abstractmethod
    def status(self) -> ProviderStatus: ...


class Translator(ABC):
    """Contrato de traducao: lote de textos in, candidatos out."""

    name = "translator"

    @abstractmethod
    async def translate(self, texts: list[str], source: str, target: str) -> list[dict[str, Any]]:
        """Traduz um lote de textos de `source` para `target`.

        O par de idiomas nao e validado aqui; o provider responde com erro
        se nao suportar o par.

        Returns:
            Lista de candidatos no formato do provider ({"translation": ...}).
            Pode ser vazia.

        Raises:
            UpstreamError: Se a chamada ao provider falhar.
        """
        ...

    @abstractmethod
    def status(self) -> ProviderStatus: ...


class SpeechRecognizer(ABC):
    """Contrato de reconhecimento de fala: audio in, texto out."""

    name = "speech_to_text"

    @abstractmethod
    async def recognize(self, audio: bytes, content_type: str) -> RecognitionResult:
        """Transcreve audio.

        Raises:
            UpstreamError: Se a chamada ao provider falhar.
        """
        ...

    @abstractmethod
    def status(self) -> ProviderStatus: ...


class Answerer(ABC):
    """Contrato de Q&A."""

    name = "qa"

    @abstractmethod
    async def answer(self, question: str, context: str | None = None) -> QAResult: ...

    @abstractmethod
    def status(self) -> ProviderStatus: ...
