"""Adapters para os servicos IBM Watson (Text to Speech, Language Translator, Speech to Text).

Chamadas REST via httpx. Autenticacao por API key usando basic auth com
usuario "apikey", aceito por todos os servicos Watson da IBM Cloud.
Credenciais ficam apenas no header Authorization e nunca entram em
mensagens de erro ou logs.
"""

from __future__ import annotations

import time
from typing import TYPE_CHECKING, Any

import httpx

from echoverse._types import ProviderStatus, RecognitionResult, SynthesisResult
from echoverse.exceptions import UpstreamError
from echoverse.logging import get_logger
from echoverse.providers.interface import SpeechRecognizer, SpeechSynthesizer, Translator

if TYPE_CHECKING:
    from echoverse.config import ProviderCredentials

logger = get_logger("providers.watson")

# Corpo de erro truncado quando o provider nao responde JSON
_MAX_ERROR_TEXT = 200


class _WatsonService:
    """Base comum: validacao de credenciais, POST autenticado e mapeamento de erros."""

    name = "watson"

    def __init__(
        self,
        credentials: ProviderCredentials,
        client: httpx.AsyncClient,
        *,
        timeout_s: float = 60.0,
    ) -> None:
        self._credentials = credentials
        self._client = client
        self._timeout_s = timeout_s

    def status(self) -> ProviderStatus:
        if self._credentials.configured:
            return ProviderStatus.CONFIGURED
        return ProviderStatus.MISSING_CREDENTIALS

    async def _post(self, path: str, **kwargs: Any) -> httpx.Response:
        if not self._credentials.configured:
            raise UpstreamError(self.name, "credentials not configured")

        assert self._credentials.url is not None
        assert self._credentials.api_key is not None
        url = f"{self._credentials.url.rstrip('/')}{path}"

        start = time.monotonic()
        try:
            response = await self._client.post(
                url,
                auth=httpx.BasicAuth("apikey", self._credentials.api_key),
                timeout=self._timeout_s,
                **kwargs,
            )
        except httpx.HTTPError as exc:
            logger.error(
                "upstream_transport_error",
                provider=self.name,
                error_type=type(exc).__name__,
            )
            raise UpstreamError(self.name, f"{type(exc).__name__}: {exc}") from exc

        elapsed_ms = round((time.monotonic() - start) * 1000, 1)
        if response.is_error:
            reason = _error_reason(response)
            logger.warning(
                "upstream_error",
                provider=self.name,
                status_code=response.status_code,
                reason=reason,
                elapsed_ms=elapsed_ms,
            )
            raise UpstreamError(self.name, reason)

        logger.debug(
            "upstream_ok",
            provider=self.name,
            status_code=response.status_code,
            elapsed_ms=elapsed_ms,
        )
        return response


class WatsonTextToSpeech(_WatsonService, SpeechSynthesizer):
    """POST {url}/v1/synthesize."""

    name = "text_to_speech"

    async def synthesize(self, text: str, voice: str, accept: str) -> SynthesisResult:
        response = await self._post(
            "/v1/synthesize",
            params={"voice": voice},
            headers={"Accept": accept},
            json={"text": text},
        )
        return SynthesisResult(audio_data=response.content, media_type=accept)


class WatsonLanguageTranslator(_WatsonService, Translator):
    """POST {url}/v3/translate?version=..."""

    name = "translator"

    def __init__(
        self,
        credentials: ProviderCredentials,
        client: httpx.AsyncClient,
        *,
        version: str,
        timeout_s: float = 60.0,
    ) -> None:
        super().__init__(credentials, client, timeout_s=timeout_s)
        self._version = version

    async def translate(self, texts: list[str], source: str, target: str) -> list[dict[str, Any]]:
        response = await self._post(
            "/v3/translate",
            params={"version": self._version},
            json={"text": texts, "source": source, "target": target},
        )
        body = _json_or_empty(response)
        translations = body.get("translations")
        if not isinstance(translations, list):
            return []
        return [t for t in translations if isinstance(t, dict)]


class WatsonSpeechToText(_WatsonService, SpeechRecognizer):
    """POST {url}/v1/recognize?model=..."""

    name = "speech_to_text"

    def __init__(
        self,
        credentials: ProviderCredentials,
        client: httpx.AsyncClient,
        *,
        model: str,
        timeout_s: float = 60.0,
    ) -> None:
        super().__init__(credentials, client, timeout_s=timeout_s)
        self._model = model

    async def recognize(self, audio: bytes, content_type: str) -> RecognitionResult:
        response = await self._post(
            "/v1/recognize",
            params={"model": self._model},
            headers={"Content-Type": content_type},
            content=audio,
        )
        body = _json_or_empty(response)
        return RecognitionResult(transcript=_join_transcripts(body.get("results") or []))


def _join_transcripts(results: list[dict[str, Any]]) -> str:
    """Junta a primeira alternativa de cada resultado, separadas por espaco."""
    parts: list[str] = []
    for result in results:
        alternatives = result.get("alternatives") or []
        transcript = alternatives[0].get("transcript", "") if alternatives else ""
        parts.append(transcript or "")
    return " ".join(parts).strip()


def _json_or_empty(response: httpx.Response) -> dict[str, Any]:
    try:
        body = response.json()
    except ValueError:
        return {}
    return body if isinstance(body, dict) else {}


def _error_reason(response: httpx.Response) -> str:
    """Extrai mensagem legivel de uma resposta de erro Watson.

    Watson responde {"code": 401, "error": "Unauthorized"} na maioria dos casos.
    """
    body = _json_or_empty(response)
    message = body.get("error") or body.get("message") or body.get("description")
    if isinstance(message, str) and message:
        return f"{response.status_code} {message}"
    text = response.text.strip()[:_MAX_ERROR_TEXT]
    if text:
        return f"HTTP {response.status_code}: {text}"
    return f"HTTP {response.status_code}"
