"""Testes dos exception handlers e do limite de body JSON."""

from __future__ import annotations

import dataclasses
import json
from typing import TYPE_CHECKING
from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest

from echoverse.config import Settings  # noqa: TC001
from echoverse.exceptions import ConfigError
from echoverse.server.app import create_app
from echoverse.server.middleware import is_json_media_type

if TYPE_CHECKING:
    from collections.abc import AsyncIterator


def _make_app(settings: Settings, **overrides: object) -> object:
    synthesizer = MagicMock()
    synthesizer.name = "text_to_speech"
    synthesizer.synthesize = AsyncMock()
    translator = MagicMock()
    translator.name = "translator"
    translator.translate = AsyncMock(return_value=[{"translation": "ok"}])
    return create_app(
        settings,
        synthesizer=overrides.get("synthesizer", synthesizer),  # type: ignore[arg-type]
        translator=overrides.get("translator", translator),  # type: ignore[arg-type]
        recognizer=MagicMock(),
        answerer=overrides.get("answerer"),  # type: ignore[arg-type]
    )


def _client(app: object) -> httpx.AsyncClient:
    return httpx.AsyncClient(
        transport=httpx.ASGITransport(app=app, raise_app_exceptions=False),  # type: ignore[arg-type]
        base_url="http://test",
    )


async def test_body_over_limit_returns_413_before_parsing(settings: Settings) -> None:
    small = dataclasses.replace(settings, max_body_bytes=64)
    app = _make_app(small)
    payload = json.dumps({"text": "x" * 200, "source": "en", "target": "te"})

    async with _client(app) as client:
        response = await client.post(
            "/api/translate",
            content=payload,
            headers={"Content-Type": "application/json"},
        )

    assert response.status_code == 413
    assert response.json() == {"error": "Request body too large"}
    app.state.translator.translate.assert_not_called()  # type: ignore[attr-defined]


async def test_body_at_limit_is_accepted(settings: Settings) -> None:
    payload = json.dumps({"text": "Hello", "source": "en", "target": "te"})
    exact = dataclasses.replace(settings, max_body_bytes=len(payload.encode()))
    app = _make_app(exact)

    async with _client(app) as client:
        response = await client.post(
            "/api/translate",
            content=payload,
            headers={"Content-Type": "application/json"},
        )

    assert response.status_code == 200


async def test_malformed_json_returns_400(settings: Settings) -> None:
    app = _make_app(settings)

    async with _client(app) as client:
        response = await client.post(
            "/api/qa",
            content=b"{not json",
            headers={"Content-Type": "application/json"},
        )

    assert response.status_code == 400
    body = response.json()
    assert body["error"] == "Invalid request body"
    assert "details" in body


async def test_wrong_field_type_returns_400_not_422(settings: Settings) -> None:
    app = _make_app(settings)

    async with _client(app) as client:
        response = await client.post("/api/tts", json={"text": 123})

    assert response.status_code == 400
    assert response.json()["error"] == "Invalid request body"
    assert "text" in response.json()["details"]


async def test_missing_body_returns_400(settings: Settings) -> None:
    app = _make_app(settings)

    async with _client(app) as client:
        response = await client.post("/api/qa")

    assert response.status_code == 400
    assert response.json()["error"] == "Invalid request body"


async def test_unexpected_error_returns_generic_500(settings: Settings) -> None:
    answerer = MagicMock()
    answerer.name = "qa"
    answerer.answer = AsyncMock(side_effect=KeyError("boom"))
    app = _make_app(settings, answerer=answerer)

    async with _client(app) as client:
        response = await client.post("/api/qa", json={"question": "Why?"})

    assert response.status_code == 500
    assert response.json() == {"error": "Internal server error"}


async def test_responses_carry_request_id(settings: Settings) -> None:
    app = _make_app(settings)

    async with _client(app) as client:
        response = await client.post("/api/qa", json={"question": "Why?"})

    assert response.headers.get("x-request-id")


async def test_upstream_details_never_include_credentials(settings: Settings) -> None:
    from echoverse.providers.watson import WatsonLanguageTranslator

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(401, json={"code": 401, "error": "Unauthorized"})

    upstream = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    translator = WatsonLanguageTranslator(settings.translator, upstream, version="2018-05-01")
    app = _make_app(settings, translator=translator)

    async with _client(app) as client:
        response = await client.post(
            "/api/translate", json={"text": "Hello", "source": "en", "target": "te"}
        )
    await upstream.aclose()

    assert response.status_code == 500
    assert response.json() == {"error": "Translation failed", "details": "401 Unauthorized"}
    assert "lt-secret-key" not in response.text


def test_non_positive_body_limit_is_config_error(settings: Settings) -> None:
    with pytest.raises(ConfigError):
        create_app(
            dataclasses.replace(settings, max_body_bytes=0),
            synthesizer=MagicMock(),
            translator=MagicMock(),
            recognizer=MagicMock(),
        )


async def test_rejected_body_still_carries_request_id(settings: Settings) -> None:
    small = dataclasses.replace(settings, max_body_bytes=8)
    app = _make_app(small)

    async with _client(app) as client:
        response = await client.post("/api/qa", json={"question": "A long question"})

    assert response.status_code == 413
    assert response.headers.get("x-request-id")


def _oversized_question() -> bytes:
    return json.dumps({"question": "x" * 500}).encode()


async def test_json_content_type_is_matched_case_insensitively(settings: Settings) -> None:
    answerer = MagicMock()
    answerer.name = "qa"
    answerer.answer = AsyncMock()
    app = _make_app(dataclasses.replace(settings, max_body_bytes=100), answerer=answerer)

    async with _client(app) as client:
        response = await client.post(
            "/api/qa",
            content=_oversized_question(),
            headers={"Content-Type": "Application/JSON; charset=utf-8"},
        )

    assert response.status_code == 413
    assert response.json() == {"error": "Request body too large"}
    answerer.answer.assert_not_called()


async def test_chunked_body_over_limit_returns_413(settings: Settings) -> None:
    answerer = MagicMock()
    answerer.name = "qa"
    answerer.answer = AsyncMock()
    app = _make_app(dataclasses.replace(settings, max_body_bytes=100), answerer=answerer)
    payload = _oversized_question()

    async def stream() -> AsyncIterator[bytes]:
        for start in range(0, len(payload), 64):
            yield payload[start : start + 64]

    async with _client(app) as client:
        response = await client.post(
            "/api/qa",
            content=stream(),
            headers={"Content-Type": "application/json"},
        )

    assert response.status_code == 413
    assert response.json() == {"error": "Request body too large"}
    assert response.headers.get("x-request-id")
    answerer.answer.assert_not_called()


async def test_chunked_body_within_limit_reaches_route(settings: Settings) -> None:
    app = _make_app(settings)
    payload = json.dumps({"question": "Why?"}).encode()

    async def stream() -> AsyncIterator[bytes]:
        yield payload[:5]
        yield payload[5:]

    async with _client(app) as client:
        response = await client.post(
            "/api/qa",
            content=stream(),
            headers={"Content-Type": "application/json"},
        )

    assert response.status_code == 200
    assert response.json()["answer"].startswith("Q: Why?")


class TestIsJsonMediaType:
    @pytest.mark.parametrize(
        "content_type",
        [
            "application/json",
            "Application/JSON",
            "application/json; charset=utf-8",
            "application/merge-patch+json",
        ],
    )
    def test_json_types(self, content_type: str) -> None:
        assert is_json_media_type(content_type)

    @pytest.mark.parametrize("content_type", ["", "text/plain", "multipart/form-data; boundary=x"])
    def test_other_types(self, content_type: str) -> None:
        assert not is_json_media_type(content_type)


class TestCors:
    async def test_wildcard_origins_do_not_allow_credentials(self, settings: Settings) -> None:
        app = _make_app(settings)

        async with _client(app) as client:
            response = await client.post(
                "/api/qa", json={"question": "Why?"}, headers={"Origin": "http://evil.test"}
            )

        assert response.headers.get("access-control-allow-origin") == "*"
        assert "access-control-allow-credentials" not in response.headers

    async def test_explicit_origins_allow_credentials(self, settings: Settings) -> None:
        explicit = dataclasses.replace(settings, cors_origins=["http://ui.test"])
        app = _make_app(explicit)

        async with _client(app) as client:
            response = await client.post(
                "/api/qa", json={"question": "Why?"}, headers={"Origin": "http://ui.test"}
            )

        assert response.headers.get("access-control-allow-origin") == "http://ui.test"
        assert response.headers.get("access-control-allow-credentials") == "true"

    async def test_rejected_body_carries_cors_headers(self, settings: Settings) -> None:
        app = _make_app(dataclasses.replace(settings, max_body_bytes=8))

        async with _client(app) as client:
            response = await client.post(
                "/api/qa",
                json={"question": "A long question"},
                headers={"Origin": "http://ui.test"},
            )

        assert response.status_code == 413
        assert response.headers.get("access-control-allow-origin") == "*"


async def test_openapi_documents_error_body(settings: Settings) -> None:
    app = _make_app(settings)

    async with _client(app) as client:
        schema = (await client.get("/openapi.json")).json()

    assert "ErrorResponse" in schema["components"]["schemas"]
    tts_400 = schema["paths"]["/api/tts"]["post"]["responses"]["400"]
    assert tts_400["content"]["application/json"]["schema"]["$ref"].endswith("/ErrorResponse")
    assert "413" in schema["paths"]["/api/qa"]["post"]["responses"]
    assert "500" in schema["paths"]["/api/translate"]["post"]["responses"]
