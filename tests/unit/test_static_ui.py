"""Testes da UI estatica servida pelo gateway."""

from __future__ import annotations

import dataclasses
from pathlib import Path
from unittest.mock import MagicMock

import httpx

from echoverse.config import STATIC_DIR, Settings
from echoverse.server.app import create_app


def _make_app(settings: Settings, static_dir: Path | None) -> object:
    return create_app(
        dataclasses.replace(settings, static_dir=static_dir),
        synthesizer=MagicMock(),
        translator=MagicMock(),
        recognizer=MagicMock(),
    )


async def test_index_is_served_at_root(settings: Settings) -> None:
    app = _make_app(settings, STATIC_DIR)

    async with httpx.AsyncClient(
        transport=httpx.ASGITransport(app=app),  # type: ignore[arg-type]
        base_url="http://test",
    ) as client:
        index = await client.get("/")
        script = await client.get("/app.js")

    assert index.status_code == 200
    assert "EchoVerse Studio" in index.text
    assert 'id="tts-download"' in index.text
    assert script.status_code == 200
    assert "lastAudioObjectUrl" in script.text


async def test_api_routes_take_precedence_over_static(settings: Settings) -> None:
    app = _make_app(settings, STATIC_DIR)

    async with httpx.AsyncClient(
        transport=httpx.ASGITransport(app=app),  # type: ignore[arg-type]
        base_url="http://test",
    ) as client:
        qa = await client.post("/api/qa", json={"question": "Hi?"})
        health = await client.get("/health")

    assert qa.status_code == 200
    assert health.json()["status"] == "ok"


async def test_no_static_dir_means_api_only(settings: Settings) -> None:
    app = _make_app(settings, None)

    async with httpx.AsyncClient(
        transport=httpx.ASGITransport(app=app),  # type: ignore[arg-type]
        base_url="http://test",
    ) as client:
        response = await client.get("/")

    assert response.status_code == 404


async def test_missing_static_dir_is_skipped(settings: Settings, tmp_path: Path) -> None:
    app = _make_app(settings, tmp_path / "does-not-exist")

    async with httpx.AsyncClient(
        transport=httpx.ASGITransport(app=app),  # type: ignore[arg-type]
        base_url="http://test",
    ) as client:
        response = await client.get("/")

    assert response.status_code == 404
