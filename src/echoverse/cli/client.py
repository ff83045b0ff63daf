"""Comandos `echoverse narrate`, `translate` e `ask` — thin clients HTTP."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Any

import click
import httpx

from echoverse.audio import file_extension
from echoverse.cli.main import cli
from echoverse.config import DEFAULT_AUDIO_FORMAT

DEFAULT_SERVER_URL = "http://localhost:3001"


def _post_json(server_url: str, endpoint: str, payload: dict[str, Any]) -> httpx.Response:
    """Envia JSON ao gateway; sai com codigo 1 em erro de conexao ou status != 200."""
    url = f"{server_url.rstrip('/')}{endpoint}"
    try:
        response = httpx.post(url, json=payload, timeout=120.0)
    except httpx.ConnectError:
        click.echo(
            f"Erro: servidor nao disponivel em {server_url}. Execute 'echoverse serve' primeiro.",
            err=True,
        )
        sys.exit(1)

    if response.status_code != 200:
        try:
            body = response.json()
            msg = body.get("error", response.text)
            if body.get("details"):
                msg = f"{msg} ({body['details']})"
        except ValueError:
            msg = response.text
        click.echo(f"Erro ({response.status_code}): {msg}", err=True)
        sys.exit(1)

    return response


@cli.command()
@click.argument("text")
@click.option("--voice", default=None, help="Voz do provider (default: TTS_VOICE do servidor).")
@click.option("--accept", default=DEFAULT_AUDIO_FORMAT, show_default=True, help="MIME type.")
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Arquivo de saida (default: narration.<ext>).",
)
@click.option("--server", "server_url", default=DEFAULT_SERVER_URL, show_default=True)
def narrate(
    text: str,
    voice: str | None,
    accept: str,
    output: Path | None,
    server_url: str,
) -> None:
    """Sintetiza TEXT em audio e salva em arquivo."""
    payload: dict[str, Any] = {"text": text, "accept": accept}
    if voice:
        payload["voice"] = voice

    response = _post_json(server_url, "/api/tts", payload)

    target = output or Path(f"narration.{file_extension(accept)}")
    target.write_bytes(response.content)
    click.echo(f"Audio salvo em {target} ({len(response.content)} bytes)")


@cli.command()
@click.argument("text")
@click.option("--source", "-s", required=True, help="Idioma de origem (ex: en).")
@click.option("--target", "-t", required=True, help="Idioma de destino (ex: te).")
@click.option("--server", "server_url", default=DEFAULT_SERVER_URL, show_default=True)
def translate(text: str, source: str, target: str, server_url: str) -> None:
    """Traduz TEXT de SOURCE para TARGET."""
    response = _post_json(
        server_url, "/api/translate", {"text": text, "source": source, "target": target}
    )
    click.echo(response.json().get("translation", ""))


@cli.command()
@click.argument("question")
@click.option("--context", default=None, help="Contexto/referencia opcional.")
@click.option("--server", "server_url", default=DEFAULT_SERVER_URL, show_default=True)
def ask(question: str, context: str | None, server_url: str) -> None:
    """Envia QUESTION ao endpoint de Q&A."""
    payload: dict[str, Any] = {"question": question}
    if context:
        payload["context"] = context
    response = _post_json(server_url, "/api/qa", payload)
    click.echo(response.json().get("answer", ""))
