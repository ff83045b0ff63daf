"""Grupo principal de comandos CLI do EchoVerse."""

from __future__ import annotations

import click

import echoverse


@click.group()
@click.version_option(version=echoverse.__version__, prog_name="echoverse")
def cli() -> None:
    """EchoVerse — Gateway de voz, traducao e Q&A."""
