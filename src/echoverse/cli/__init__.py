"""CLI do EchoVerse.

Registra todos os comandos no grupo principal.
"""

from echoverse.cli.client import ask, narrate, translate
from echoverse.cli.main import cli
from echoverse.cli.serve import serve

__all__ = [
    "ask",
    "cli",
    "narrate",
    "serve",
    "translate",
]
