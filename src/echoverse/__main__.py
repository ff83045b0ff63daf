"""Permite `python -m echoverse`."""

from echoverse.cli import cli

if __name__ == "__main__":
    cli()
