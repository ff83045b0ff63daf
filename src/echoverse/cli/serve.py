"""Comando `echoverse serve` — inicia o gateway HTTP."""

from __future__ import annotations

from dataclasses import replace
from pathlib import Path

import click

from echoverse.cli.main import cli
from echoverse.config import DEFAULT_PORT, Settings
from echoverse.exceptions import ConfigError
from echoverse.logging import configure_logging, get_logger

logger = get_logger("cli.serve")

DEFAULT_HOST = "127.0.0.1"


@cli.command()
@click.option(
    "--host",
    default=DEFAULT_HOST,
    show_default=True,
    envvar="ECHOVERSE_HOST",
    help="Host do gateway.",
)
@click.option(
    "--port",
    default=DEFAULT_PORT,
    type=int,
    show_default=True,
    envvar="PORT",
    help="Porta HTTP.",
)
@click.option(
    "--static-dir",
    default=None,
    help="Diretorio da UI estatica (default: UI empacotada).",
)
@click.option(
    "--no-static",
    is_flag=True,
    default=False,
    help="Serve apenas a API, sem a UI.",
)
@click.option(
    "--cors-origins",
    default="",
    help="CORS origins (comma-separated). Ex: http://localhost:5173",
)
@click.option(
    "--log-format",
    type=click.Choice(["console", "json"]),
    default="console",
    show_default=True,
    envvar="ECHOVERSE_LOG_FORMAT",
    help="Formato de log.",
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default="INFO",
    show_default=True,
    envvar="ECHOVERSE_LOG_LEVEL",
    help="Nivel de log.",
)
def serve(
    host: str,
    port: int,
    static_dir: str | None,
    no_static: bool,
    cors_origins: str,
    log_format: str,
    log_level: str,
) -> None:
    """Inicia o EchoVerse API Server com a UI."""
    configure_logging(log_format=log_format, level=log_level, force=True)
    try:
        settings = build_settings(
            host=host,
            port=port,
            static_dir=static_dir,
            no_static=no_static,
            cors_origins=cors_origins,
        )
    except ConfigError as exc:
        raise click.ClickException(str(exc)) from exc

    import uvicorn

    from echoverse.server.app import create_app

    app = create_app(settings)
    logger.info(
        "server_starting",
        host=settings.host,
        port=settings.port,
        static_dir=str(settings.static_dir) if settings.static_dir else None,
    )
    uvicorn.run(app, host=settings.host, port=settings.port, log_level="warning")
    logger.info("server_stopped")


def build_settings(
    *,
    host: str,
    port: int,
    static_dir: str | None,
    no_static: bool,
    cors_origins: str,
) -> Settings:
    """Aplica as opcoes de linha de comando sobre a Settings lida do ambiente.

    Raises:
        ConfigError: Se --static-dir nao for um diretorio.
    """
    settings = Settings()
    overrides: dict[str, object] = {"host": host, "port": port}

    if no_static:
        overrides["static_dir"] = None
    elif static_dir:
        path = Path(static_dir).expanduser()
        if not path.is_dir():
            raise ConfigError(f"Diretorio estatico nao encontrado: {path}")
        overrides["static_dir"] = path

    origins = [o.strip() for o in cors_origins.split(",") if o.strip()]
    if origins:
        overrides["cors_origins"] = origins

    return replace(settings, **overrides)  # type: ignore[arg-type]
