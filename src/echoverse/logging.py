"""Logging estruturado do gateway.

structlog sobre stdlib logging, com renderer `console` (default) ou `json`.
O request_id e propagado via contextvars: o middleware HTTP vincula no
inicio do request e todo evento emitido dentro dele carrega o campo.
"""

from __future__ import annotations

import logging
import os

import structlog

_configured = False

# Loggers de terceiros que logam URL por request em INFO
_QUIET_LOGGERS = ("httpx", "httpcore", "uvicorn.access")


def _build_renderer(log_format: str) -> structlog.types.Processor:
    if log_format == "json":
        return structlog.processors.JSONRenderer(ensure_ascii=False)
    return structlog.dev.ConsoleRenderer()


def configure_logging(
    log_format: str | None = None,
    level: str | None = None,
    *,
    force: bool = False,
) -> None:
    """Configura o logging uma unica vez por processo.

    Loggers de modulo chamam esta funcao com defaults no import; `force=True`
    reaplica formato e nivel explicitos (ex: flags do `echoverse serve`).

    Args:
        log_format: "json" ou "console". Fallback: ECHOVERSE_LOG_FORMAT, depois "console".
        level: DEBUG, INFO, WARNING ou ERROR. Fallback: ECHOVERSE_LOG_LEVEL, depois "INFO".
        force: Reconfigura mesmo se ja configurado.
    """
    global _configured
    if _configured and not force:
        return

    fmt = log_format or os.environ.get("ECHOVERSE_LOG_FORMAT", "console")
    level_name = (level or os.environ.get("ECHOVERSE_LOG_LEVEL", "INFO")).upper()

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler()
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _build_renderer(fmt),
            ],
        )
    )

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(getattr(logging, level_name, logging.INFO))

    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    _configured = True


def get_logger(component: str) -> structlog.stdlib.BoundLogger:
    """Logger com o campo `component` vinculado (ex: "server.routes.speech")."""
    configure_logging()
    return structlog.get_logger().bind(component=component)  # type: ignore[no-any-return]


def bind_request_context(request_id: str) -> None:
    """Vincula o request_id a todos os eventos do request corrente."""
    structlog.contextvars.clear_contextvars()
    structlog.contextvars.bind_contextvars(request_id=request_id)


def clear_request_context() -> None:
    structlog.contextvars.clear_contextvars()
