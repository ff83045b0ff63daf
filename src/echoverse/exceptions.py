"""Exceptions tipadas do EchoVerse.

Hierarquia:
    EchoverseError (base)
    +-- ConfigError
    +-- InvalidInputError
    +-- UpstreamError
    +-- PayloadTooLargeError
"""

from __future__ import annotations


class EchoverseError(Exception):
    """Base para todas as exceptions do EchoVerse."""


class ConfigError(EchoverseError):
    """Erro de configuracao do gateway."""


class InvalidInputError(EchoverseError):
    """Request incompleto ou malformado. Nunca chega a um adapter."""

    def __init__(self, message: str, details: str | None = None) -> None:
        self.message = message
        self.details = details
        super().__init__(message)


class UpstreamError(EchoverseError):
    """Falha na chamada ao provider upstream (rede, auth, quota, validacao).

    `reason` vai no campo `details` da resposta; `public_message` no campo `error`.
    """

    def __init__(
        self,
        provider: str,
        reason: str,
        public_message: str = "Upstream request failed",
    ) -> None:
        self.provider = provider
        self.reason = reason
        self.public_message = public_message
        super().__init__(f"Falha no provider '{provider}': {reason}")


class PayloadTooLargeError(EchoverseError):
    """Body do request excede o limite permitido."""

    def __init__(
        self,
        size_bytes: int,
        max_bytes: int,
        message: str = "Request body too large",
    ) -> None:
        self.size_bytes = size_bytes
        self.max_bytes = max_bytes
        self.message = message
        super().__init__(f"{message} ({size_bytes} > {max_bytes} bytes)")
