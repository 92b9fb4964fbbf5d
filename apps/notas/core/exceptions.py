from __future__ import annotations

from typing import Any


class NotasException(Exception):
    """Base exception for errors raised by the notes client itself.

    Transport and HTTP status failures are not wrapped in this hierarchy; they
    reach the caller as the httpx exceptions that produced them.
    """

    default_code: str | None = None

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        details: Any | None = None,
    ) -> None:
        self.message = message
        self.code = code if code is not None else self.default_code
        self.details = details
        super().__init__(message)

    def as_payload(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "error": self.message,
            "code": self.code,
            "type": self.__class__.__name__,
        }
        if self.details is not None:
            payload["details"] = self.details
        return payload


class ConfigurationError(NotasException):
    """Raised when client configuration is missing or invalid."""

    default_code = "configuration_error"


__all__ = ["ConfigurationError", "NotasException"]
