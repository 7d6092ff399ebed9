"""Exceptions raised while resolving debug configurations and exchanging
custom protocol messages.

Every exception carries an ``error_code`` and a ``details`` mapping so it
can be reported in the body of a failed protocol response.
"""

from __future__ import annotations

from typing import Any


class RDebuggerError(Exception):
    """Base exception for all R debugger errors.

    All package-specific exceptions inherit from this class, so callers
    can catch every failure of the integration with a single clause.
    """

    def __init__(
        self,
        message: str,
        *,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        self.cause = cause

    def to_dict(self) -> dict[str, Any]:
        """Convert error to a dictionary for protocol responses."""
        return {
            "error": self.error_code,
            "message": self.message,
            "details": self.details,
        }

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message} (caused by: {self.cause!s})"
        return self.message


class ConfigurationError(RDebuggerError):
    """Raised when a debug configuration cannot be turned into a session."""

    def __init__(
        self,
        message: str,
        config_key: str | None = None,
        **kwargs: Any,
    ) -> None:
        details = kwargs.pop("details", {})
        if config_key:
            details["config_key"] = config_key
        super().__init__(message, error_code="ConfigurationError", details=details, **kwargs)
        self.config_key = config_key


class ProtocolError(RDebuggerError):
    """Raised for malformed protocol frames or custom message payloads."""

    def __init__(
        self,
        message: str,
        *,
        command: str | None = None,
        reason: str | None = None,
        **kwargs: Any,
    ) -> None:
        details = kwargs.pop("details", {})
        if command:
            details["command"] = command
        if reason:
            details["reason"] = reason
        super().__init__(message, error_code="ProtocolError", details=details, **kwargs)
        self.command = command
        self.reason = reason
