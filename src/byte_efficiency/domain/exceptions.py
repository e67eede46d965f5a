"""Exception hierarchy for byte-efficiency estimation failures."""

from __future__ import annotations

from typing import Any, Mapping


class ByteEfficiencyError(Exception):
    """Base class for all domain-level errors in the estimator package."""

    default_message = "Byte efficiency error occurred"

    def __init__(
        self, message: str | None = None, *, context: Mapping[str, Any] | None = None
    ):
        self.message = message or self.default_message
        self.context: Mapping[str, Any] = dict(context or {})
        formatted = self._format_message()
        super().__init__(formatted)

    def _format_message(self) -> str:
        if self.context:
            return f"{self.message} | context={self.context}"
        return self.message


class TokenizeError(ByteEfficiencyError):
    """Source text could not be split into tokens."""

    default_message = "Source text could not be tokenized"


class MissingNetworkRecordError(ByteEfficiencyError):
    """No network record matches the resource URL."""

    default_message = "No network record found for resource"


class UnknownAuditError(ByteEfficiencyError):
    """Raised when an estimator name is not registered."""

    default_message = "Unknown audit"


class ValidationError(ByteEfficiencyError, ValueError):
    """Raised when domain validation fails."""

    default_message = "Domain validation failed"
