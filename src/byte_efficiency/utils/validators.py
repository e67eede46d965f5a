"""Input validation helpers used across the estimators."""

from __future__ import annotations

from byte_efficiency.domain.exceptions import ValidationError


def validate_threshold_percent(value: float) -> None:
    if not 0 <= value < 1:
        raise ValidationError(
            "ignore_threshold_in_percent must be in [0, 1)",
            context={"value": value},
        )


def validate_threshold_bytes(value: int) -> None:
    if value < 0:
        raise ValidationError(
            "ignore_threshold_in_bytes must be non-negative",
            context={"value": value},
        )


def validate_content(content: str) -> None:
    if not isinstance(content, str):
        raise ValidationError(
            "content must be a string",
            context={"type": type(content).__name__},
        )
