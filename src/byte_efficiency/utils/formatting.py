"""Number formatting helpers shared by estimators and reports."""

from __future__ import annotations

import math

KB_IN_BYTES = 1024


def round_half_up(value: float) -> int:
    """Round like JavaScript's ``Math.round`` (halves go toward +infinity)."""

    return int(math.floor(value + 0.5))


def bytes_to_kb_string(size_in_bytes: int) -> str:
    return f"{size_in_bytes / KB_IN_BYTES:,.1f} KB"


def format_savings(wasted_bytes: int, wasted_percent: float) -> str:
    return f"{bytes_to_kb_string(wasted_bytes)} ({round_half_up(wasted_percent)}%)"
