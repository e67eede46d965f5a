"""Result filters applied to estimates before they reach a report."""

from __future__ import annotations

import logging
from typing import Sequence

from byte_efficiency.domain.interfaces import IResultFilter
from byte_efficiency.domain.models import WasteEstimate


class ByteThresholdFilter(IResultFilter):
    """Drops estimates whose absolute savings are too small to report."""

    def __init__(self, ignore_threshold_in_bytes: int = 2048) -> None:
        if ignore_threshold_in_bytes < 0:
            raise ValueError("ignore_threshold_in_bytes must be non-negative")
        self._threshold = ignore_threshold_in_bytes

    def accept(self, estimate: WasteEstimate) -> bool:
        return estimate.wasted_bytes >= self._threshold


class LoggingFilter(IResultFilter):
    """Logs every estimate that reaches it and never rejects."""

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self._logger = logger or logging.getLogger(__name__)

    def accept(self, estimate: WasteEstimate) -> bool:
        self._logger.info(
            "waste_candidate",
            extra={
                "url": estimate.url,
                "total_bytes": estimate.total_bytes,
                "wasted_bytes": estimate.wasted_bytes,
            },
        )
        return True


class FilterChain:
    """Applies filters in order; the first rejection wins."""

    def __init__(self, filters: Sequence[IResultFilter]) -> None:
        self._filters = list(filters)

    def accept(self, estimate: WasteEstimate) -> bool:
        return all(f.accept(estimate) for f in self._filters)
