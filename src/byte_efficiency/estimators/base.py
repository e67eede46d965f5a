"""Estimator abstractions shared by every unminified-resource variant."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional, Sequence

from byte_efficiency.domain.interfaces import ITokenizer
from byte_efficiency.domain.models import (
    AuditMeta,
    ResourceType,
    Token,
    TransferInfo,
    WasteEstimate,
)
from byte_efficiency.utils.formatting import round_half_up
from byte_efficiency.utils.validators import validate_threshold_percent

DEFAULT_IGNORE_THRESHOLD_IN_PERCENT = 0.1


@dataclass(frozen=True)
class TokenLengths:
    """Summed token lengths under the stripped and mangled size models."""

    stripped: int
    mangled: int


class BaseWasteEstimator(ABC):
    """Template-method base class: guards, ratio scaling and logging.

    Subclasses supply ``META``, ``RESOURCE_TYPE`` and a tokenizer, and may
    override :meth:`_measure` and :meth:`_wasted_ratio` to change the size
    model. Instances hold no per-call state and can be shared freely.
    """

    META: AuditMeta
    RESOURCE_TYPE: ResourceType = ResourceType.OTHER

    def __init__(
        self,
        tokenizer: ITokenizer,
        *,
        ignore_threshold_in_percent: float = DEFAULT_IGNORE_THRESHOLD_IN_PERCENT,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        validate_threshold_percent(ignore_threshold_in_percent)
        self._tokenizer = tokenizer
        self._ignore_threshold_in_percent = ignore_threshold_in_percent
        self.logger = logger or logging.getLogger(
            f"{__name__}.{self.__class__.__name__}"
        )

    @property
    def meta(self) -> AuditMeta:
        return self.META

    @property
    def resource_type(self) -> ResourceType:
        return self.RESOURCE_TYPE

    @property
    def ignore_threshold_in_percent(self) -> float:
        return self._ignore_threshold_in_percent

    def compute_waste(
        self, content: str, transfer: TransferInfo
    ) -> Optional[WasteEstimate]:
        """Estimate minification savings; None when the resource is already lean.

        Raises :class:`TokenizeError` when ``content`` cannot be tokenized.
        """

        content_length = len(content)
        if content_length == 0:
            return None

        lengths = self._measure(self._tokenizer.tokenize(content))
        reduction = 1 - lengths.stripped / content_length
        if reduction < self._ignore_threshold_in_percent:
            self.logger.debug(
                "waste_below_threshold",
                extra={
                    "url": transfer.url,
                    "audit": self.META.name,
                    "reduction": reduction,
                },
            )
            return None

        total_bytes = transfer.total_bytes
        wasted_ratio = self._wasted_ratio(lengths, content_length)
        estimate = WasteEstimate(
            url=transfer.url,
            total_bytes=total_bytes,
            wasted_bytes=round_half_up(total_bytes * wasted_ratio),
            wasted_percent=100 * wasted_ratio,
        )
        self.logger.debug(
            "waste_estimated",
            extra={
                "url": estimate.url,
                "audit": self.META.name,
                "wasted_bytes": estimate.wasted_bytes,
                "wasted_percent": estimate.wasted_percent,
            },
        )
        return estimate

    def _measure(self, tokens: Sequence[Token]) -> TokenLengths:
        stripped = sum(len(token.value) for token in tokens)
        return TokenLengths(stripped=stripped, mangled=stripped)

    @abstractmethod
    def _wasted_ratio(self, lengths: TokenLengths, content_length: int) -> float:
        """Fraction of the original content a minifier would remove."""
