"""Waste estimator for unminified JavaScript."""

from __future__ import annotations

import logging
from typing import Optional, Sequence

from byte_efficiency.domain.interfaces import ITokenizer
from byte_efficiency.domain.models import AuditMeta, ResourceType, Token
from byte_efficiency.tokenizers.javascript import JavaScriptTokenizer

from .base import DEFAULT_IGNORE_THRESHOLD_IN_PERCENT, BaseWasteEstimator, TokenLengths


class UnminifiedJavaScriptEstimator(BaseWasteEstimator):
    """Averages a whitespace-stripping model with an identifier-mangling model."""

    META = AuditMeta(
        name="unminified-javascript",
        description="Unminified JavaScript",
        help_text="Minify JavaScript to save network bytes.",
        informative=True,
        required_artifacts=("Scripts", "devtoolsLogs"),
    )
    RESOURCE_TYPE = ResourceType.SCRIPT

    def __init__(
        self,
        tokenizer: Optional[ITokenizer] = None,
        *,
        ignore_threshold_in_percent: float = DEFAULT_IGNORE_THRESHOLD_IN_PERCENT,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        super().__init__(
            tokenizer or JavaScriptTokenizer(),
            ignore_threshold_in_percent=ignore_threshold_in_percent,
            logger=logger,
        )

    def _measure(self, tokens: Sequence[Token]) -> TokenLengths:
        stripped = 0
        mangled = 0
        for token in tokens:
            stripped += len(token.value)
            # every identifier could be renamed to a single character
            mangled += 1 if token.is_identifier else len(token.value)
        return TokenLengths(stripped=stripped, mangled=mangled)

    def _wasted_ratio(self, lengths: TokenLengths, content_length: int) -> float:
        return 1 - (lengths.stripped + lengths.mangled) / (2 * content_length)
