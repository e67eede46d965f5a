"""Waste estimator for unminified stylesheets."""

from __future__ import annotations

import logging
from typing import Optional

from byte_efficiency.domain.interfaces import ITokenizer
from byte_efficiency.domain.models import AuditMeta, ResourceType
from byte_efficiency.tokenizers.css import CssTokenizer

from .base import DEFAULT_IGNORE_THRESHOLD_IN_PERCENT, BaseWasteEstimator, TokenLengths


class UnminifiedCssEstimator(BaseWasteEstimator):
    """Counts whitespace and comments as waste; selectors are never renamed."""

    META = AuditMeta(
        name="unminified-css",
        description="Unminified CSS",
        help_text="Minify CSS files to reduce network payload sizes.",
        informative=True,
        required_artifacts=("Styles", "devtoolsLogs"),
    )
    RESOURCE_TYPE = ResourceType.STYLESHEET

    def __init__(
        self,
        tokenizer: Optional[ITokenizer] = None,
        *,
        ignore_threshold_in_percent: float = DEFAULT_IGNORE_THRESHOLD_IN_PERCENT,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        super().__init__(
            tokenizer or CssTokenizer(),
            ignore_threshold_in_percent=ignore_threshold_in_percent,
            logger=logger,
        )

    def _wasted_ratio(self, lengths: TokenLengths, content_length: int) -> float:
        return 1 - lengths.stripped / content_length
