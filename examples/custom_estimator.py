"""Demonstrates registering a custom waste estimator."""

from byte_efficiency.core.config import AuditConfig
from byte_efficiency.core.container import DIContainer
from byte_efficiency.domain.models import (
    AuditMeta,
    NetworkRecord,
    ResourceType,
    SourceRecord,
)
from byte_efficiency.estimators.base import BaseWasteEstimator, TokenLengths
from byte_efficiency.estimators.factory import EstimatorFactory
from byte_efficiency.tokenizers.css import CssTokenizer


class UnminifiedSvgEstimator(BaseWasteEstimator):
    """Treats inline SVG markup like a stylesheet: whitespace and comments are waste."""

    META = AuditMeta(
        name="unminified-svg",
        description="Unminified SVG",
        help_text="Minify SVG images to save network bytes.",
        required_artifacts=("Images", "devtoolsLogs"),
    )
    RESOURCE_TYPE = ResourceType.OTHER

    def __init__(self, *, ignore_threshold_in_percent: float = 0.1, logger=None):
        super().__init__(
            CssTokenizer(),
            ignore_threshold_in_percent=ignore_threshold_in_percent,
            logger=logger,
        )

    def _wasted_ratio(self, lengths: TokenLengths, content_length: int) -> float:
        return 1 - lengths.stripped / content_length


def main() -> None:
    factory = EstimatorFactory()
    factory.register_estimator("unminified-svg", UnminifiedSvgEstimator)
    assembler = DIContainer.create_assembler(
        "unminified-svg",
        config=AuditConfig(ignore_threshold_in_bytes=0),
        estimator_factory=factory,
    )

    url = "https://example.com/logo.svg"
    svg = "<svg>\n    <rect   width='10'   height='10' />\n</svg>\n" * 50
    report = assembler.audit(
        [SourceRecord(url=url, content=svg)],
        [NetworkRecord(url=url, transfer_size=len(svg), resource_type=ResourceType.OTHER)],
    )
    print(report.items())


if __name__ == "__main__":
    main()
