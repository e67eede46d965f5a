"""Report assembler coordinating estimators, network records, and filters."""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Sequence, Tuple

from byte_efficiency.core.config import AuditConfig
from byte_efficiency.core.filters import ByteThresholdFilter, FilterChain
from byte_efficiency.domain.exceptions import MissingNetworkRecordError, TokenizeError
from byte_efficiency.domain.interfaces import IWasteEstimator
from byte_efficiency.domain.models import (
    AuditReport,
    NetworkRecord,
    ReportHeading,
    SkippedResource,
    SourceRecord,
    TransferInfo,
    WasteEstimate,
)

HEADINGS: Tuple[ReportHeading, ...] = (
    ReportHeading(key="url", item_type="url", text="URL"),
    ReportHeading(key="totalKb", item_type="text", text="Original"),
    ReportHeading(key="potentialSavings", item_type="text", text="Potential Savings"),
)


class ReportAssembler:
    """Runs one estimator over a batch of resources and collects the findings."""

    def __init__(
        self,
        estimator: IWasteEstimator,
        config: Optional[AuditConfig] = None,
        *,
        filters: Optional[FilterChain] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._estimator = estimator
        self._config = config or AuditConfig()
        self._filters = filters or FilterChain(
            [ByteThresholdFilter(self._config.ignore_threshold_in_bytes)]
        )
        self._logger = logger or logging.getLogger(__name__)

    @property
    def estimator(self) -> IWasteEstimator:
        return self._estimator

    def audit(
        self,
        sources: Iterable[SourceRecord],
        network_records: Sequence[NetworkRecord],
    ) -> AuditReport:
        results: List[WasteEstimate] = []
        skipped: List[SkippedResource] = []

        for source in sources:
            if not source.content:
                continue
            try:
                estimate = self._estimate(source, network_records)
            except (MissingNetworkRecordError, TokenizeError) as exc:
                self._logger.warning(
                    "resource_skipped",
                    extra={
                        "url": source.url,
                        "audit": self._estimator.meta.name,
                        "reason": exc.message,
                    },
                )
                skipped.append(SkippedResource(url=source.url, reason=str(exc)))
                continue

            if estimate is None or not self._filters.accept(estimate):
                continue
            results.append(estimate)

        report = AuditReport(
            audit=self._estimator.meta.name,
            results=tuple(results),
            headings=HEADINGS,
            skipped=tuple(skipped),
        )
        self._logger.info(
            "audit_complete",
            extra={
                "audit": report.audit,
                "results": len(report.results),
                "skipped": len(report.skipped),
                "total_wasted_bytes": report.total_wasted_bytes,
            },
        )
        return report

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _estimate(
        self, source: SourceRecord, network_records: Sequence[NetworkRecord]
    ) -> Optional[WasteEstimate]:
        record = self._find_network_record(source.url, network_records)
        transfer = TransferInfo.from_network_record(
            record, source.content_length, self._estimator.resource_type
        )
        return self._estimator.compute_waste(source.content, transfer)

    @staticmethod
    def _find_network_record(
        url: str, network_records: Sequence[NetworkRecord]
    ) -> NetworkRecord:
        for record in network_records:
            if record.url == url:
                return record
        raise MissingNetworkRecordError(context={"url": url})
