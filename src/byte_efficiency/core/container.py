"""Dependency injection container for building fully-wired report assemblers."""

from __future__ import annotations

from typing import List, Optional, Sequence

from byte_efficiency.core.assembler import ReportAssembler
from byte_efficiency.core.config import AuditConfig
from byte_efficiency.core.filters import ByteThresholdFilter, FilterChain, LoggingFilter
from byte_efficiency.domain.interfaces import IResultFilter, IWasteEstimator
from byte_efficiency.estimators.factory import EstimatorFactory


class DIContainer:
    """Factory helpers that assemble ReportAssembler instances with default wiring."""

    @staticmethod
    def create_assembler(
        audit: str = "unminified-javascript",
        *,
        config: Optional[AuditConfig] = None,
        estimator_factory: Optional[EstimatorFactory] = None,
    ) -> ReportAssembler:
        cfg = config or AuditConfig.from_env()
        factory = estimator_factory or EstimatorFactory()
        estimator = factory.create(audit, cfg)
        return ReportAssembler(
            estimator,
            cfg,
            filters=DIContainer._build_filter_chain(cfg),
        )

    @staticmethod
    def create_assemblers(
        *,
        config: Optional[AuditConfig] = None,
        estimator_factory: Optional[EstimatorFactory] = None,
    ) -> List[ReportAssembler]:
        cfg = config or AuditConfig.from_env()
        factory = estimator_factory or EstimatorFactory()
        return [
            DIContainer.create_assembler(
                name, config=cfg, estimator_factory=factory
            )
            for name in cfg.enabled_audits
        ]

    @staticmethod
    def create_custom_assembler(
        *,
        estimator: IWasteEstimator,
        config: AuditConfig,
        filters: Optional[Sequence[IResultFilter]] = None,
    ) -> ReportAssembler:
        chain = FilterChain(filters) if filters is not None else None
        return ReportAssembler(estimator, config, filters=chain)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    @staticmethod
    def _build_filter_chain(config: AuditConfig) -> FilterChain:
        return FilterChain(
            [
                LoggingFilter(),
                ByteThresholdFilter(config.ignore_threshold_in_bytes),
            ]
        )
