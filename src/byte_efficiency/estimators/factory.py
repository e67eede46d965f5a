"""Estimator registry that builds configured waste estimators by audit name."""

from __future__ import annotations

import logging
from typing import Callable, Dict, List, Optional, Type, cast

from byte_efficiency.core.config import AuditConfig
from byte_efficiency.domain.exceptions import UnknownAuditError
from byte_efficiency.domain.interfaces import IWasteEstimator

from .css import UnminifiedCssEstimator
from .javascript import UnminifiedJavaScriptEstimator


class EstimatorFactory:
    """Factory that maps audit names onto estimator classes."""

    def __init__(self, *, logger: Optional[logging.Logger] = None) -> None:
        self._registry: Dict[str, Type[IWasteEstimator]] = {}
        self._logger = logger
        self._register_defaults()

    def create(self, name: str, config: AuditConfig | None = None) -> IWasteEstimator:
        estimator_cls = self._detect_estimator(name)
        cfg = config or AuditConfig()
        constructor = cast(Callable[..., IWasteEstimator], estimator_cls)
        return constructor(
            ignore_threshold_in_percent=cfg.ignore_threshold_in_percent,
            logger=self._logger,
        )

    def register_estimator(
        self, name: str, estimator_class: Type[IWasteEstimator]
    ) -> None:
        self._registry[name.lower()] = estimator_class

    def available(self) -> List[str]:
        return sorted(self._registry)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _register_defaults(self) -> None:
        for estimator_cls in (UnminifiedJavaScriptEstimator, UnminifiedCssEstimator):
            self.register_estimator(estimator_cls.META.name, estimator_cls)

    def _detect_estimator(self, name: str) -> Type[IWasteEstimator]:
        try:
            return self._registry[name.lower()]
        except KeyError as exc:
            raise UnknownAuditError(
                f"No estimator registered for audit '{name}'",
                context={"available": self.available()},
            ) from exc
