"""Domain-level interfaces defining contracts for estimation collaborators."""

from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .models import AuditMeta, ResourceType, Token, TransferInfo, WasteEstimate


class ITokenizer(Protocol):
    """Splits source text into significant tokens."""

    def tokenize(self, source: str) -> Sequence[Token]:
        """Return tokens in source order; raise TokenizeError on malformed input."""


class IWasteEstimator(Protocol):
    """Estimates bytes that minification would save for one resource."""

    meta: AuditMeta
    resource_type: ResourceType

    def compute_waste(
        self, content: str, transfer: TransferInfo
    ) -> Optional[WasteEstimate]:
        """Return an estimate, or None when the waste is not significant."""


class IResultFilter(Protocol):
    """Decides whether an estimate surfaces in the final report."""

    def accept(self, estimate: WasteEstimate) -> bool:
        """Return True to keep the estimate."""
