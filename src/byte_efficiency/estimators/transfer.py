"""Transfer-size estimation from network records."""

from __future__ import annotations

from typing import Mapping, Optional

from byte_efficiency.domain.models import NetworkRecord, ResourceType
from byte_efficiency.utils.formatting import round_half_up

# Rough gzip ratios used when no network record exists for the content.
UNKNOWN_TRANSFER_RATIOS: Mapping[ResourceType, float] = {
    ResourceType.STYLESHEET: 0.2,
    ResourceType.SCRIPT: 0.33,
    ResourceType.DOCUMENT: 0.33,
}
DEFAULT_UNKNOWN_TRANSFER_RATIO = 0.5


def estimate_transfer_size(
    record: Optional[NetworkRecord],
    total_bytes: int,
    resource_type: ResourceType,
) -> int:
    """Return the network bytes attributable to ``total_bytes`` of content."""

    if record is None:
        ratio = UNKNOWN_TRANSFER_RATIOS.get(resource_type, DEFAULT_UNKNOWN_TRANSFER_RATIO)
        return round_half_up(total_bytes * ratio)

    if record.resource_type == resource_type:
        return record.transfer_size

    # Content inlined into another resource: borrow that resource's compression.
    compression_ratio = (
        record.transfer_size / record.resource_size if record.resource_size else 0.0
    )
    return round_half_up(total_bytes * (compression_ratio or 1.0))
