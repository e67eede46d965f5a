"""Domain value objects representing byte-efficiency concepts."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from byte_efficiency.utils.formatting import bytes_to_kb_string, format_savings


class TokenType(str, Enum):
    """Lexical classification of a token."""

    IDENTIFIER = "Identifier"
    KEYWORD = "Keyword"
    PUNCTUATOR = "Punctuator"
    STRING = "String"
    NUMERIC = "Numeric"
    BOOLEAN = "Boolean"
    NULL = "Null"
    TEMPLATE = "Template"
    REGULAR_EXPRESSION = "RegularExpression"
    OTHER = "Other"


@dataclass(frozen=True)
class Token:
    """Classified lexical unit and the exact text it spans."""

    type: TokenType
    value: str

    @property
    def is_identifier(self) -> bool:
        return self.type is TokenType.IDENTIFIER


class ResourceType(str, Enum):
    """Network resource categories relevant to transfer-size estimation."""

    SCRIPT = "script"
    STYLESHEET = "stylesheet"
    DOCUMENT = "document"
    OTHER = "other"


class SourceRecord(BaseModel):
    """Source text of a single resource as delivered to the client."""

    model_config = ConfigDict(frozen=True)

    url: str
    content: str = ""

    @property
    def content_length(self) -> int:
        return len(self.content)


class NetworkRecord(BaseModel):
    """Transfer facts recorded for one network request."""

    model_config = ConfigDict(frozen=True)

    url: str
    transfer_size: int = Field(..., ge=0)
    resource_size: int = Field(default=0, ge=0)
    resource_type: Optional[ResourceType] = None


class TransferInfo(BaseModel):
    """Bytes attributable to a resource on the network."""

    model_config = ConfigDict(frozen=True)

    url: str = ""
    total_bytes: int = Field(..., ge=0)

    @classmethod
    def from_network_record(
        cls,
        record: NetworkRecord,
        content_length: int,
        resource_type: ResourceType,
    ) -> "TransferInfo":
        from byte_efficiency.estimators.transfer import estimate_transfer_size

        return cls(
            url=record.url,
            total_bytes=estimate_transfer_size(record, content_length, resource_type),
        )


class WasteEstimate(BaseModel):
    """Estimated savings for one resource."""

    model_config = ConfigDict(frozen=True)

    url: str
    total_bytes: int = Field(..., ge=0)
    wasted_bytes: int = Field(..., ge=0)
    wasted_percent: float = Field(..., ge=0, le=100)


class AuditMeta(BaseModel):
    """Descriptive metadata for an estimator variant."""

    model_config = ConfigDict(frozen=True)

    name: str
    description: str
    help_text: str
    informative: bool = True
    required_artifacts: Tuple[str, ...] = Field(default_factory=tuple)

    @field_validator("name")
    @classmethod
    def validate_name(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("name must not be empty")
        return value


class ReportHeading(BaseModel):
    """Column definition consumed by report renderers."""

    model_config = ConfigDict(frozen=True)

    key: str
    item_type: str
    text: str


class SkippedResource(BaseModel):
    """Resource excluded from a report because estimation failed."""

    model_config = ConfigDict(frozen=True)

    url: str
    reason: str


class AuditReport(BaseModel):
    """Findings of one estimator across a batch of resources."""

    model_config = ConfigDict(frozen=True)

    audit: str
    results: Tuple[WasteEstimate, ...] = Field(default_factory=tuple)
    headings: Tuple[ReportHeading, ...] = Field(default_factory=tuple)
    skipped: Tuple[SkippedResource, ...] = Field(default_factory=tuple)

    @model_validator(mode="after")
    def ensure_heading_keys_unique(self) -> "AuditReport":
        keys = [heading.key for heading in self.headings]
        if len(keys) != len(set(keys)):
            raise ValueError("heading keys must be unique")
        return self

    @property
    def total_wasted_bytes(self) -> int:
        return sum(result.wasted_bytes for result in self.results)

    def items(self) -> List[Dict[str, str]]:
        return [
            {
                "url": result.url,
                "totalKb": bytes_to_kb_string(result.total_bytes),
                "potentialSavings": format_savings(
                    result.wasted_bytes, result.wasted_percent
                ),
            }
            for result in self.results
        ]
