"""Audit configuration management helpers."""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List

from byte_efficiency.utils.validators import (
    validate_threshold_bytes,
    validate_threshold_percent,
)

ENV_PREFIX = "BYTE_EFFICIENCY_"


def _str_to_float(value: str | None, default: float) -> float:
    if value is None:
        return default
    try:
        return float(value)
    except ValueError as exc:
        raise ValueError(f"Invalid float value: {value}") from exc


def _str_to_int(value: str | None, default: int) -> int:
    if value is None:
        return default
    try:
        return int(value)
    except ValueError as exc:
        raise ValueError(f"Invalid integer value: {value}") from exc


def _default_audits() -> List[str]:
    return ["unminified-javascript", "unminified-css"]


@dataclass(frozen=True)
class AuditConfig:
    """Immutable configuration object loaded from env or files."""

    ignore_threshold_in_percent: float = 0.1
    ignore_threshold_in_bytes: int = 2048
    enabled_audits: List[str] = field(default_factory=_default_audits)

    def __post_init__(self) -> None:
        self.validate()

    @classmethod
    def from_env(cls) -> "AuditConfig":
        defaults = cls()
        audits_raw = os.getenv(f"{ENV_PREFIX}ENABLED_AUDITS")
        audits = (
            [name.strip() for name in audits_raw.split(",") if name.strip()]
            if audits_raw
            else defaults.enabled_audits
        )
        return cls(
            ignore_threshold_in_percent=_str_to_float(
                os.getenv(f"{ENV_PREFIX}IGNORE_THRESHOLD_IN_PERCENT"),
                defaults.ignore_threshold_in_percent,
            ),
            ignore_threshold_in_bytes=_str_to_int(
                os.getenv(f"{ENV_PREFIX}IGNORE_THRESHOLD_IN_BYTES"),
                defaults.ignore_threshold_in_bytes,
            ),
            enabled_audits=audits,
        )

    @classmethod
    def from_file(cls, path: str) -> "AuditConfig":
        file_path = Path(path)
        if not file_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {path}")
        raw = file_path.read_text()
        data: Dict[str, Any]
        suffix = file_path.suffix.lower()
        if suffix == ".json":
            data = json.loads(raw)
        elif suffix in {".yaml", ".yml"}:
            data = cls._load_yaml(raw)
        else:
            raise ValueError("Unsupported config format. Use JSON or YAML.")
        return cls(**cls._merge_with_defaults(data))

    def validate(self) -> None:
        validate_threshold_percent(self.ignore_threshold_in_percent)
        validate_threshold_bytes(self.ignore_threshold_in_bytes)
        if not isinstance(self.enabled_audits, list):
            raise ValueError("enabled_audits must be a list")

    @classmethod
    def _merge_with_defaults(cls, data: Dict[str, Any]) -> Dict[str, Any]:
        defaults = cls()
        return {
            "ignore_threshold_in_percent": data.get(
                "ignore_threshold_in_percent", defaults.ignore_threshold_in_percent
            ),
            "ignore_threshold_in_bytes": data.get(
                "ignore_threshold_in_bytes", defaults.ignore_threshold_in_bytes
            ),
            "enabled_audits": data.get("enabled_audits", defaults.enabled_audits),
        }

    @staticmethod
    def _load_yaml(raw: str) -> Dict[str, Any]:
        try:
            import yaml  # type: ignore
        except ImportError as exc:  # pragma: no cover - optional dependency
            raise RuntimeError("PyYAML is required to parse YAML config files") from exc
        return yaml.safe_load(raw) or {}
