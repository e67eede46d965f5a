"""Byte-efficiency estimators for unminified JavaScript and CSS."""

from .core.assembler import ReportAssembler
from .core.container import DIContainer

__all__ = [
    "ReportAssembler",
    "DIContainer",
    "domain",
    "tokenizers",
    "estimators",
    "core",
    "utils",
]
