"""Source reference extraction."""

from .patterns import BUILTIN_PATTERNS, ReferencePattern, build_patterns
from .scanner import ReferenceScan, ReferenceScanner, extract_references

__all__ = [
    "BUILTIN_PATTERNS",
    "ReferencePattern",
    "ReferenceScan",
    "ReferenceScanner",
    "build_patterns",
    "extract_references",
]
