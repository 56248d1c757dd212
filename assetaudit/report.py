"""Serialization and human-readable rendering of reconciliation results."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List

from .models import ReconciliationResult

_KB = 1024
_MB = 1024 * 1024
_GB = 1024 * 1024 * 1024


def format_file_size(size: int) -> str:
    """Format a byte count with binary prefixes, e.g. ``1536 -> "1.5 KB"``."""
    if size < _KB:
        return f"{size} B"
    if size < _MB:
        return f"{size / _KB:.1f} KB"
    if size < _GB:
        return f"{size / _MB:.1f} MB"
    return f"{size / _GB:.1f} GB"


def build_report(result: ReconciliationResult) -> Dict[str, Any]:
    """Return the persisted report document."""
    return {
        "total_assets": result.total_assets,
        "declared_assets": result.declared_assets,
        "referenced_assets": result.referenced_assets,
        "unused_assets": [
            {"path": asset.path, "size": asset.size, "formattedSize": asset.formatted_size}
            for asset in result.unused_assets
        ],
        "unused_assets_count": result.unused_assets_count,
        "unused_assets_total_size": result.unused_assets_total_size,
        "undeclared_assets": list(result.undeclared_assets),
        "missing_declared_assets": list(result.missing_declared_assets),
    }


def write_report(result: ReconciliationResult, path: Path) -> Path:
    payload = build_report(result)
    path.write_text(json.dumps(payload, indent=2) + "\n", encoding="utf-8")
    return path


def render_summary(result: ReconciliationResult, report_path: Path) -> List[str]:
    """Return summary lines; blank strings separate sections."""
    lines = [
        "",
        "Asset Analysis Report:",
        "--------------------",
        f"Total assets found: {result.total_assets}",
        f"Declared assets: {result.declared_assets}",
        f"Referenced assets: {result.referenced_assets}",
        "",
        (
            f"Unused assets: {result.unused_assets_count} "
            f"(Total size: {format_file_size(result.unused_assets_total_size)})"
        ),
    ]
    if result.unused_assets:
        lines.append("Unused assets list:")
        lines.extend(
            f"  - {asset.path} ({asset.formatted_size})" for asset in result.unused_assets
        )

    if result.undeclared_assets:
        lines.append("")
        lines.append(f"Warning: Found {len(result.undeclared_assets)} undeclared assets:")
        lines.extend(f"  - {asset}" for asset in result.undeclared_assets)

    if result.missing_declared_assets:
        lines.append("")
        lines.append(
            f"Warning: Found {len(result.missing_declared_assets)} missing declared assets:"
        )
        lines.extend(f"  - {asset}" for asset in result.missing_declared_assets)

    lines.append("")
    lines.append(f'Detailed report saved to "{report_path}"')
    return lines


class ReportFormatter:
    """Persists the JSON report and renders the console summary."""

    def write(self, result: ReconciliationResult, path: Path) -> Path:
        return write_report(result, path)

    def summary(self, result: ReconciliationResult, report_path: Path) -> List[str]:
        return render_summary(result, report_path)


__all__ = [
    "ReportFormatter",
    "build_report",
    "format_file_size",
    "render_summary",
    "write_report",
]
