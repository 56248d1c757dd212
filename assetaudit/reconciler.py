"""Reconciles declarations, on-disk assets and source references."""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Collection, List, Sequence

from .matcher import is_asset_declared
from .models import AssetFile, Declaration, ReconciliationResult, UnusedAsset
from .report import format_file_size

SizeLookup = Callable[[str], int]


def stat_size_lookup(root: Path) -> SizeLookup:
    """Return a lookup that stats ``root / path``; raises OSError when unavailable."""

    def _lookup(path: str) -> int:
        target = root / path
        if not target.is_file():
            raise FileNotFoundError(f"Asset not found: {target}")
        return target.stat().st_size

    return _lookup


def list_unused_assets(
    assets: Sequence[str],
    references: Collection[str],
    declarations: Sequence[Declaration],
) -> List[str]:
    """Declared assets that are absent from ``references``, in discovery order."""
    return [
        asset
        for asset in assets
        if is_asset_declared(asset, declarations) and asset not in references
    ]


def list_undeclared_assets(
    assets: Sequence[str], declarations: Sequence[Declaration]
) -> List[str]:
    return [asset for asset in assets if not is_asset_declared(asset, declarations)]


def list_missing_declarations(
    assets: Sequence[str], declarations: Sequence[Declaration]
) -> List[str]:
    """Declarations whose stem does not prefix any asset on disk.

    Only the ``/*`` suffix is stripped; bare folder declarations are tested with
    their raw value, which is looser than the coverage rule in ``matcher``.
    """
    return [
        declaration.value
        for declaration in declarations
        if not any(asset.startswith(declaration.stem) for asset in assets)
    ]


class Reconciler:
    """Builds the reconciliation result for a single run."""

    def __init__(self, size_lookup: SizeLookup) -> None:
        self._size_lookup = size_lookup

    def reconcile(
        self,
        assets: Sequence[str],
        references: Collection[str],
        declarations: Sequence[Declaration],
    ) -> ReconciliationResult:
        unused_paths = list_unused_assets(assets, references, declarations)

        sized: List[AssetFile] = []
        unsized: List[str] = []
        for path in unused_paths:
            try:
                size = self._size_lookup(path)
            except OSError:
                unsized.append(path)
                continue
            sized.append(AssetFile(path=path, size=size))

        # sorted() is stable, so equal sizes keep discovery order.
        sized = sorted(sized, key=lambda asset: asset.size or 0, reverse=True)
        unused = []
        for asset in sized:
            size = asset.size or 0
            unused.append(
                UnusedAsset(path=asset.path, size=size, formatted_size=format_file_size(size))
            )

        return ReconciliationResult(
            total_assets=len(assets),
            declared_assets=len(declarations),
            referenced_assets=len(references),
            unused_assets=unused,
            unused_assets_count=len(unused_paths),
            unused_assets_total_size=sum(record.size for record in unused),
            undeclared_assets=list_undeclared_assets(assets, declarations),
            missing_declared_assets=list_missing_declarations(assets, declarations),
            unsized_assets=unsized,
        )


__all__ = [
    "Reconciler",
    "SizeLookup",
    "list_missing_declarations",
    "list_undeclared_assets",
    "list_unused_assets",
    "stat_size_lookup",
]
