"""Enumeration of the asset files that exist on disk."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Sequence

from .fs import build_exclude_rules, iter_files
from .models import DEFAULT_ROOT_SEGMENT, normalize_asset_path


@dataclass
class AssetTree:
    """Root-prefixed asset paths in discovery order."""

    directory: Path
    exists: bool
    paths: List[str] = field(default_factory=list)


class AssetTreeScanner:
    """Walks the asset directory and returns manifest-relative asset paths."""

    def __init__(
        self,
        root_segment: str = DEFAULT_ROOT_SEGMENT,
        exclude_paths: Sequence[str] = (),
    ) -> None:
        self.root_segment = root_segment
        self._rules = build_exclude_rules(exclude_paths)

    def scan(self, directory: Path) -> AssetTree:
        """Return every regular file below ``directory``; a missing directory yields nothing."""
        directory = Path(directory)
        if not directory.is_dir():
            return AssetTree(directory=directory, exists=False)

        paths: List[str] = []
        for path in iter_files(directory, self._rules):
            relative = path.relative_to(directory).as_posix()
            paths.append(normalize_asset_path(relative, self.root_segment))
        return AssetTree(directory=directory, exists=True, paths=paths)


__all__ = ["AssetTree", "AssetTreeScanner"]
