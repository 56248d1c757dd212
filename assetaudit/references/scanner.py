"""Collects asset references from source files."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Sequence, Set

from ..config import DEFAULT_SOURCE_EXTENSIONS
from ..fs import build_exclude_rules, iter_files
from ..models import DEFAULT_ROOT_SEGMENT, normalize_asset_path
from .patterns import ReferencePattern, build_patterns


def extract_references(
    text: str,
    patterns: Sequence[ReferencePattern],
    root: str = DEFAULT_ROOT_SEGMENT,
) -> Set[str]:
    """Apply every pattern to ``text`` and return the union of normalized asset paths."""
    references: Set[str] = set()
    for pattern in patterns:
        for value in pattern.extract(text):
            references.add(normalize_asset_path(value, root))
    return references


@dataclass
class ReferenceScan:
    """Asset paths referenced by the source tree."""

    directory: Path
    exists: bool
    references: Set[str] = field(default_factory=set)
    files_scanned: int = 0
    skipped_files: List[str] = field(default_factory=list)


class ReferenceScanner:
    """Reads source files and extracts asset paths with textual patterns."""

    def __init__(
        self,
        patterns: Optional[Sequence[ReferencePattern]] = None,
        source_extensions: Sequence[str] = DEFAULT_SOURCE_EXTENSIONS,
        root_segment: str = DEFAULT_ROOT_SEGMENT,
        exclude_paths: Sequence[str] = (),
    ) -> None:
        self.root_segment = root_segment
        self.patterns = list(patterns) if patterns is not None else build_patterns(root=root_segment)
        self.source_extensions = {ext.lower() for ext in source_extensions}
        self._rules = build_exclude_rules(exclude_paths)

    def scan(self, directory: Path) -> ReferenceScan:
        directory = Path(directory)
        if not directory.is_dir():
            return ReferenceScan(directory=directory, exists=False)

        scan = ReferenceScan(directory=directory, exists=True)
        for path in iter_files(directory, self._rules):
            if path.suffix.lower() not in self.source_extensions:
                continue
            try:
                text = path.read_text(encoding="utf-8")
            except (OSError, UnicodeDecodeError):
                scan.skipped_files.append(path.relative_to(directory).as_posix())
                continue
            scan.files_scanned += 1
            scan.references |= extract_references(text, self.patterns, self.root_segment)
        return scan


__all__ = ["ReferenceScan", "ReferenceScanner", "extract_references"]
