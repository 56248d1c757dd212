"""Filesystem walking helpers shared by the asset and reference scanners."""

from __future__ import annotations

import os
from dataclasses import dataclass
from fnmatch import fnmatchcase
from pathlib import Path
from typing import Iterable, Iterator, List, Sequence


@dataclass
class ExcludeRule:
    """Gitignore-style exclusion pattern from ``exclude_paths``."""

    pattern: str
    directory_only: bool
    anchored: bool
    has_slash: bool

    def matches(self, rel_path: str, is_dir: bool) -> bool:
        if not self.pattern:
            return False
        if self.directory_only and not is_dir:
            return False

        if self.anchored or self.has_slash:
            if fnmatchcase(rel_path, self.pattern):
                return True
            return self.directory_only and rel_path.startswith(f"{self.pattern}/")

        return any(fnmatchcase(part, self.pattern) for part in rel_path.split("/"))


def build_exclude_rule(pattern: str) -> ExcludeRule | None:
    pattern = pattern.strip()
    if not pattern:
        return None

    directory_only = pattern.endswith("/")
    if directory_only:
        pattern = pattern[:-1]

    anchored = pattern.startswith("/")
    if anchored:
        pattern = pattern[1:]

    return ExcludeRule(
        pattern=pattern,
        directory_only=directory_only,
        anchored=anchored,
        has_slash="/" in pattern,
    )


def build_exclude_rules(patterns: Iterable[str]) -> List[ExcludeRule]:
    rules: List[ExcludeRule] = []
    for pattern in patterns:
        rule = build_exclude_rule(pattern)
        if rule is not None:
            rules.append(rule)
    return rules


def is_excluded(rel_path: str, is_dir: bool, rules: Sequence[ExcludeRule]) -> bool:
    return any(rule.matches(rel_path, is_dir) for rule in rules)


def iter_files(root: Path, rules: Sequence[ExcludeRule] = ()) -> Iterator[Path]:
    """Yield regular files below ``root`` in sorted, depth-first order.

    Exclusion patterns are matched against paths relative to ``root``.
    """
    for dirpath, dirnames, filenames in os.walk(root):
        current_dir = Path(dirpath)
        rel_dir = current_dir.relative_to(root).as_posix() if current_dir != root else ""

        kept_dirs = []
        for name in sorted(dirnames):
            rel_path = f"{rel_dir}/{name}" if rel_dir else name
            if is_excluded(rel_path, True, rules):
                continue
            kept_dirs.append(name)
        dirnames[:] = kept_dirs

        for filename in sorted(filenames):
            rel_path = f"{rel_dir}/{filename}" if rel_dir else filename
            if is_excluded(rel_path, False, rules):
                continue
            path = current_dir / filename
            if path.is_file():
                yield path


__all__ = ["ExcludeRule", "build_exclude_rule", "build_exclude_rules", "is_excluded", "iter_files"]
