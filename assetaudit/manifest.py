"""Extraction of asset declarations from the project manifest."""

from __future__ import annotations

import re
from enum import Enum
from pathlib import Path
from typing import List

from .models import DEFAULT_ROOT_SEGMENT, Declaration, normalize_asset_path

_SURROUNDING_QUOTES = re.compile(r"""^["']|["']$""")
_INLINE_COMMENT = re.compile(r"\s+#.*$")


class ManifestMissingError(FileNotFoundError):
    """Raised when the manifest file does not exist."""


class ManifestUnreadableError(RuntimeError):
    """Raised when the manifest exists but cannot be read as UTF-8 text."""


class ManifestState(Enum):
    SEEKING_SECTION = "seeking_section"
    IN_SECTION = "in_section"
    IN_LIST = "in_list"
    EXITED = "exited"


def parse_declarations(
    text: str,
    *,
    root: str = DEFAULT_ROOT_SEGMENT,
    section: str = "flutter",
    list_key: str = "assets",
) -> List[Declaration]:
    """Return declarations listed under ``section`` -> ``list_key`` in manifest order.

    Only the first list found is read: once a non-item line follows the list,
    parsing stops for good.
    """
    section_marker = f"{section}:"
    list_marker = f"{list_key}:"
    state = ManifestState.SEEKING_SECTION
    declarations: List[Declaration] = []

    for line in text.splitlines():
        trimmed = line.strip()

        if state is ManifestState.SEEKING_SECTION:
            if trimmed == section_marker:
                state = ManifestState.IN_SECTION
        elif state is ManifestState.IN_SECTION:
            if trimmed == list_marker:
                state = ManifestState.IN_LIST
        elif state is ManifestState.IN_LIST:
            if not trimmed or trimmed.startswith("#"):
                continue
            if trimmed.startswith("-"):
                value = _parse_list_item(trimmed)
                if value:
                    declarations.append(Declaration.from_value(normalize_asset_path(value, root)))
                continue
            state = ManifestState.EXITED

        if state is ManifestState.EXITED:
            break

    return declarations


def _parse_list_item(trimmed: str) -> str:
    value = trimmed[1:].strip()
    value = _INLINE_COMMENT.sub("", value)
    return _SURROUNDING_QUOTES.sub("", value).strip()


class ManifestParser:
    """Reads declarations from a manifest file on disk."""

    def __init__(
        self,
        *,
        root: str = DEFAULT_ROOT_SEGMENT,
        section: str = "flutter",
        list_key: str = "assets",
    ) -> None:
        self.root = root
        self.section = section
        self.list_key = list_key

    def parse(self, text: str) -> List[Declaration]:
        return parse_declarations(
            text, root=self.root, section=self.section, list_key=self.list_key
        )

    def load(self, path: Path) -> List[Declaration]:
        """Parse the manifest at ``path``; raise ManifestMissingError when absent."""
        if not path.is_file():
            raise ManifestMissingError(f"Manifest not found: {path}")
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise ManifestUnreadableError(f"Cannot read manifest {path}: {exc}") from exc
        return self.parse(text)


__all__ = [
    "ManifestMissingError",
    "ManifestParser",
    "ManifestState",
    "ManifestUnreadableError",
    "parse_declarations",
]
