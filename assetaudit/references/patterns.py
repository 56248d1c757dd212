"""Textual patterns that locate asset paths inside source files."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable, Dict, Iterable, List, Optional, Sequence, Set

from ..config import DEFAULT_ASSET_EXTENSIONS, ConfigError, CustomPatternConfig
from ..models import DEFAULT_ROOT_SEGMENT


@dataclass(frozen=True)
class ReferencePattern:
    """A named regex together with the capture group that holds the asset path."""

    name: str
    regex: re.Pattern[str]
    group: int = 1

    def extract(self, text: str) -> Iterable[str]:
        if self.regex.groups < self.group:
            return
        for match in self.regex.finditer(text):
            value = match.group(self.group)
            if value:
                yield value


def _extension_alternation(extensions: Sequence[str]) -> str:
    return "|".join(re.escape(ext.lstrip(".")) for ext in extensions)


def string_literal_pattern(
    extensions: Sequence[str], root: str = DEFAULT_ROOT_SEGMENT
) -> ReferencePattern:
    """Quoted literal such as ``"assets/icons/home.png"``."""
    regex = re.compile(
        rf"""["']({re.escape(root.strip('/'))}/.*?\.(?:{_extension_alternation(extensions)}))["']"""
    )
    return ReferencePattern(name="string_literal", regex=regex, group=1)


def asset_image_pattern(
    extensions: Sequence[str], root: str = DEFAULT_ROOT_SEGMENT
) -> ReferencePattern:
    """First argument of ``AssetImage("...")``, whatever its extension."""
    return ReferencePattern(
        name="asset_image", regex=re.compile(r"""AssetImage\(["'](.+?)["']\)"""), group=1
    )


def image_asset_pattern(
    extensions: Sequence[str], root: str = DEFAULT_ROOT_SEGMENT
) -> ReferencePattern:
    """First argument of ``Image.asset("...")``, whatever its extension."""
    return ReferencePattern(
        name="image_asset", regex=re.compile(r"""Image\.asset\(["'](.+?)["']\)"""), group=1
    )


def assignment_pattern(
    extensions: Sequence[str], root: str = DEFAULT_ROOT_SEGMENT
) -> ReferencePattern:
    """Right-hand side of ``name = "....png"``."""
    regex = re.compile(
        rf"""(\w+)\s*=\s*["'](.+?\.(?:{_extension_alternation(extensions)}))["']"""
    )
    return ReferencePattern(name="assignment", regex=regex, group=2)


PatternFactory = Callable[[Sequence[str], str], ReferencePattern]

BUILTIN_PATTERNS: Dict[str, PatternFactory] = {
    "string_literal": string_literal_pattern,
    "asset_image": asset_image_pattern,
    "image_asset": image_asset_pattern,
    "assignment": assignment_pattern,
}


def compile_custom_pattern(config: CustomPatternConfig) -> ReferencePattern:
    try:
        regex = re.compile(config.regex)
    except re.error as exc:
        raise ConfigError(f"Invalid regex for pattern '{config.name}': {exc}") from exc
    if config.group > regex.groups:
        raise ConfigError(
            f"Pattern '{config.name}' has {regex.groups} groups; group {config.group} requested"
        )
    return ReferencePattern(name=config.name, regex=regex, group=config.group)


def build_patterns(
    *,
    extensions: Sequence[str] = DEFAULT_ASSET_EXTENSIONS,
    root: str = DEFAULT_ROOT_SEGMENT,
    enabled: Optional[Sequence[str]] = None,
    custom: Sequence[CustomPatternConfig] = (),
) -> List[ReferencePattern]:
    """Return built-in patterns (optionally filtered by name) followed by custom ones."""
    enabled_set: Set[str] | None = None
    if enabled is not None:
        enabled_set = {name.lower() for name in enabled}
        unknown = enabled_set - set(BUILTIN_PATTERNS) - {c.name.lower() for c in custom}
        if unknown:
            raise ConfigError(f"Unknown reference patterns: {', '.join(sorted(unknown))}")

    patterns: List[ReferencePattern] = []
    for name, factory in BUILTIN_PATTERNS.items():
        if enabled_set is not None and name not in enabled_set:
            continue
        patterns.append(factory(extensions, root))

    seen = {pattern.name for pattern in patterns}
    for entry in custom:
        if entry.name in seen:
            raise ConfigError(f"Duplicate reference pattern name '{entry.name}'")
        patterns.append(compile_custom_pattern(entry))
        seen.add(entry.name)
    return patterns


__all__ = [
    "BUILTIN_PATTERNS",
    "ReferencePattern",
    "build_patterns",
    "compile_custom_pattern",
]
