"""Configuration loading for assetaudit (.assetaudit.yml)."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path, PurePosixPath
from typing import Any, Dict, List, Optional

import yaml

CONFIG_FILENAME = ".assetaudit.yml"

DEFAULT_MANIFEST = "pubspec.yaml"
DEFAULT_ASSETS_DIR = "assets"
DEFAULT_SOURCE_DIR = "lib"
DEFAULT_REPORT_FILE = "unused_assets.json"
DEFAULT_SOURCE_EXTENSIONS = (".dart",)
DEFAULT_ASSET_EXTENSIONS = ("png", "jpg", "jpeg", "svg", "json", "mp3", "mp4", "gif", "webp")


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be parsed."""


@dataclass
class ManifestSectionConfig:
    """Markers that locate the asset list inside the manifest."""

    section: str = "flutter"
    list_key: str = "assets"


@dataclass
class CustomPatternConfig:
    """User supplied reference pattern."""

    name: str
    regex: str
    group: int = 1


@dataclass
class PatternConfig:
    """Reference pattern enablement and additions."""

    enabled: Optional[List[str]] = None
    custom: List[CustomPatternConfig] = field(default_factory=list)


@dataclass
class AuditConfig:
    """Represents the settings defined in .assetaudit.yml."""

    root: Path
    manifest: str = DEFAULT_MANIFEST
    assets_dir: str = DEFAULT_ASSETS_DIR
    source_dir: str = DEFAULT_SOURCE_DIR
    report_file: str = DEFAULT_REPORT_FILE
    source_extensions: List[str] = field(default_factory=lambda: list(DEFAULT_SOURCE_EXTENSIONS))
    asset_extensions: List[str] = field(default_factory=lambda: list(DEFAULT_ASSET_EXTENSIONS))
    exclude_paths: List[str] = field(default_factory=list)
    manifest_section: ManifestSectionConfig = field(default_factory=ManifestSectionConfig)
    patterns: PatternConfig = field(default_factory=PatternConfig)

    @property
    def root_segment(self) -> str:
        """Prefix every asset path carries, e.g. ``assets``."""
        return PurePosixPath(self.assets_dir.replace("\\", "/")).as_posix().strip("/")

    @property
    def manifest_path(self) -> Path:
        return self.root / self.manifest

    @property
    def assets_path(self) -> Path:
        return self.root / self.assets_dir

    @property
    def source_path(self) -> Path:
        return self.root / self.source_dir

    @property
    def report_path(self) -> Path:
        return self.root / self.report_file


def load_config(config_path: Path) -> AuditConfig:
    """Load configuration from disk, falling back to defaults when absent."""
    config_file = _resolve_config_path(config_path)
    root = config_file.parent.resolve()

    if not config_file.exists():
        return AuditConfig(root=root)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    config = AuditConfig(root=root)
    config.manifest = _require_str(data, "manifest", config.manifest)
    config.assets_dir = _require_str(data, "assets_dir", config.assets_dir)
    config.source_dir = _require_str(data, "source_dir", config.source_dir)
    config.report_file = _require_str(data, "report_file", config.report_file)

    if "source_extensions" in data:
        config.source_extensions = [
            ext if ext.startswith(".") else f".{ext}"
            for ext in _require_str_list(data, "source_extensions")
        ]
    if "asset_extensions" in data:
        config.asset_extensions = [
            ext.lstrip(".").lower() for ext in _require_str_list(data, "asset_extensions")
        ]
    config.exclude_paths = _require_str_list(data, "exclude_paths")

    section_data = _as_dict(data.get("manifest_section"))
    if section_data:
        config.manifest_section = ManifestSectionConfig(
            section=_as_str(section_data.get("section")) or "flutter",
            list_key=_as_str(section_data.get("list_key")) or "assets",
        )

    pattern_data = _as_dict(data.get("patterns"))
    if pattern_data:
        enabled = pattern_data.get("enabled")
        config.patterns = PatternConfig(
            enabled=_require_str_list(pattern_data, "enabled") if enabled is not None else None,
            custom=_parse_custom_patterns(pattern_data.get("custom")),
        )

    return config


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    if config_path.name != CONFIG_FILENAME:
        return (config_path.parent / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Dict[str, Any]:
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigError(f"Failed to read {path.name}: {exc}") from exc
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded or {}


def _parse_custom_patterns(value: Any) -> List[CustomPatternConfig]:
    if value is None:
        return []
    if not isinstance(value, list):
        raise ConfigError("patterns.custom must be a list of mappings")

    patterns: List[CustomPatternConfig] = []
    for index, entry in enumerate(value):
        if not isinstance(entry, dict):
            raise ConfigError(f"patterns.custom[{index}] must be a mapping")
        name = _as_str(entry.get("name"))
        regex = _as_str(entry.get("regex"))
        if not name or not regex:
            raise ConfigError(f"patterns.custom[{index}] requires 'name' and 'regex'")
        group = _as_int(entry.get("group", 1))
        if group is None or group < 0:
            raise ConfigError(f"patterns.custom[{index}].group must be a non-negative integer")
        patterns.append(CustomPatternConfig(name=name, regex=regex, group=group))
    return patterns


def _require_str(data: Dict[str, Any], key: str, default: str) -> str:
    if key not in data or data[key] is None:
        return default
    value = data[key]
    if not isinstance(value, str) or not value.strip():
        raise ConfigError(f"'{key}' must be a non-empty string")
    return value.strip()


def _require_str_list(data: Dict[str, Any], key: str) -> List[str]:
    value = data.get(key)
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, list) and all(isinstance(item, (str, int, float)) for item in value):
        return [str(item) for item in value]
    raise ConfigError(f"'{key}' must be a string or a list of strings")


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float, bool)) else None


def _as_int(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value)
        except ValueError:
            return None
    return None

