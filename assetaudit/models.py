"""Core data models shared across assetaudit components."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import List, Optional

DEFAULT_ROOT_SEGMENT = "assets"


def normalize_asset_path(raw: str, root: str = DEFAULT_ROOT_SEGMENT) -> str:
    """Return ``raw`` as a forward-slash path that starts with ``root/``."""
    path = raw.replace("\\", "/")
    while path.startswith("./"):
        path = path[2:]
    prefix = f"{root.strip('/')}/"
    if not path.startswith(prefix):
        path = f"{prefix}{path}"
    return path


class DeclarationKind(str, Enum):
    EXACT_FILE = "exact_file"
    FOLDER_WILDCARD = "folder_wildcard"


WILDCARD_SUFFIX = "/*"


@dataclass(frozen=True)
class Declaration:
    """One asset entry listed in the manifest."""

    value: str
    kind: DeclarationKind

    @classmethod
    def from_value(cls, value: str) -> "Declaration":
        if value.endswith(WILDCARD_SUFFIX) or "." not in value:
            return cls(value=value, kind=DeclarationKind.FOLDER_WILDCARD)
        return cls(value=value, kind=DeclarationKind.EXACT_FILE)

    @property
    def stem(self) -> str:
        """Declaration value without its folder-glob suffix."""
        if self.value.endswith(WILDCARD_SUFFIX):
            return self.value[: -len(WILDCARD_SUFFIX)]
        return self.value


@dataclass
class AssetFile:
    """A concrete asset on disk; ``size`` is filled only when needed."""

    path: str
    size: Optional[int] = None


@dataclass
class UnusedAsset:
    """Declared asset that no source file references."""

    path: str
    size: int
    formatted_size: str


@dataclass
class ReconciliationResult:
    """Outcome of comparing declarations, files on disk and source references."""

    total_assets: int
    declared_assets: int
    referenced_assets: int
    unused_assets: List[UnusedAsset] = field(default_factory=list)
    unused_assets_count: int = 0
    unused_assets_total_size: int = 0
    undeclared_assets: List[str] = field(default_factory=list)
    missing_declared_assets: List[str] = field(default_factory=list)
    unsized_assets: List[str] = field(default_factory=list)


class RunStatus(str, Enum):
    COMPLETED = "completed"
    MANIFEST_MISSING = "manifest_missing"
    NO_DECLARATIONS = "no_declarations"
    NO_ASSETS = "no_assets"
    MANIFEST_UNREADABLE = "manifest_unreadable"
    CONFIG_ERROR = "config_error"
    REPORT_FAILED = "report_failed"


@dataclass
class RunOutcome:
    """Result of a full report run, including the informational short-circuits."""

    status: RunStatus
    project_root: Path
    message: str
    result: Optional[ReconciliationResult] = None
    report_path: Optional[Path] = None

    @property
    def succeeded(self) -> bool:
        return self.status not in {
            RunStatus.MANIFEST_MISSING,
            RunStatus.MANIFEST_UNREADABLE,
            RunStatus.CONFIG_ERROR,
            RunStatus.REPORT_FAILED,
        }
