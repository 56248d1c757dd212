"""Decides whether an asset path is covered by manifest declarations."""

from __future__ import annotations

from typing import Iterable

from .models import WILDCARD_SUFFIX, Declaration, DeclarationKind


def _under_folder(path: str, folder: str) -> bool:
    folder = folder.rstrip("/")
    return path == folder or path.startswith(f"{folder}/")


def declaration_covers(path: str, declaration: Declaration) -> bool:
    value = declaration.value
    if value.endswith(WILDCARD_SUFFIX):
        # Keep the slash so "assets/icons/*" does not cover "assets/icons2/..."
        return path.startswith(value[:-1])
    if declaration.kind is DeclarationKind.FOLDER_WILDCARD:
        return _under_folder(path, value)
    return path == value


def is_asset_declared(path: str, declarations: Iterable[Declaration]) -> bool:
    """Return True when any declaration covers ``path``."""
    return any(declaration_covers(path, declaration) for declaration in declarations)


__all__ = ["declaration_covers", "is_asset_declared"]
