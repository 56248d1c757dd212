"""Tests for assetaudit.manifest."""

from __future__ import annotations

from pathlib import Path

import pytest

from assetaudit.manifest import ManifestMissingError, ManifestParser, parse_declarations
from assetaudit.models import DeclarationKind

PUBSPEC = """\
name: demo
dependencies:
  flutter:
    sdk: flutter

flutter:
  uses-material-design: true
  assets:
    - assets/images/
    - "assets/icons/*"
    - 'fonts/custom.ttf'

    - assets/data/config.json  # runtime config
  fonts:
    - family: Custom
"""


def test_parse_declarations_reads_assets_in_order() -> None:
    declarations = parse_declarations(PUBSPEC)

    assert [d.value for d in declarations] == [
        "assets/images/",
        "assets/icons/*",
        "assets/fonts/custom.ttf",
        "assets/data/config.json",
    ]


def test_parse_declarations_classifies_kinds() -> None:
    kinds = {d.value: d.kind for d in parse_declarations(PUBSPEC)}

    assert kinds["assets/images/"] is DeclarationKind.FOLDER_WILDCARD
    assert kinds["assets/icons/*"] is DeclarationKind.FOLDER_WILDCARD
    assert kinds["assets/fonts/custom.ttf"] is DeclarationKind.EXACT_FILE


def test_parse_declarations_stops_at_next_key() -> None:
    text = """\
flutter:
  assets:
    - assets/a.png
  fonts:
    - assets/b.png
flutter:
  assets:
    - assets/c.png
"""
    declarations = parse_declarations(text)

    assert [d.value for d in declarations] == ["assets/a.png"]


def test_parse_declarations_without_section_is_empty() -> None:
    assert parse_declarations("name: demo\nversion: 1.0.0\n") == []


def test_parse_declarations_with_empty_list_is_empty() -> None:
    text = "flutter:\n  assets:\n\nother: true\n"

    assert parse_declarations(text) == []


def test_parse_declarations_ignores_assets_key_outside_section() -> None:
    text = "assets:\n  - assets/a.png\n"

    assert parse_declarations(text) == []


def test_parse_declarations_skips_empty_items() -> None:
    text = "flutter:\n  assets:\n    -\n    - ''\n    - assets/a.png\n"

    assert [d.value for d in parse_declarations(text)] == ["assets/a.png"]


def test_parse_declarations_honours_custom_markers() -> None:
    text = "game:\n  resources:\n    - sprites/hero.png\n"

    declarations = parse_declarations(text, root="res", section="game", list_key="resources")

    assert [d.value for d in declarations] == ["res/sprites/hero.png"]


def test_manifest_parser_load_missing_file(tmp_path: Path) -> None:
    parser = ManifestParser()

    with pytest.raises(ManifestMissingError):
        parser.load(tmp_path / "pubspec.yaml")


def test_manifest_parser_load_reads_file(tmp_path: Path) -> None:
    manifest = tmp_path / "pubspec.yaml"
    manifest.write_text(PUBSPEC, encoding="utf-8")

    declarations = ManifestParser().load(manifest)

    assert len(declarations) == 4
