"""Tests for the built-in and custom reference patterns."""

from __future__ import annotations

import pytest

from assetaudit.config import ConfigError, CustomPatternConfig
from assetaudit.references import build_patterns, extract_references

SOURCE = """
import 'package:flutter/material.dart';

const logo = 'assets/images/logo.png';
final bg = AssetImage("images/background.jpg");
Widget build() => Image.asset('icons/home.webp');
var sound = "sfx/click.mp3";
// 'assets/docs/readme.txt' has no allow-listed extension
"""


def test_default_patterns_extract_all_literal_shapes() -> None:
    references = extract_references(SOURCE, build_patterns())

    assert references == {
        "assets/images/logo.png",
        "assets/images/background.jpg",
        "assets/icons/home.webp",
        "assets/sfx/click.mp3",
    }


def test_asset_constructors_accept_any_extension() -> None:
    text = "AssetImage('assets/raw/photo.heic'); Image.asset('assets/raw/photo.tiff')"

    references = extract_references(text, build_patterns())

    assert references == {"assets/raw/photo.heic", "assets/raw/photo.tiff"}


def test_literal_matched_by_several_patterns_is_deduplicated() -> None:
    text = "final icon = Image.asset('assets/icons/a.png');\nconst b = 'assets/icons/a.png';"

    assert extract_references(text, build_patterns()) == {"assets/icons/a.png"}


def test_commented_out_literals_still_count() -> None:
    text = "// Image.asset('assets/old/unused.png')"

    assert extract_references(text, build_patterns()) == {"assets/old/unused.png"}


def test_enabled_filters_builtin_patterns() -> None:
    patterns = build_patterns(enabled=["asset_image"])

    assert [pattern.name for pattern in patterns] == ["asset_image"]
    assert extract_references("x = 'assets/a.png'", patterns) == set()


def test_extension_allow_list_is_configurable() -> None:
    patterns = build_patterns(extensions=["ttf"])

    assert extract_references("const f = 'assets/fonts/a.ttf';", patterns) == {
        "assets/fonts/a.ttf"
    }
    assert extract_references("const p = 'assets/a.png';", patterns) == set()


def test_custom_pattern_is_appended() -> None:
    custom = CustomPatternConfig(
        name="svg_picture", regex=r"""SvgPicture\.asset\(["'](.+?)["']""", group=1
    )
    patterns = build_patterns(enabled=[], custom=[custom])

    references = extract_references("SvgPicture.asset('icons/star.svg', width: 12)", patterns)

    assert references == {"assets/icons/star.svg"}


def test_invalid_custom_regex_raises_config_error() -> None:
    with pytest.raises(ConfigError):
        build_patterns(custom=[CustomPatternConfig(name="broken", regex="(")])


def test_custom_group_out_of_range_raises_config_error() -> None:
    with pytest.raises(ConfigError):
        build_patterns(custom=[CustomPatternConfig(name="nogroup", regex="abc", group=2)])


def test_unknown_enabled_pattern_raises_config_error() -> None:
    with pytest.raises(ConfigError):
        build_patterns(enabled=["does_not_exist"])
