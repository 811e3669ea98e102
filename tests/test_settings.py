"""Tests for environment-driven settings and JSON formatting."""

from __future__ import annotations

from decimal import Decimal
from pathlib import Path

import pytest

from vizconfig import codec
from vizconfig.conf import LibrarySettings, get_settings
from vizconfig.dashboard import ControlWrapper, StringFilter

pytestmark = pytest.mark.unit


def test_defaults_without_environment(fresh_settings: pytest.MonkeyPatch) -> None:
    """Unset variables resolve to compact, unsorted output and the packaged table."""

    assert get_settings() == LibrarySettings()


def test_environment_overrides(fresh_settings: pytest.MonkeyPatch) -> None:
    """VIZCONFIG_* variables are parsed into typed settings."""

    fresh_settings.setenv("VIZCONFIG_JSON_SORT_KEYS", "yes")
    fresh_settings.setenv("VIZCONFIG_JSON_INDENT", " 2 ")
    fresh_settings.setenv("VIZCONFIG_VARIANTS_PATH", "/etc/vizconfig/variants.yaml")

    settings = get_settings()
    assert settings.json_sort_keys is True
    assert settings.json_indent == 2
    assert settings.variants_path == Path("/etc/vizconfig/variants.yaml")


def test_blank_values_fall_back_to_defaults(fresh_settings: pytest.MonkeyPatch) -> None:
    """Blank integer and path variables are treated as unset."""

    fresh_settings.setenv("VIZCONFIG_JSON_INDENT", "  ")
    fresh_settings.setenv("VIZCONFIG_VARIANTS_PATH", "")
    fresh_settings.setenv("VIZCONFIG_JSON_SORT_KEYS", "off")

    assert get_settings() == LibrarySettings()


def test_invalid_indent_is_rejected(fresh_settings: pytest.MonkeyPatch) -> None:
    """A non-integer indent fails loudly instead of being ignored."""

    fresh_settings.setenv("VIZCONFIG_JSON_INDENT", "wide")
    with pytest.raises(ValueError):
        get_settings()


def test_dumps_follows_settings(fresh_settings: pytest.MonkeyPatch) -> None:
    """Sorting and indentation come from the resolved settings."""

    payload = {"b": 1, "a": 2}
    assert codec.dumps(payload) == '{"b": 1, "a": 2}'

    fresh_settings.setenv("VIZCONFIG_JSON_SORT_KEYS", "1")
    fresh_settings.setenv("VIZCONFIG_JSON_INDENT", "2")
    get_settings.cache_clear()
    assert codec.dumps(payload) == '{\n  "a": 2,\n  "b": 1\n}'


def test_dumps_encodes_handles_and_decimals(fresh_settings: pytest.MonkeyPatch) -> None:
    """Handles exposing to_map() and Decimals are encoded without extra handling."""

    control = ControlWrapper(StringFilter(0, matchType="prefix"), "name_filter")
    assert codec.dumps({"control": control}) == (
        '{"control": {"controlType": "StringFilter", "containerId": "name_filter", '
        '"options": {"filterColumnIndex": 0, "matchType": "prefix"}}}'
    )
    assert codec.dumps([Decimal("1.50")]) == '["1.50"]'
