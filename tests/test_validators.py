"""Tests for the pure option validators."""

from __future__ import annotations

import pytest

from vizconfig.exceptions import InvalidConfigValue
from vizconfig.validators import (
    is_enum_member,
    is_homogeneous_string_array,
    is_int_or_percent,
    is_integer,
    is_non_empty_string,
    require_enum_member,
    require_non_empty_string,
    require_string_array,
)

pytestmark = pytest.mark.unit


@pytest.mark.parametrize(("value", "expected"), [("a", True), ("", False), (None, False), (3, False)])
def test_is_non_empty_string(value: object, expected: bool) -> None:
    """Only non-empty str values pass."""

    assert is_non_empty_string(value) is expected


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (["red", "#004411"], True),
        (("red",), True),
        ([], False),
        (["red", 3], False),
        ("red", False),
        ({"red": 1}, False),
    ],
)
def test_is_homogeneous_string_array(value: object, expected: bool) -> None:
    """Non-empty sequences of str pass; bare strings and mixed sequences do not."""

    assert is_homogeneous_string_array(value) is expected


def test_is_enum_member_is_case_sensitive() -> None:
    """Membership is an exact match."""

    assert is_enum_member("in", ("in", "out", "none")) is True
    assert is_enum_member("IN", ("in", "out", "none")) is False
    assert is_enum_member(None, ("in", "out", "none")) is False


def test_is_integer_excludes_booleans_and_floats() -> None:
    """bool subclasses int but is not accepted as an integer option."""

    assert is_integer(5) is True
    assert is_integer(True) is False
    assert is_integer(5.0) is False


def test_is_int_or_percent() -> None:
    """Pixel ints and percentage strings pass."""

    assert is_int_or_percent(40) is True
    assert is_int_or_percent("80%") is True
    assert is_int_or_percent("12.5%") is True
    assert is_int_or_percent("80") is False
    assert is_int_or_percent("%") is False


def test_require_helpers_return_the_value() -> None:
    """require_* helpers pass valid values through unchanged."""

    colors = ["red"]
    assert require_string_array(colors, operation="Chart::colors") is colors
    assert require_non_empty_string("Sales", operation="Chart::title") == "Sales"


def test_require_enum_member_error_carries_operation_and_hint() -> None:
    """Failures carry the operation, the expected type and the piped accepted values."""

    with pytest.raises(InvalidConfigValue) as excinfo:
        require_enum_member("middle", ("in", "out", "none"), operation="ColumnChart::title_position")

    error = excinfo.value
    assert error.operation == "ColumnChart::title_position"
    assert error.expected == "string"
    assert error.extra == "with a value of in|out|none"
    assert "in|out|none" in str(error)
