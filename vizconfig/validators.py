"""Pure predicates used before writing values into an OptionBag.

Predicates never raise. Each has a `require_*` counterpart that raises
`InvalidConfigValue` with the failing operation, the expected shape and an
optional hint, and otherwise returns the value unchanged so setters can use
it inline.
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from typing import Any, TypeVar

from .exceptions import InvalidConfigValue

T = TypeVar("T")

_PERCENT_RE = re.compile(r"^\d+(\.\d+)?%$")


def is_non_empty_string(value: object) -> bool:
    """Return True when value is a str with at least one character."""

    return isinstance(value, str) and len(value) > 0


def is_homogeneous_string_array(value: object) -> bool:
    """Return True when value is a non-empty sequence of strings.

    A bare string is a sequence of characters, not an array, and is rejected.
    """

    if isinstance(value, (str, bytes)) or not isinstance(value, Sequence):
        return False
    if len(value) == 0:
        return False
    return all(isinstance(item, str) for item in value)


def is_enum_member(value: object, allowed: Sequence[str]) -> bool:
    """Return True when value exactly (case-sensitively) equals one allowed value."""

    return isinstance(value, str) and value in allowed


def is_integer(value: object) -> bool:
    """Return True for ints. Booleans are excluded even though bool subclasses int."""

    return isinstance(value, int) and not isinstance(value, bool)


def is_boolean(value: object) -> bool:
    return isinstance(value, bool)


def is_number(value: object) -> bool:
    """Return True for ints and floats (booleans excluded)."""

    return isinstance(value, (int, float)) and not isinstance(value, bool)


def is_int_or_percent(value: object) -> bool:
    """Return True for a pixel int or a percentage string such as "80%"."""

    if is_integer(value):
        return True
    return isinstance(value, str) and _PERCENT_RE.match(value) is not None


def piped(values: Sequence[str]) -> str:
    """Join accepted values with `|` for error hints."""

    return "|".join(values)


def require_non_empty_string(value: T, *, operation: str, extra: str = "") -> T:
    if not is_non_empty_string(value):
        raise InvalidConfigValue(operation=operation, expected="string", extra=extra)
    return value


def require_string_array(value: T, *, operation: str, extra: str = "") -> T:
    if not is_homogeneous_string_array(value):
        raise InvalidConfigValue(operation=operation, expected="array", extra=extra)
    return value


def require_enum_member(value: T, allowed: Sequence[str], *, operation: str) -> T:
    """Require value to be one of `allowed`.

    Args:
        value: Candidate value.
        allowed: Accepted values, in display order.
        operation: Operation name reported on failure.

    Returns:
        The value unchanged.

    Raises:
        InvalidConfigValue: With a hint listing the accepted values.
    """

    if not is_enum_member(value, allowed):
        raise InvalidConfigValue(operation=operation, expected="string", extra=f"with a value of {piped(allowed)}")
    return value


def require_integer(value: T, *, operation: str, extra: str = "") -> T:
    if not is_integer(value):
        raise InvalidConfigValue(operation=operation, expected="int", extra=extra)
    return value


def require_boolean(value: T, *, operation: str) -> T:
    if not is_boolean(value):
        raise InvalidConfigValue(operation=operation, expected="bool")
    return value


def require_number(value: T, *, operation: str, extra: str = "") -> T:
    if not is_number(value):
        raise InvalidConfigValue(operation=operation, expected="int|float", extra=extra)
    return value


def require_int_or_percent(value: T, *, operation: str) -> T:
    if not is_int_or_percent(value):
        raise InvalidConfigValue(operation=operation, expected="int|string", extra="as pixels or a percentage like '80%'")
    return value


def require_instance(value: Any, cls: type[T], *, operation: str) -> T:
    """Require value to be an instance of `cls` and return it typed as such."""

    if not isinstance(value, cls):
        raise InvalidConfigValue(operation=operation, expected=cls.__name__)
    return value
