"""Dashboard control filters.

A filter targets one DataTable column, by index or by label, and carries a
small option vocabulary from the `filters` section of the variant table.
Options named under `ui` in that table are nested under the control's `ui`
object when serialized.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from datetime import date
from typing import Any, ClassVar, Final, Self

from vizconfig.charting.variants import VARIANTS, FilterSpec
from vizconfig.exceptions import InvalidConfigValue, UnknownOption
from vizconfig.options import OptionBag
from vizconfig.validators import (
    is_non_empty_string,
    is_number,
    require_boolean,
    require_enum_member,
    require_instance,
    require_integer,
    require_non_empty_string,
    require_number,
    require_string_array,
)

MATCH_TYPES: Final[tuple[str, ...]] = ("exact", "prefix", "any")

Validator = Callable[[Any, str], Any]


def _number_or_date(value: Any, operation: str) -> Any:
    """Accept a number, or a date stored as its ISO string."""

    if is_number(value):
        return value
    if isinstance(value, date):
        return value.isoformat()
    raise InvalidConfigValue(operation=operation, expected="int|float|date")


def _step(value: Any, operation: str) -> Any:
    if is_number(value) or is_non_empty_string(value):
        return value
    raise InvalidConfigValue(operation=operation, expected="int|float|string", extra="such as 1 or 'day'")


def _format(value: Any, operation: str) -> dict[str, Any]:
    return dict(require_instance(value, Mapping, operation=operation))


OPTION_VALIDATORS: Final[Mapping[str, Validator]] = {
    "allowMultiple": lambda v, op: require_boolean(v, operation=op),
    "allowNone": lambda v, op: require_boolean(v, operation=op),
    "allowTyping": lambda v, op: require_boolean(v, operation=op),
    "caption": lambda v, op: require_non_empty_string(v, operation=op),
    "caseSensitive": lambda v, op: require_boolean(v, operation=op),
    "chartType": lambda v, op: require_non_empty_string(v, operation=op),
    "format": _format,
    "label": lambda v, op: require_non_empty_string(v, operation=op),
    "matchType": lambda v, op: require_enum_member(v, MATCH_TYPES, operation=op),
    "maxValue": _number_or_date,
    "minRangeSize": lambda v, op: require_number(v, operation=op),
    "minValue": _number_or_date,
    "realtimeTrigger": lambda v, op: require_boolean(v, operation=op),
    "showRangeValues": lambda v, op: require_boolean(v, operation=op),
    "snapToData": lambda v, op: require_boolean(v, operation=op),
    "sortValues": lambda v, op: require_boolean(v, operation=op),
    "step": _step,
    "useFormattedValue": lambda v, op: require_boolean(v, operation=op),
    "values": lambda v, op: list(require_string_array(v, operation=op)),
}


class Filter:
    """Base for control filters; subclasses are named after their control type."""

    TYPE: ClassVar[str] = ""
    SPEC: ClassVar[FilterSpec | None] = None

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        spec = VARIANTS.filter(cls.__name__)
        unchecked = spec.vocabulary - OPTION_VALIDATORS.keys()
        if unchecked:
            raise TypeError(f"{cls.__name__} options have no validator: {sorted(unchecked)}")
        cls.TYPE = cls.__name__
        cls.SPEC = spec

    def __init__(self, column: int | str, **options: Any) -> None:
        """Build a filter over a DataTable column.

        Args:
            column: Column index (int) or column label (non-empty str).
            **options: Initial options, validated through `set_options`.

        Raises:
            TypeError: When instantiating the abstract base.
            InvalidConfigValue: When the column or an option value is invalid.
            UnknownOption: When an option is outside this filter's vocabulary.
        """

        if self.SPEC is None:
            raise TypeError("Filter is abstract; use a concrete control type such as CategoryFilter.")
        if isinstance(column, str):
            require_non_empty_string(column, operation=self._op("__init__"), extra="naming a column label")
            self._column: tuple[str, int | str] = ("filterColumnLabel", column)
        else:
            require_integer(column, operation=self._op("__init__"), extra="or string naming a column")
            self._column = ("filterColumnIndex", column)
        self._options = OptionBag(self.SPEC.vocabulary, owner=self.TYPE)
        if options:
            self.set_options(options)

    def _op(self, func: str) -> str:
        return f"{self.TYPE or type(self).__name__}::{func}"

    @property
    def column(self) -> int | str:
        return self._column[1]

    def set_options(self, options: Mapping[str, Any]) -> Self:
        """Validate and set options; fails fast on the first bad key or value."""

        if not isinstance(options, Mapping) or len(options) == 0:
            raise InvalidConfigValue(operation=self._op("set_options"), expected="mapping", extra="which is non-empty")
        for name, value in options.items():
            if name not in self._options.declared_keys:
                raise UnknownOption(option=name, allowed=self._options.declared_keys, owner=self._op("set_options"))
            self._options.set(name, OPTION_VALIDATORS[name](value, self._op(name)))
        return self

    def get_option(self, name: str) -> Any:
        return self._options.get(name)

    def get_options(self) -> dict[str, Any]:
        return self._options.snapshot()

    def to_map(self) -> dict[str, Any]:
        """Return the control options, with `ui` options nested under "ui"."""

        assert self.SPEC is not None
        values = self._options.snapshot()
        key, column = self._column
        payload: dict[str, Any] = {key: column}
        ui = {name: value for name, value in values.items() if name in self.SPEC.ui}
        payload.update({name: value for name, value in values.items() if name not in self.SPEC.ui})
        if ui:
            payload["ui"] = ui
        return payload

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.column!r})"


class CategoryFilter(Filter):
    """Pick one or more values from a set of defined values."""


class ChartRangeFilter(Filter):
    """Slider with two thumbs over a small chart, selecting a continuous range."""


class DateRangeFilter(Filter):
    """Dual-value slider over a date column."""


class NumberRangeFilter(Filter):
    """Dual-value slider over a numeric column."""


class StringFilter(Filter):
    """Free-text field matching a string column."""


FILTER_TYPES: Final[dict[str, type[Filter]]] = {
    cls.TYPE: cls for cls in (CategoryFilter, ChartRangeFilter, DateRangeFilter, NumberRangeFilter, StringFilter)
}
