"""Chart base class: named option setters over a validated OptionBag.

Every user-facing setter validates its input and then writes to the chart's
OptionBag. Setters that take a sub-configuration object (Legend, Tooltip,
...) merge that object's `to_map()` into the bag through the trusted path,
so each object decides the top-level key it contributes.

`set_options` is the bulk entry point. It dispatches through an explicit
`option name -> setter` table built once per class from `@option`
decorators, so every bulk write re-runs the matching setter's validation.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping, Sequence
from types import MappingProxyType
from typing import Any, ClassVar, Self, TypeVar

from vizconfig.configs import Animation, BackgroundColor, ChartArea, Legend, TextStyle, Tooltip
from vizconfig.datatables import DataTable
from vizconfig.events import Event
from vizconfig.exceptions import DataTableNotFound, InvalidConfigValue, UnknownOption
from vizconfig.options import OptionBag
from vizconfig.validators import (
    require_enum_member,
    require_instance,
    require_integer,
    require_non_empty_string,
    require_string_array,
)

from .capabilities import PngRenderable, supports_png
from .variants import VARIANTS, VariantSpec

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Any])

TITLE_POSITIONS: tuple[str, ...] = ("in", "out", "none")


def option(name: str) -> Callable[[F], F]:
    """Register the decorated method as the setter for option `name`."""

    def decorate(func: F) -> F:
        func.__option_name__ = name  # type: ignore[attr-defined]
        return func

    return decorate


def _collect_setters(cls: type) -> dict[str, Callable[..., Any]]:
    """Map option names to the setter each resolves to on `cls`.

    Decorators mark the option name once; an undecorated override of the same
    method name in a subclass is what `cls` dispatches to.
    """

    attr_names: dict[str, str] = {}
    for klass in reversed(cls.__mro__):
        for attr_name, attr in vars(klass).items():
            name = getattr(attr, "__option_name__", None)
            if name is not None:
                attr_names[name] = attr_name
    return {name: getattr(cls, attr_name) for name, attr_name in attr_names.items()}


class Chart:
    """Parent of all chart variants.

    Concrete variants pass `variant=<tag>` in the class statement; the tag
    selects their vocabulary from the variant table. Class creation fails
    when the registered setters and the table's vocabulary disagree.
    """

    TYPE: ClassVar[str | None] = None
    VARIANT: ClassVar[VariantSpec | None] = None
    _setters: ClassVar[Mapping[str, Callable[..., Any]]] = MappingProxyType({})

    def __init_subclass__(cls, variant: str | None = None, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        setters = _collect_setters(cls)
        cls._setters = MappingProxyType(setters)
        if variant is None:
            return

        spec = VARIANTS.chart(variant)
        missing = spec.options - setters.keys()
        extra = setters.keys() - spec.options
        if missing or extra:
            raise TypeError(
                f"{cls.__name__} setters do not match the {variant} vocabulary: "
                f"missing={sorted(missing)} unexpected={sorted(extra)}"
            )
        if spec.png != issubclass(cls, PngRenderable):
            raise TypeError(f"{cls.__name__} PNG capability does not match the {variant} variant table (png={spec.png}).")
        cls.TYPE = variant
        cls.VARIANT = spec

    def __init__(self, label: str, datatable: DataTable | None = None, **options: Any) -> None:
        """Build a chart with the given label.

        Args:
            label: Identifying label; must be a unique, non-empty string.
            datatable: Optional DataTable to assign immediately.
            **options: Initial options, applied through `set_options`.

        Raises:
            TypeError: When instantiating a class that is not a registered variant.
            InvalidConfigValue: When the label or any option value is invalid.
            UnknownOption: When an option is outside the variant's vocabulary.
        """

        if self.VARIANT is None:
            raise TypeError(f"{type(self).__name__} is not a chart variant; use one of {sorted(VARIANTS.charts)}.")
        self.label: str = require_non_empty_string(
            label,
            operation=self._op("__init__"),
            extra="which is unique and non-empty",
        )
        self._datatable: DataTable | None = None
        self._events: list[Event] = []
        self._options = OptionBag(self.VARIANT.options, owner=self.TYPE or type(self).__name__)
        if datatable is not None:
            self.datatable(datatable)
        if options:
            self.set_options(options)

    def _op(self, func: str) -> str:
        return f"{self.TYPE or type(self).__name__}::{func}"

    def _merge(self, pairs: Mapping[str, Any]) -> Self:
        """Trusted internal write for sub-configuration maps; only the vocabulary is checked."""

        self._options.set_many(pairs)
        return self

    @property
    def vocabulary(self) -> tuple[str, ...]:
        return tuple(sorted(self._setters))

    def set_options(self, options: Mapping[str, Any]) -> Self:
        """Set many options at once, validating each through its named setter.

        Args:
            options: Mapping of camelCase option names to values.

        Returns:
            This chart, for chaining.

        Raises:
            InvalidConfigValue: When options is not a non-empty mapping, or a value fails its setter.
            UnknownOption: On the first option outside this chart's vocabulary.
        """

        if not isinstance(options, Mapping) or len(options) == 0:
            raise InvalidConfigValue(operation=self._op("set_options"), expected="mapping", extra="which is non-empty")
        logger.debug("%s(%r) applying options %s", self.TYPE, self.label, list(options))
        for name, value in options.items():
            setter = self._setters.get(name)
            if setter is None:
                raise UnknownOption(option=name, allowed=self._setters, owner=f"{self.TYPE}::set_options")
            setter(self, value)
        return self

    def get_option(self, name: str) -> Any:
        """Return a stored option value.

        Raises:
            UnknownOption: When the option has not been set.
        """

        return self._options.get(name)

    def get_options(self) -> dict[str, Any]:
        return self._options.snapshot()

    def options_to_json(self) -> str:
        return self._options.to_json()

    # Data table

    @option("datatable")
    def datatable(self, datatable: DataTable) -> Self:
        """Assign the DataTable used by this chart."""

        self._datatable = require_instance(datatable, DataTable, operation=self._op("datatable"))
        return self

    def has_datatable(self) -> bool:
        return self._datatable is not None

    def get_datatable(self) -> DataTable:
        """Return the assigned DataTable.

        Raises:
            DataTableNotFound: When no DataTable was ever assigned.
        """

        if self._datatable is None:
            raise DataTableNotFound(owner_type=self.TYPE or type(self).__name__, label=self.label)
        return self._datatable

    def get_datatable_json(self) -> str:
        return self.get_datatable().to_json()

    # Events

    @option("events")
    def events(self, events: Sequence[Event]) -> Self:
        """Register client callbacks for chart events.

        Args:
            events: Event instances (Select, Ready, MouseOver, ...).

        Raises:
            InvalidConfigValue: When events is not a list, or an element is not an Event.
                Events before the offending element stay registered.
        """

        if isinstance(events, (str, bytes)) or not isinstance(events, Sequence):
            raise InvalidConfigValue(operation=self._op("events"), expected="array")
        for event in events:
            self._events.append(require_instance(event, Event, operation=self._op("events")))
        return self

    def has_events(self) -> bool:
        return len(self._events) > 0

    def get_events(self) -> tuple[Event, ...]:
        return tuple(self._events)

    # Shared options

    @option("animation")
    def animation(self, animation: Animation) -> Self:
        return self._merge(require_instance(animation, Animation, operation=self._op("animation")).to_map())

    @option("backgroundColor")
    def background_color(self, background_color: BackgroundColor) -> Self:
        """Fill and border of the main chart area."""

        value = require_instance(background_color, BackgroundColor, operation=self._op("background_color"))
        return self._merge(value.to_map())

    @option("chartArea")
    def chart_area(self, chart_area: ChartArea) -> Self:
        """Placement and size of the plotting area, excluding axes and legends."""

        return self._merge(require_instance(chart_area, ChartArea, operation=self._op("chart_area")).to_map())

    @option("colors")
    def colors(self, colors: Sequence[str]) -> Self:
        """Colors for chart elements, as HTML color strings like 'red' or '#004411'."""

        value = require_string_array(colors, operation=self._op("colors"), extra="with valid HTML colors")
        self._options.set("colors", list(value))
        return self

    @option("fontSize")
    def font_size(self, font_size: int) -> Self:
        """Default font size, in pixels, of all chart text."""

        self._options.set("fontSize", require_integer(font_size, operation=self._op("font_size")))
        return self

    @option("fontName")
    def font_name(self, font_name: str) -> Self:
        self._options.set("fontName", require_non_empty_string(font_name, operation=self._op("font_name")))
        return self

    @option("height")
    def height(self, height: int) -> Self:
        self._options.set("height", require_integer(height, operation=self._op("height")))
        return self

    @option("legend")
    def legend(self, legend: Legend) -> Self:
        return self._merge(require_instance(legend, Legend, operation=self._op("legend")).to_map())

    @option("title")
    def title(self, title: str) -> Self:
        """Text displayed above the chart."""

        self._options.set("title", require_non_empty_string(title, operation=self._op("title")))
        return self

    @option("titlePosition")
    def title_position(self, position: str) -> Self:
        """Where to place the title: 'in' or 'out' of the chart area, or 'none'."""

        value = require_enum_member(position, TITLE_POSITIONS, operation=self._op("title_position"))
        self._options.set("titlePosition", value)
        return self

    @option("titleTextStyle")
    def title_text_style(self, text_style: TextStyle) -> Self:
        value = require_instance(text_style, TextStyle, operation=self._op("title_text_style"))
        return self._merge(value.to_map("titleTextStyle"))

    @option("tooltip")
    def tooltip(self, tooltip: Tooltip) -> Self:
        return self._merge(require_instance(tooltip, Tooltip, operation=self._op("tooltip")).to_map())

    @option("width")
    def width(self, width: int) -> Self:
        self._options.set("width", require_integer(width, operation=self._op("width")))
        return self

    # Serialization

    def to_map(self) -> dict[str, Any]:
        """Return the chart's handle serialization (type, label, package and options)."""

        assert self.VARIANT is not None
        payload: dict[str, Any] = {
            "type": self.TYPE,
            "label": self.label,
            "class": self.VARIANT.viz_class,
            "package": self.VARIANT.package,
            "version": self.VARIANT.version,
            "options": self._options.snapshot(),
        }
        if supports_png(self):
            payload["pngOutput"] = self.get_png_output()  # type: ignore[attr-defined]
        return payload

    def payload(self) -> tuple[str, str, str]:
        """Return `(label, options_json, datatable_json)` for a renderer.

        Raises:
            DataTableNotFound: When no DataTable was assigned.
        """

        datatable_json = self.get_datatable_json()
        return self.label, self.options_to_json(), datatable_json

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.label!r})"

