"""Dashboards: controls bound to the charts they drive."""

from __future__ import annotations

import logging
from typing import Any, ClassVar, Self

from vizconfig import codec
from vizconfig.validators import require_instance, require_non_empty_string

from .bindings import Binding, BindingRegistry
from .wrappers import ChartWrapper, ControlWrapper

logger = logging.getLogger(__name__)


class Dashboard:
    """A labelled set of control-to-chart bindings."""

    VERSION: ClassVar[str] = "1"
    VIZ_PACKAGE: ClassVar[str] = "controls"
    VIZ_CLASS: ClassVar[str] = "google.visualization.Dashboard"

    def __init__(self, label: str) -> None:
        """Build a dashboard with an identifying label.

        Raises:
            InvalidConfigValue: When label is not a non-empty string.
        """

        self.label: str = require_non_empty_string(
            label,
            operation="Dashboard::__init__",
            extra="which is unique and non-empty",
        )
        self._bindings = BindingRegistry()

    def bind(self, control: ControlWrapper, chart: ChartWrapper) -> Self:
        """Bind a control to a chart. Bindings keep insertion order and are never deduplicated.

        Raises:
            InvalidConfigValue: When the handles are not a ControlWrapper and a ChartWrapper.
        """

        require_instance(control, ControlWrapper, operation="Dashboard::bind")
        require_instance(chart, ChartWrapper, operation="Dashboard::bind")
        self._bindings.bind(control, chart)
        logger.debug("Dashboard(%r) bound %r to %r", self.label, control, chart)
        return self

    def get_bindings(self) -> tuple[Binding, ...]:
        return self._bindings.all()

    def has_bindings(self) -> bool:
        return len(self._bindings) > 0

    def bindings_to_json(self) -> str:
        return self._bindings.to_json()

    def to_map(self) -> dict[str, Any]:
        return {
            "label": self.label,
            "class": self.VIZ_CLASS,
            "package": self.VIZ_PACKAGE,
            "version": self.VERSION,
            "bindings": self._bindings.to_map(),
        }

    def to_json(self) -> str:
        return codec.dumps(self.to_map())

    def __repr__(self) -> str:
        return f"Dashboard({self.label!r})"
