"""Ordered control-to-chart bindings."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any, Self

from vizconfig import codec


@dataclass(frozen=True, slots=True)
class Binding:
    """A control that filters or drives a chart.

    Args:
        control: Control handle; serialized through its own `to_map()`.
        chart: Chart handle; serialized through its own `to_map()`.
    """

    control: Any
    chart: Any

    def to_map(self) -> list[Any]:
        return [_handle_map(self.control), _handle_map(self.chart)]


def _handle_map(handle: Any) -> Any:
    to_map = getattr(handle, "to_map", None)
    return to_map() if callable(to_map) else handle


class BindingRegistry:
    """Append-only sequence of bindings in insertion order.

    Order is the client rendering order. Duplicate pairs are legal and kept.
    """

    __slots__ = ("_bindings",)

    def __init__(self) -> None:
        self._bindings: list[Binding] = []

    def bind(self, control: Any, chart: Any) -> Self:
        self._bindings.append(Binding(control=control, chart=chart))
        return self

    def all(self) -> tuple[Binding, ...]:
        return tuple(self._bindings)

    def to_map(self) -> list[list[Any]]:
        return [binding.to_map() for binding in self._bindings]

    def to_json(self) -> str:
        """Serialize as a JSON array of `[control, chart]` pairs."""

        return codec.dumps(self.to_map())

    def __len__(self) -> int:
        return len(self._bindings)

    def __iter__(self) -> Iterator[Binding]:
        return iter(self.all())
