"""Client-side chart events bound to named callback functions."""

from __future__ import annotations

from typing import Any, ClassVar, Final

from .validators import require_non_empty_string


class Event:
    """An event type paired with the name of a client-side callback function."""

    TYPE: ClassVar[str] = ""

    __slots__ = ("callback",)

    def __init__(self, callback: str) -> None:
        """Bind the event to a callback.

        Args:
            callback: Name of a client-side function invoked when the event fires.

        Raises:
            InvalidConfigValue: When callback is not a non-empty string.
        """

        self.callback = require_non_empty_string(
            callback,
            operation=f"{type(self).__name__}::__init__",
            extra="naming a client-side function",
        )

    def to_map(self) -> dict[str, Any]:
        return {"type": self.TYPE, "callback": self.callback}

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Event):
            return NotImplemented
        return self.TYPE == other.TYPE and self.callback == other.callback

    def __hash__(self) -> int:
        return hash((self.TYPE, self.callback))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.callback!r})"


class AnimationFinish(Event):
    TYPE = "animationfinish"


class Error(Event):
    TYPE = "error"


class MouseOver(Event):
    TYPE = "onmouseover"


class MouseOut(Event):
    TYPE = "onmouseout"


class Ready(Event):
    TYPE = "ready"


class Select(Event):
    TYPE = "select"


EVENT_TYPES: Final[dict[str, type[Event]]] = {
    cls.TYPE: cls for cls in (AnimationFinish, Error, MouseOver, MouseOut, Ready, Select)
}
