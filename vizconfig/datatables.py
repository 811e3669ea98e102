"""Pass-through holder for a DataTable payload.

The payload already follows the client library's DataTable literal format
(`{"cols": [...], "rows": [...]}`); this module does not build or reshape
rows and columns.
"""

from __future__ import annotations

import copy
from collections.abc import Mapping
from typing import Any

from . import codec
from .exceptions import InvalidConfigValue


class DataTable:
    """Read-only wrapper around a DataTable literal."""

    __slots__ = ("_payload",)

    def __init__(self, payload: Mapping[str, Any]) -> None:
        """Wrap a payload.

        Args:
            payload: Mapping with a `cols` list and an optional `rows` list.

        Raises:
            InvalidConfigValue: When the payload is not a mapping with a `cols` list.
        """

        if not isinstance(payload, Mapping) or not isinstance(payload.get("cols"), list):
            raise InvalidConfigValue(operation="DataTable::__init__", expected="mapping", extra="with a 'cols' list")
        if "rows" in payload and not isinstance(payload["rows"], list):
            raise InvalidConfigValue(operation="DataTable::__init__", expected="mapping", extra="with a 'rows' list")
        self._payload: dict[str, Any] = copy.deepcopy(dict(payload))

    @property
    def column_count(self) -> int:
        return len(self._payload["cols"])

    @property
    def row_count(self) -> int:
        return len(self._payload.get("rows", []))

    def to_map(self) -> dict[str, Any]:
        return copy.deepcopy(self._payload)

    def to_json(self) -> str:
        return codec.dumps(self._payload)
