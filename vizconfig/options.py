"""A flat option store with a fixed, declared vocabulary.

The bag does no type checking of its own. Callers validate first (see
`vizconfig.validators`); the bag only guarantees that nothing outside the
declared vocabulary is ever stored.
"""

from __future__ import annotations

import copy
import logging
from collections.abc import Iterable, Iterator, Mapping
from typing import Any

from . import codec
from .exceptions import InvalidInput, UnknownOption

logger = logging.getLogger(__name__)


class OptionBag:
    """Mapping from declared option names to their current values."""

    __slots__ = ("_declared", "_values", "_owner")

    def __init__(self, declared_keys: Iterable[str], *, owner: str = "") -> None:
        """Declare the vocabulary for this bag.

        Args:
            declared_keys: Every option name the bag will ever accept.
            owner: Owner type name used in error messages.
        """

        self._declared: frozenset[str] = frozenset(declared_keys)
        self._values: dict[str, Any] = {}
        self._owner = owner

    @property
    def declared_keys(self) -> frozenset[str]:
        return self._declared

    def set(self, key: str, value: Any) -> None:
        """Insert or overwrite a single option.

        Raises:
            UnknownOption: When key is not in the declared vocabulary. The bag is unchanged.
        """

        if not isinstance(key, str) or key not in self._declared:
            raise UnknownOption(option=key, allowed=self._declared, owner=self._owner)
        self._values[key] = value

    def set_many(self, pairs: Mapping[str, Any]) -> None:
        """Apply `set` to each pair in order, failing fast on the first unknown key.

        Keys applied before the failing key stay applied.

        Raises:
            InvalidInput: When pairs is not a mapping or is empty.
            UnknownOption: On the first key outside the declared vocabulary.
        """

        if not isinstance(pairs, Mapping) or len(pairs) == 0:
            raise InvalidInput(
                operation=f"{self._owner or 'OptionBag'}::set_many",
                expected="mapping",
                extra="which is non-empty",
            )
        for key, value in pairs.items():
            self.set(key, value)
        logger.debug("%s merged options %s", self._owner or "OptionBag", sorted(pairs))

    def get(self, key: str) -> Any:
        """Return the stored value for key.

        Raises:
            UnknownOption: When key has never been set, even if it is declared.
        """

        try:
            return self._values[key]
        except (KeyError, TypeError):
            raise UnknownOption(option=key, allowed=self._declared, owner=self._owner) from None

    def snapshot(self) -> dict[str, Any]:
        """Return a deep copy of all stored values; later writes are not observed."""

        return copy.deepcopy(self._values)

    def to_json(self) -> str:
        return codec.dumps(self._values)

    def __contains__(self, key: object) -> bool:
        return key in self._values

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[str]:
        return iter(tuple(self._values))

    def __repr__(self) -> str:
        return f"OptionBag(owner={self._owner!r}, values={self._values!r})"
