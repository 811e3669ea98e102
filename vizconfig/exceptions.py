"""Error taxonomy for chart and dashboard configuration.

Every error is raised synchronously at the point of violation. None of them
are transient: they describe a caller mistake and are never retried.
"""

from __future__ import annotations

from collections.abc import Iterable


class VizConfigError(ValueError):
    """Base class for all configuration errors raised by vizconfig."""


class InvalidConfigValue(VizConfigError):
    """Raised when a setter receives a value that fails its validator."""

    def __init__(self, *, operation: str, expected: str, extra: str = "") -> None:
        """Initialize the error.

        Args:
            operation: Failing operation, usually `<TYPE>::<setter>`.
            expected: Description of the expected type or shape.
            extra: Optional human hint (for example the accepted values).
        """

        message = f"Invalid value for {operation}, must be type ({expected})"
        if extra:
            message = f"{message} {extra}"
        super().__init__(f"{message}.")
        self.operation = operation
        self.expected = expected
        self.extra = extra


class InvalidInput(InvalidConfigValue):
    """Raised when a bulk option write receives something other than a non-empty mapping."""


class UnknownOption(VizConfigError):
    """Raised when an option name is not part of the declared vocabulary."""

    def __init__(self, *, option: object, allowed: Iterable[str], owner: str = "") -> None:
        """Initialize the error.

        Args:
            option: The offending option name.
            allowed: The full declared vocabulary of the owner.
            owner: Optional owner type used as a message prefix.
        """

        self.option = option
        self.allowed = tuple(sorted(allowed))
        self.owner = owner
        prefix = f"{owner}: " if owner else ""
        super().__init__(
            f"{prefix}{option!r} is not a valid option, must be one of [ {' | '.join(self.allowed)} ]."
        )


class DataTableNotFound(VizConfigError):
    """Raised when a datatable-dependent read happens before a DataTable was assigned."""

    def __init__(self, *, owner_type: str, label: str) -> None:
        super().__init__(f"{owner_type}('{label}') has no DataTable.")
        self.owner_type = owner_type
        self.label = label


class InvalidElementId(VizConfigError):
    """Raised when an HTML container id is empty or contains whitespace."""

    def __init__(self, *, element_id: object) -> None:
        super().__init__(f"{element_id!r} is not a valid HTML element id, must be a non-empty string without spaces.")
        self.element_id = element_id
