"""Named weather variables (e.g. ``Temperature = 75``)."""

from __future__ import annotations

from collections.abc import Iterator

from weather_manager.errors import VariableNotFoundError


class VariableStore:
    """Mapping of variable name to float value.

    Lookups and removals of undefined names raise
    :class:`~weather_manager.errors.VariableNotFoundError`, so a stored ``0.0``
    is never confused with a missing variable.
    """

    def __init__(self) -> None:
        self._values: dict[str, float] = {}

    def define(self, name: str, value: float) -> None:
        """Add a variable or overwrite its current value."""
        self._values[name] = float(value)

    def get(self, name: str) -> float:
        try:
            return self._values[name]
        except KeyError:
            raise VariableNotFoundError(name) from None

    def remove(self, name: str) -> None:
        if name not in self._values:
            raise VariableNotFoundError(name)
        del self._values[name]

    def list(self) -> list[tuple[str, float]]:
        """All (name, value) pairs sorted by name. Empty when nothing is defined."""
        return sorted(self._values.items())

    def as_dict(self) -> dict[str, float]:
        """Copy of the current values, suitable for :mod:`weather_manager.export`."""
        return dict(self._values)

    def __contains__(self, name: object) -> bool:
        return name in self._values

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._values))

    def __len__(self) -> int:
        return len(self._values)


def format_value(value: float) -> str:
    """Shortest general form: ``75.0`` -> ``75``, ``0.5`` -> ``0.5``."""
    return f"{value:g}"


def format_variable(name: str, value: float) -> str:
    """One-line display form used by the menu and the CLI."""
    return f"Variable: {name}, Value: {format_value(value)}"
