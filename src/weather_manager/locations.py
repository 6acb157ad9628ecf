"""In-memory registry of named locations.

Entries keep insertion order and names are not deduplicated: adding
``CityA`` twice stores two records, and removing ``CityA`` drops both.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from weather_manager.schemas import Location


class LocationView:
    """Read-only, restartable view over a registry's current locations.

    Every iteration walks the registry from the start, so the same view can be
    listed more than once and reflects later mutations. An empty view is falsy.
    """

    def __init__(self, locations: list[Location]) -> None:
        self._locations = locations

    def __iter__(self) -> Iterator[Location]:
        return iter(self._locations)

    def __len__(self) -> int:
        return len(self._locations)

    def __bool__(self) -> bool:
        return bool(self._locations)

    def __repr__(self) -> str:
        return f"LocationView({list(self._locations)!r})"


class LocationRegistry:
    """Ordered collection of :class:`Location` records."""

    def __init__(self, locations: Iterable[Location] = ()) -> None:
        self._locations: list[Location] = list(locations)

    def add(self, location: Location) -> None:
        """Append a location. Duplicate names are allowed."""
        self._locations.append(location)

    def remove(self, name: str) -> int:
        """Remove every location whose name equals ``name``.

        Returns:
            Number of entries removed; 0 means the name was not found and the
            registry is unchanged.
        """
        kept = [loc for loc in self._locations if loc.name != name]
        removed = len(self._locations) - len(kept)
        if removed:
            self._locations[:] = kept
        return removed

    def list(self) -> LocationView:
        """Return a view of all locations in insertion order."""
        return LocationView(self._locations)

    def find(self, name: str) -> list[Location]:
        """Return every location registered under ``name``."""
        return [loc for loc in self._locations if loc.name == name]

    def __iter__(self) -> Iterator[Location]:
        return iter(self._locations)

    def __len__(self) -> int:
        return len(self._locations)


def format_location(location: Location) -> str:
    """One-line display form used by the CLI."""
    return (
        f"Name: {location.name}, "
        f"Latitude: {location.latitude:g}, "
        f"Longitude: {location.longitude:g}"
    )
