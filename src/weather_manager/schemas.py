"""
Domain models for weather manager.

Pydantic models for records held in memory and passed to the HTTP clients.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Location(BaseModel):
    """A named geographic point."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Display name; not required to be unique")
    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)

    @property
    def coordinates(self) -> tuple[float, float]:
        """(latitude, longitude) pair."""
        return (self.latitude, self.longitude)
