"""Exceptions raised by the core operations.

The CLI is the only place that turns these into messages and exit codes.
"""

from __future__ import annotations


class WeatherManagerError(Exception):
    """Base exception for weather-manager errors."""


class VariableNotFoundError(WeatherManagerError, KeyError):
    """Raised when a variable lookup or removal targets an undefined name."""

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"Variable {self.name} not found."


class RequestError(WeatherManagerError):
    """Raised when an HTTP request fails in transport or with a non-2xx status."""

    def __init__(self, message: str, url: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.url = url
        self.status_code = status_code


class ExportError(WeatherManagerError, OSError):
    """Raised when an export file cannot be opened or written."""

    def __init__(self, message: str, path: str) -> None:
        super().__init__(message)
        self.path = path

    def __str__(self) -> str:
        return str(self.args[0])
