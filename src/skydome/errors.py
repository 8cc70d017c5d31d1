"""Error handling utilities for sky dome rendering."""

import sys
import traceback
from typing import Optional


class SkyDomeError(Exception):
    """Base exception for skydome-specific errors."""

    def __init__(self, message: str, suggestions: Optional[list[str]] = None):
        """Initialize with message and optional suggestions.

        Args:
            message: Error description
            suggestions: Optional list of actionable suggestions
        """
        self.message = message
        self.suggestions = suggestions or []
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with suggestions."""
        formatted = f"{self.message}"
        if self.suggestions:
            formatted += "\n\nSuggestions:"
            for suggestion in self.suggestions:
                formatted += f"\n  - {suggestion}"
        return formatted


class BodyNotFoundError(SkyDomeError, ValueError):
    """Raised when a body identifier is not in the catalog."""

    def __init__(self, body_id: str, available_bodies: list[str]):
        message = f"Unknown body: '{body_id}'"
        suggestions = [
            f"Available bodies: {', '.join(sorted(available_bodies))}",
            "Check spelling (body names are case-insensitive)",
        ]
        super().__init__(message, suggestions)


class TimeParseError(SkyDomeError, ValueError):
    """Raised when UTC time cannot be parsed."""

    def __init__(self, utc_time: str):
        message = f"Invalid UTC time format: '{utc_time}'"
        suggestions = [
            "Use ISO-8601 format with 'Z' suffix for UTC (e.g., '2024-01-15T18:00:00Z')",
            "Omit the option to use the current time",
            "Example: --utc-time 2024-01-15T18:00:00Z",
        ]
        super().__init__(message, suggestions)


class ObserverLocationError(SkyDomeError, ValueError):
    """Raised when observer coordinates fall outside the valid ranges."""

    def __init__(self, latitude: float, longitude: float):
        message = f"Invalid observer location: latitude={latitude}, longitude={longitude}"
        suggestions = [
            "Latitude must be within [-90, 90] degrees",
            "Longitude must be within (-180, 180] degrees",
            "Use --city to pick a known location instead",
        ]
        super().__init__(message, suggestions)


class CityNotFoundError(SkyDomeError, ValueError):
    """Raised when a city name is not in the built-in table."""

    def __init__(self, name: str, close_matches: list[str]):
        message = f"Unknown city: '{name}'"
        suggestions = []
        if close_matches:
            suggestions.append(f"Did you mean: {', '.join(close_matches)}?")
        suggestions.append("Pass --lat and --lon to use an arbitrary location")
        super().__init__(message, suggestions)


class EphemerisLoadError(SkyDomeError):
    """Raised when the ephemeris kernel cannot be loaded."""

    def __init__(self, kernel: str, reason: str):
        message = f"Could not load ephemeris kernel '{kernel}': {reason}"
        suggestions = [
            "Check network access for the first download, or copy the file into --data-dir",
            "Pass --ephemeris to select a different kernel (e.g. de440s.bsp)",
        ]
        super().__init__(message, suggestions)


def print_error(error: Exception) -> None:
    """Write the error, with any suggestions, to stderr."""
    print(f"Error: {error}", file=sys.stderr)


def handle_error(error: Exception, context: Optional[str] = None) -> int:
    """Report an error and return the process exit code.

    Domain errors are reported by message alone; anything else also gets
    the active traceback.

    Args:
        error: Exception that occurred
        context: Optional description of what was being attempted

    Returns:
        Exit code (1 for error)
    """
    if context:
        print(f"Error while {context}:", file=sys.stderr)

    print_error(error)
    if not isinstance(error, SkyDomeError):
        traceback.print_exc(file=sys.stderr)

    return 1
