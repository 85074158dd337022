"""Error types for tonecolor conversions."""

from typing import Optional


class ToneColorError(Exception):
    """Base exception for tonecolor-specific errors."""

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


class TemperatureOutOfRangeError(ToneColorError):
    """Raised when a color temperature is outside the supported domain."""

    def __init__(self, temperature_k: float, min_k: float, max_k: float):
        self.temperature_k = temperature_k
        self.min_k = min_k
        self.max_k = max_k
        message = (
            f"Color temperature {temperature_k:g}K is outside the supported "
            f"range [{min_k:g}K, {max_k:g}K]"
        )
        suggestions = [
            f"Clamp the temperature to [{min_k:g}, {max_k:g}] before converting",
            "color_temperature_to_xyz() returns (0, 0, 0) instead of raising",
        ]
        super().__init__(message, suggestions)


class UnknownAdaptationTransformError(ToneColorError):
    """Raised when a chromatic adaptation transform name is not recognized."""

    def __init__(self, name: str, available: list[str]):
        self.name = name
        message = f"Unknown chromatic adaptation transform: '{name}'"
        suggestions = [
            f"Available transforms: {', '.join(sorted(available))}",
            "Check spelling (transform names are case-insensitive)",
        ]
        super().__init__(message, suggestions)
