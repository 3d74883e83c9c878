"""Errors raised by the properties provider."""

from typing import Optional


class PropertiesFormatError(ValueError):
    """A line of a .properties source could not be parsed.

    Attributes:
        line_number: 1-based number of the offending line.
        line: The offending line as read from the source.
        reason: Short description of what is wrong with it.
    """

    def __init__(self, reason: str, line_number: int, line: str, source: Optional[str] = None):
        self.reason = reason
        self.line_number = line_number
        self.line = line
        self.source = source
        location = f"{source}, line {line_number}" if source else f"line {line_number}"
        super().__init__(f"Unrecognized line format ({reason}) at {location}: '{line.strip()}'")


class ProviderStateError(RuntimeError):
    """A provider was asked to load after it already loaded or failed."""
