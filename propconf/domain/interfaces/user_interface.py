"""Interface for interacting with the user (output only).

Defines the contract for displaying values, entry listings, errors,
warnings and informational messages, allowing different UI implementations.
"""

import abc
from typing import Any, Iterable

from propconf.domain.models.configuration import ConfigurationEntry


class UserInterface(abc.ABC):
    """Abstract Base Class for user interaction."""

    @abc.abstractmethod
    def display_value(self, value: str, **kwargs: Any) -> None:
        """Displays a single configuration value, unadorned.

        Args:
            value: The value to print.
            **kwargs: Additional arguments for formatting.
        """
        pass

    @abc.abstractmethod
    def display_entries(self, entries: Iterable[ConfigurationEntry], **kwargs: Any) -> None:
        """Displays a listing of configuration entries.

        Args:
            entries: Entries to render, in the order given.
            **kwargs: Additional arguments (e.g., title).
        """
        pass

    @abc.abstractmethod
    def display_keys(self, keys: Iterable[str], **kwargs: Any) -> None:
        """Displays a list of keys or key segments, one per line."""
        pass

    @abc.abstractmethod
    def display_error(self, error_message: str, **kwargs: Any) -> None:
        """Displays an error message to the user.

        Args:
            error_message: The error message string.
            **kwargs: Additional arguments for formatting.
        """
        pass

    @abc.abstractmethod
    def display_warning(self, warning_message: str, **kwargs: Any) -> None:
        """Displays a warning message to the user."""
        pass

    @abc.abstractmethod
    def display_info(self, info_message: str, **kwargs: Any) -> None:
        """Displays an informational message to the user.

        Args:
            info_message: The informational message string.
            **kwargs: Additional arguments for formatting.
        """
        pass
