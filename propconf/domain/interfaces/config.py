"""Interface for configuration providers.

Defines the contract for retrieving configuration values from a loaded
source. Providers are read-only: values are published once by `load` and
never mutated afterwards.
"""

import abc
from typing import Iterable, List, Optional, Tuple

from propconf.domain.models.common import ConfigKey, ConfigValue
from propconf.domain.models.configuration import ConfigurationEntry


class ConfigurationProvider(abc.ABC):
    """Abstract Base Class for retrieving configuration values."""

    @abc.abstractmethod
    def try_get(self, key: str) -> Tuple[bool, Optional[ConfigValue]]:
        """Looks up a configuration value by key.

        Args:
            key: The hierarchical configuration key (e.g., 'Data:Inventory:Provider').

        Returns:
            A ``(found, value)`` pair; value is None when not found.
        """
        pass

    @abc.abstractmethod
    def load(self) -> None:
        """Loads the configuration from its source."""
        pass

    @abc.abstractmethod
    def get_child_keys(self, earlier_keys: Iterable[str], parent_path: Optional[str] = None) -> List[str]:
        """Returns the immediate child segments below parent_path, merged with earlier_keys."""
        pass

    def get(self, key: str, default: Optional[str] = None) -> Optional[str]:
        """Gets a configuration value by key, or default if the key is not found."""
        found, value = self.try_get(key)
        return value if found else default

    @abc.abstractmethod
    def keys(self) -> List[ConfigKey]:
        """Returns all keys currently held by the provider."""
        pass

    @abc.abstractmethod
    def entries(self) -> List[ConfigurationEntry]:
        """Returns all entries currently held by the provider, in source order."""
        pass
