"""Core service for loading .properties files and answering questions about them.

Uses the FileSystem interface to reach the file, builds a fresh provider
for every load and returns plain results; presenting them is left to the
command handler.
"""

import logging
from typing import Callable, List, Optional, Tuple

# Domain Layer Imports
from propconf.domain.interfaces.config import ConfigurationProvider
from propconf.domain.interfaces.filesystem import FileSystem
from propconf.domain.models.common import ConfigValue, FilePath
from propconf.domain.models.configuration import ConfigurationEntry

# Infrastructure Layer Imports
from propconf.infrastructure.providers.properties_provider import PropertiesConfigurationSource

logger = logging.getLogger(__name__)

ProviderFactory = Callable[[FilePath, bool], ConfigurationProvider]


class ConfigurationService:
    """Orchestrates loading a properties file and querying the result."""

    def __init__(self, file_system: FileSystem, provider_factory: Optional[ProviderFactory] = None):
        """Initializes the ConfigurationService with its dependencies.

        Args:
            file_system: Adapter used to open properties files.
            provider_factory: Builds an unloaded provider for (path, optional).
                Defaults to a PropertiesConfigurationSource over file_system.
        """
        self.file_system = file_system
        self.provider_factory = provider_factory or self._build_properties_provider

    def _build_properties_provider(self, path: FilePath, optional: bool) -> ConfigurationProvider:
        return PropertiesConfigurationSource(path=path, optional=optional, file_system=self.file_system).build()

    def load(self, path: FilePath, optional: bool = False) -> ConfigurationProvider:
        """Builds a new provider for path and loads it.

        Raises:
            FileNotFoundError: If the file is missing and not optional.
            PropertiesFormatError: If the file contains a malformed line.
        """
        logger.info(f"Loading properties file: {path}")
        provider = self.provider_factory(path, optional)
        provider.load()
        return provider

    def get_value(self, path: FilePath, key: str) -> Tuple[bool, Optional[ConfigValue]]:
        """Loads path and looks key up in it."""
        return self.load(path).try_get(key)

    def list_entries(self, path: FilePath) -> List[ConfigurationEntry]:
        """Loads path and returns its entries in source order."""
        provider = self.load(path)
        return provider.entries()

    def child_keys(self, path: FilePath, parent_path: Optional[str] = None) -> List[str]:
        """Loads path and returns the child segments directly below parent_path."""
        return self.load(path).get_child_keys([], parent_path)

    def validate(self, path: FilePath) -> int:
        """Loads path and returns the number of entries; raises if it is malformed."""
        return len(self.load(path).keys())
