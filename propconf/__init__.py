"""propconf: a `.properties` configuration provider.

Parses `key=value` property files into a flat, hierarchical
(`:`-delimited) configuration map with case-insensitive lookup.
"""

from propconf.domain.errors import PropertiesFormatError, ProviderStateError
from propconf.domain.models.configuration import ConfigurationEntry, ConfigurationMap
from propconf.infrastructure.parsing.properties_parser import parse_properties
from propconf.infrastructure.providers.properties_provider import (
    PropertiesConfigurationProvider,
    PropertiesConfigurationSource,
    ProviderState,
)

__version__ = "0.1.0"

__all__ = [
    "ConfigurationEntry",
    "ConfigurationMap",
    "PropertiesConfigurationProvider",
    "PropertiesConfigurationSource",
    "PropertiesFormatError",
    "ProviderState",
    "ProviderStateError",
    "parse_properties",
]
