"""Configuration provider backed by a `.properties` stream.

`PropertiesConfigurationSource` describes where the properties live (a path,
whether the file may be missing, and the file system to read it through);
`PropertiesConfigurationProvider` loads that source once and serves
case-insensitive lookups over the resulting read-only map.
"""

import enum
import logging
import re
from dataclasses import dataclass, field
from typing import IO, Iterable, List, Optional, Tuple, Union

from propconf.domain.errors import ProviderStateError
from propconf.domain.interfaces.config import ConfigurationProvider
from propconf.domain.interfaces.filesystem import FileSystem
from propconf.domain.models.common import KEY_DELIMITER, ConfigKey, ConfigValue, FilePath
from propconf.domain.models.configuration import ConfigurationEntry, ConfigurationMap, fold_key
from propconf.infrastructure.filesystem.local_fs import LocalFileSystem
from propconf.infrastructure.parsing.properties_parser import parse_properties

logger = logging.getLogger(__name__)

_INTEGER_SEGMENT = re.compile(r"^\d+$")


class ProviderState(enum.Enum):
    UNLOADED = "unloaded"
    LOADED = "loaded"
    FAILED = "failed"


@dataclass
class PropertiesConfigurationSource:
    """Describes a .properties file to be loaded by a provider.

    Attributes:
        path: Path of the .properties file.
        optional: When True a missing file loads as an empty configuration.
        file_system: Adapter used to open the file; local disk by default.
    """
    path: Optional[FilePath] = None
    optional: bool = False
    file_system: FileSystem = field(default_factory=LocalFileSystem)

    def build(self) -> "PropertiesConfigurationProvider":
        """Creates a fresh, unloaded provider for this source."""
        return PropertiesConfigurationProvider(self)


def child_key_sort_key(key: str) -> Tuple[Tuple[int, int, str], ...]:
    """Orders keys segment by segment: integers numerically first, then text case-insensitively."""
    parts = []
    for segment in key.split(KEY_DELIMITER):
        if _INTEGER_SEGMENT.match(segment):
            parts.append((0, int(segment), ""))
        else:
            parts.append((1, 0, fold_key(segment)))
    return tuple(parts)


class PropertiesConfigurationProvider(ConfigurationProvider):
    """Read-only configuration provider over a .properties source.

    A provider loads exactly once. After a successful load it is LOADED and
    serves lookups; after a failed load it is FAILED and holds no values.
    Either way a second load raises ProviderStateError: build a new
    provider to reload.
    """

    def __init__(self, source: Optional[PropertiesConfigurationSource] = None):
        self.source = source or PropertiesConfigurationSource()
        self._data = ConfigurationMap()
        self._state = ProviderState.UNLOADED

    @property
    def state(self) -> ProviderState:
        return self._state

    @property
    def data(self) -> ConfigurationMap:
        """The loaded map. Empty until a load succeeds."""
        return self._data

    # --- Loading ---

    def load(self) -> None:
        """Opens the source path through its file system and loads it.

        Raises:
            ProviderStateError: If this provider was already loaded.
            ValueError: If the source has no path.
            FileNotFoundError: If the file is missing and the source is not optional.
            PropertiesFormatError: If a line is malformed.
        """
        self._ensure_unloaded()
        path = self.source.path
        if not path:
            self._state = ProviderState.FAILED
            raise ValueError("PropertiesConfigurationSource has no path to load from.")

        file_system = self.source.file_system
        if not file_system.file_exists(path):
            if self.source.optional:
                logger.info(f"Optional properties file not found, loading empty configuration: {path}")
                self._publish(ConfigurationMap())
                return
            self._state = ProviderState.FAILED
            logger.error(f"Properties file not found: {path}")
            raise FileNotFoundError(f"The configuration file '{path}' was not found and is not optional.")

        try:
            stream = file_system.open_binary(path)
        except Exception:
            self._state = ProviderState.FAILED
            raise
        with stream:
            self._load(stream, str(path))

    def load_stream(self, stream: IO) -> None:
        """Loads configuration from an already open stream.

        The stream may yield bytes (decoded as UTF-8) or text. It is not closed.

        Raises:
            ProviderStateError: If this provider was already loaded.
            PropertiesFormatError: If a line is malformed; no values are kept.
        """
        self._ensure_unloaded()
        self._load(stream, self.source.path)

    def _load(self, stream: IO, source_name: Optional[str]) -> None:
        try:
            content: Union[str, bytes] = stream.read()
            data = parse_properties(content, source_name)
        except Exception as e:
            self._state = ProviderState.FAILED
            logger.error(f"Failed to load properties from {source_name or 'stream'}: {e}")
            raise
        self._publish(data)

    def _publish(self, data: ConfigurationMap) -> None:
        self._data = data
        self._state = ProviderState.LOADED
        logger.debug(f"Loaded {len(data)} configuration entries from {self.source.path or 'stream'}")

    def _ensure_unloaded(self) -> None:
        if self._state is not ProviderState.UNLOADED:
            raise ProviderStateError(
                f"Provider is already {self._state.value}; create a new provider to load again."
            )

    # --- Lookup ---

    def try_get(self, key: str) -> Tuple[bool, Optional[ConfigValue]]:
        return self._data.try_get(key)

    def keys(self) -> List[ConfigKey]:
        return list(self._data)

    def entries(self) -> List[ConfigurationEntry]:
        return self._data.entries()

    def get_child_keys(self, earlier_keys: Iterable[str], parent_path: Optional[str] = None) -> List[str]:
        """Returns the immediate child segments below parent_path, merged with earlier_keys.

        Args:
            earlier_keys: Child keys already collected (e.g., from other providers).
            parent_path: Hierarchical key of the parent section; None for the root.

        Returns:
            Earlier keys and child segments found here, de-duplicated
            case-insensitively (first spelling wins) and sorted.
        """
        # Compared per segment: casefold can change a segment's length ('ß' -> 'ss')
        parent = [] if parent_path is None else [fold_key(s) for s in parent_path.split(KEY_DELIMITER)]
        depth = len(parent)
        seen = {}
        candidates = list(earlier_keys)
        for entry in self._data.entries():
            segments = entry.segments
            if len(segments) > depth and [fold_key(s) for s in segments[:depth]] == parent:
                candidates.append(segments[depth])
        for child in candidates:
            seen.setdefault(fold_key(child), child)
        return sorted(seen.values(), key=child_key_sort_key)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(path={self.source.path!r}, state={self._state.value})"
