"""Configuration entries and the read-only, case-insensitive map built from them."""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, List, Optional, Tuple

from propconf.domain.models.common import ConfigKey, ConfigValue, LineNumber, KEY_DELIMITER


@dataclass(frozen=True)
class ConfigurationEntry:
    """A single normalized key/value pair and the source line it came from."""
    key: ConfigKey
    value: ConfigValue
    line_number: Optional[LineNumber] = None

    @property
    def segments(self) -> List[str]:
        """The key split into its hierarchical segments."""
        return self.key.split(KEY_DELIMITER)


def fold_key(key: str) -> str:
    """Returns the form a key is stored and looked up under."""
    return key.casefold()


class ConfigurationMap(Mapping):
    """Immutable mapping from hierarchical key to value.

    Lookups ignore case on every segment. Iteration yields keys with the
    casing of the line that last wrote them, in order of first appearance.
    Duplicate keys (including those differing only by case) keep the last
    value.
    """

    __slots__ = ("_entries",)

    def __init__(self, entries: Iterable[ConfigurationEntry] = ()):
        collected: Dict[str, ConfigurationEntry] = {}
        for entry in entries:
            collected[fold_key(entry.key)] = entry
        self._entries = collected

    def __getitem__(self, key: str) -> ConfigValue:
        return self._entries[fold_key(key)].value

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and fold_key(key) in self._entries

    def __iter__(self) -> Iterator[ConfigKey]:
        return (entry.key for entry in self._entries.values())

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({dict(self.items())!r})"

    def try_get(self, key: str) -> Tuple[bool, Optional[ConfigValue]]:
        """Looks a key up without raising.

        Args:
            key: Hierarchical key, compared case-insensitively.

        Returns:
            ``(True, value)`` when present, ``(False, None)`` otherwise.
        """
        entry = self._entries.get(fold_key(key))
        if entry is None:
            return False, None
        return True, entry.value

    def entries(self) -> List[ConfigurationEntry]:
        return list(self._entries.values())
