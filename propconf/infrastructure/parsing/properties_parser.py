"""Line-oriented parser for `.properties` configuration text.

Turns `key=value` lines into `ConfigurationEntry` objects:

- blank lines and lines starting with '#' are skipped,
- the key is everything before the first '=', with '.' rewritten to ':',
- the value is everything after it, stripped and unquoted when wrapped
  in exactly one pair of double quotes.

A line without '=' (or with nothing before it) raises PropertiesFormatError.
"""

import logging
import re
from typing import Iterator, Optional, Tuple, Union

from propconf.domain.errors import PropertiesFormatError
from propconf.domain.models.common import (
    ASSIGNMENT,
    COMMENT_PREFIX,
    KEY_DELIMITER,
    QUOTE,
    SOURCE_KEY_DELIMITER,
    ConfigKey,
    ConfigValue,
    LineNumber,
    RawKey,
    RawValue,
)
from propconf.domain.models.configuration import ConfigurationEntry, ConfigurationMap

logger = logging.getLogger(__name__)

# utf-8-sig drops a leading byte order mark and is plain UTF-8 otherwise
SOURCE_ENCODING = "utf-8-sig"

# Only \n, \r\n and \r end a line (\f, \x85 and \u2028 belong to the value)
_LINE_BREAK = re.compile(r"\r\n|\r|\n")


def decode_source(content: Union[str, bytes]) -> str:
    """Returns source content as text, decoding bytes as UTF-8."""
    if isinstance(content, bytes):
        return content.decode(SOURCE_ENCODING)
    return content


def iter_lines(text: str) -> Iterator[Tuple[LineNumber, str]]:
    """Yields (line_number, line) for every physical line in text."""
    for index, line in enumerate(_LINE_BREAK.split(text), start=1):
        yield LineNumber(index), line


def tokenize_line(line: str, line_number: int, source: Optional[str] = None) -> Optional[Tuple[RawKey, RawValue]]:
    """Splits a line into its raw key and raw value.

    Args:
        line: One physical line of the source.
        line_number: 1-based number of the line, used in error reports.
        source: Optional name of the source, used in error reports.

    Returns:
        ``(raw_key, raw_value)``, or None for blank and comment lines.

    Raises:
        PropertiesFormatError: If the line has no '=' or an empty key.
    """
    stripped = line.strip()
    if not stripped or stripped.startswith(COMMENT_PREFIX):
        return None

    separator = stripped.find(ASSIGNMENT)
    if separator < 0:
        raise PropertiesFormatError("missing key/value delimiter", line_number, line, source)

    raw_key = stripped[:separator].strip()
    if not raw_key:
        raise PropertiesFormatError("empty key", line_number, line, source)

    return RawKey(raw_key), RawValue(stripped[separator + 1:])


def normalize_key(raw_key: str) -> ConfigKey:
    """Rewrites a dotted source key into a hierarchical key. Casing is kept."""
    return ConfigKey(raw_key.replace(SOURCE_KEY_DELIMITER, KEY_DELIMITER))


def unquote_value(raw_value: str) -> ConfigValue:
    """Strips outer whitespace and one enclosing pair of double quotes.

    Unpaired quotes and quotes inside the value are kept as literal characters.
    """
    value = raw_value.strip()
    if len(value) >= 2 and value.startswith(QUOTE) and value.endswith(QUOTE):
        return ConfigValue(value[1:-1])
    return ConfigValue(value)


def parse_entries(text: str, source: Optional[str] = None) -> Iterator[ConfigurationEntry]:
    """Yields one entry per key/value line of text, in source order."""
    for line_number, line in iter_lines(text):
        token = tokenize_line(line, line_number, source)
        if token is None:
            continue
        raw_key, raw_value = token
        yield ConfigurationEntry(normalize_key(raw_key), unquote_value(raw_value), line_number)


def parse_properties(content: Union[str, bytes], source: Optional[str] = None) -> ConfigurationMap:
    """Parses a complete .properties document.

    Args:
        content: The document as text, or as UTF-8 encoded bytes.
        source: Optional name of the document, used in error reports.

    Returns:
        A read-only ConfigurationMap of every entry in the document.

    Raises:
        PropertiesFormatError: On the first malformed line. Nothing is returned.
    """
    data = ConfigurationMap(parse_entries(decode_source(content), source))
    logger.debug(f"Parsed {len(data)} entries from {source or 'stream'}")
    return data
