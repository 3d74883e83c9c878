"""Defines common Value Objects used across the properties provider.

These objects represent simple values like configuration keys, file paths
and line numbers, ensuring consistency and type safety.
"""

from typing import NewType

# === Core Value Objects ===

# Using NewType for semantic clarity, although they are plain values at runtime.
ConfigKey = NewType("ConfigKey", str)         # Hierarchical key, segments joined by ':'
ConfigValue = NewType("ConfigValue", str)     # Unquoted string value
RawKey = NewType("RawKey", str)               # Key exactly as written before the '='
RawValue = NewType("RawValue", str)           # Everything after the first '='
LineNumber = NewType("LineNumber", int)       # 1-based line number in the source

# === File System Context ===
FilePath = NewType("FilePath", str)           # Path to a .properties file

# === Key Syntax ===
KEY_DELIMITER = ":"         # Hierarchical delimiter used in stored keys
SOURCE_KEY_DELIMITER = "."  # Segment delimiter used in .properties files
COMMENT_PREFIX = "#"
ASSIGNMENT = "="
QUOTE = '"'
