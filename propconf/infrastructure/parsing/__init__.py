"""Parsing of .properties text into configuration entries."""
