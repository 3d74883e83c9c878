"""Configuration providers and the sources they are built from."""
