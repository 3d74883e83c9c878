"""Main entry point when executing propconf as a package.

This allows running the package using python -m propconf.
"""

from propconf.main import cli_entry_point

if __name__ == "__main__":
    cli_entry_point()
