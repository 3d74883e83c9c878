"""Main entry point for the propconf command line tool.

Sets up the Typer CLI application, performs dependency injection (Composition Root),
defines CLI commands, and delegates execution to the CommandHandler.
"""

import logging
import sys
from pathlib import Path
from typing import Any, Dict, Optional

import typer
from typing_extensions import Annotated

logger = logging.getLogger(__name__)

# --- Core Layer ---
from propconf.core.command_handler import CommandHandler
from propconf.core.services.configuration_service import ConfigurationService

# --- Infrastructure Layer ---
# Config
from propconf.infrastructure.config.settings import get_config, get_log_level, get_max_value_width, load_configuration, set_config
# UI
from propconf.infrastructure.cli.display import ConsoleDisplay
# FileSystem
from propconf.infrastructure.filesystem.local_fs import LocalFileSystem
# Monitoring
from propconf.infrastructure.monitoring.logger_setup import setup_logging


def configure_logging() -> None:
    """Applies the logging settings currently in effect."""
    setup_logging(
        log_level=get_log_level(),
        log_format=get_config('logging.format'),
        log_file=get_config('logging.file'),
    )


# --- Dependency Injection Container (Manual) ---

def create_dependencies() -> Dict[str, Any]:
    """Creates and wires up all dependencies for the application.

    This acts as the Composition Root.
    """
    dependencies: Dict[str, Any] = {}
    try:
        # 1. Load settings first, then logging based on them
        load_configuration()
        configure_logging()
        logger.info("Configuration and logging initialized.")

        # 2. Infrastructure adapters
        dependencies['ui'] = ConsoleDisplay(max_value_width=get_max_value_width())
        dependencies['file_system'] = LocalFileSystem()

        # 3. Core services
        dependencies['configuration_service'] = ConfigurationService(file_system=dependencies['file_system'])

        # 4. Command handler
        dependencies['command_handler'] = CommandHandler(
            configuration_service=dependencies['configuration_service'],
            ui=dependencies['ui'],
        )
        logger.debug("All dependencies initialized successfully.")
        return dependencies

    except Exception as e:
        logger.error(f"Fatal Error during application initialization: {e}", exc_info=True)
        print(f"FATAL ERROR during initialization: {e}", file=sys.stderr)
        sys.exit(1)


# --- Get Wired-up Dependencies ---
_dependencies: Dict[str, Any] = create_dependencies()

# --- Typer App Definition ---
app = typer.Typer(
    name="propconf",
    help="propconf: inspect .properties configuration files through a hierarchical, case-insensitive key namespace.",
    add_completion=False,
    no_args_is_help=True,
)

# Shared file argument
PropertiesFile = Annotated[
    Path,
    typer.Argument(exists=True, file_okay=True, dir_okay=False, readable=True,
                   help="Path to the .properties file.")
]


def _handler() -> CommandHandler:
    return _dependencies['command_handler']


# --- CLI Commands ---

@app.command()
def get(
    file: PropertiesFile,
    key: Annotated[str, typer.Argument(help="Hierarchical key, e.g. 'Data:Inventory:Provider' (case-insensitive).")],
):
    """Print the value stored under KEY."""
    raise typer.Exit(code=_handler().handle_get(str(file), key))


@app.command()
def show(file: PropertiesFile):
    """Show every entry of the file as a table."""
    raise typer.Exit(code=_handler().handle_show(str(file)))


@app.command()
def children(
    file: PropertiesFile,
    parent: Annotated[Optional[str], typer.Argument(help="Parent section key; the root when omitted.")] = None,
):
    """List the child key segments directly below PARENT."""
    raise typer.Exit(code=_handler().handle_children(str(file), parent))


@app.command()
def check(file: PropertiesFile):
    """Check that the file parses, reporting the first malformed line."""
    raise typer.Exit(code=_handler().handle_check(str(file)))


@app.callback()
def main_callback(
    log_level: Annotated[
        Optional[str],
        typer.Option("--log-level", "-l", help="Logging level (DEBUG, INFO, WARNING, ERROR).")
    ] = None,
):
    """propconf command line tool."""
    if log_level:
        set_config('logging.level', log_level)
        configure_logging()
        logger.debug(f"Log level overridden from the command line: {log_level}")


# --- Main Execution Guard ---

def cli_entry_point():
    """Function to be called by the script entry point in pyproject.toml."""
    logger.info("Starting propconf...")
    app()


if __name__ == "__main__":
    cli_entry_point()
