"""Command Handler: Orchestrates CLI command execution.

Receives commands from the main entry point (main.py), delegates the work
to the ConfigurationService and reports results or failures through the
UserInterface. Every handler returns the process exit code.
"""

import logging
from typing import Optional

# Core Services Imports
from propconf.core.services.configuration_service import ConfigurationService

# Domain Layer Imports
from propconf.domain.errors import PropertiesFormatError
from propconf.domain.interfaces.user_interface import UserInterface
from propconf.domain.models.common import FilePath

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1

# Failures of a single load that are reported to the user instead of raised
LOAD_ERRORS = (OSError, UnicodeDecodeError, PropertiesFormatError)


class CommandHandler:
    """Handles incoming commands and delegates to the configuration service."""

    def __init__(self, configuration_service: ConfigurationService, ui: UserInterface):
        """Initializes the CommandHandler with required services."""
        self.configuration_service = configuration_service
        self.ui = ui

    def handle_get(self, file_path_str: str, key: str) -> int:
        """Handles the 'get' command: prints the value of one key."""
        logger.info(f"Handling 'get' command for key '{key}' in: {file_path_str}")
        try:
            found, value = self.configuration_service.get_value(FilePath(file_path_str), key)
        except LOAD_ERRORS as e:
            logger.error(f"Error handling get command: {e}", exc_info=True)
            self.ui.display_error(f"Get command failed: {e}")
            return EXIT_FAILURE

        if not found:
            self.ui.display_warning(f"Key not found: {key}")
            return EXIT_FAILURE
        self.ui.display_value(value)
        return EXIT_OK

    def handle_show(self, file_path_str: str) -> int:
        """Handles the 'show' command: renders every entry of the file."""
        logger.info(f"Handling 'show' command for: {file_path_str}")
        try:
            entries = self.configuration_service.list_entries(FilePath(file_path_str))
        except LOAD_ERRORS as e:
            logger.error(f"Error handling show command: {e}", exc_info=True)
            self.ui.display_error(f"Show command failed: {e}")
            return EXIT_FAILURE

        self.ui.display_entries(entries, title=file_path_str)
        return EXIT_OK

    def handle_children(self, file_path_str: str, parent: Optional[str] = None) -> int:
        """Handles the 'children' command: lists child segments below a section."""
        logger.info(f"Handling 'children' command for section '{parent or '<root>'}' in: {file_path_str}")
        try:
            children = self.configuration_service.child_keys(FilePath(file_path_str), parent)
        except LOAD_ERRORS as e:
            logger.error(f"Error handling children command: {e}", exc_info=True)
            self.ui.display_error(f"Children command failed: {e}")
            return EXIT_FAILURE

        if not children:
            self.ui.display_warning(f"No keys below section: {parent or '<root>'}")
            return EXIT_FAILURE
        self.ui.display_keys(children)
        return EXIT_OK

    def handle_check(self, file_path_str: str) -> int:
        """Handles the 'check' command: validates that the file parses."""
        logger.info(f"Handling 'check' command for: {file_path_str}")
        try:
            count = self.configuration_service.validate(FilePath(file_path_str))
        except PropertiesFormatError as e:
            logger.error(f"Invalid properties file {file_path_str}: {e}")
            self.ui.display_error(f"{file_path_str}: line {e.line_number}: {e.reason}")
            return EXIT_FAILURE
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"Error handling check command: {e}", exc_info=True)
            self.ui.display_error(f"Check command failed: {e}")
            return EXIT_FAILURE

        self.ui.display_info(f"{file_path_str}: OK ({count} entries)")
        return EXIT_OK
