import logging
from typing import Any, Iterable, Optional

from rich.box import HEAVY, ROUNDED, SIMPLE
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from propconf.domain.interfaces.user_interface import UserInterface
from propconf.domain.models.configuration import ConfigurationEntry

logger = logging.getLogger(__name__)

DEFAULT_MAX_VALUE_WIDTH = 80


class ConsoleDisplay(UserInterface):
    """Concrete implementation of UserInterface using the rich library for console output."""

    def __init__(self, max_value_width: int = DEFAULT_MAX_VALUE_WIDTH, console: Optional[Console] = None):
        """Initializes the rich Consoles.

        Args:
            max_value_width: Width of the value column in entry tables.
            console: Console for regular output; stdout when None.
        """
        self._console = console or Console()
        self._error_console = Console(stderr=True)
        self.max_value_width = max_value_width

    @property
    def console(self):
        """Get the Rich console instance for direct operations."""
        return self._console

    @console.setter
    def console(self, value: Console) -> None:
        self._console = value
        self._error_console = value

    def display_value(self, value: str, **kwargs: Any) -> None:
        """Prints a value verbatim so it can be piped; rich markup and emoji codes are not expanded."""
        self.console.print(value, markup=False, highlight=False, emoji=False, soft_wrap=True)

    def display_entries(self, entries: Iterable[ConfigurationEntry], **kwargs: Any) -> None:
        """Renders entries as a table of line, key and value.

        Args:
            entries: Entries to render.
            **kwargs: Additional arguments including:
                - title: Table title (default: "Configuration")
        """
        title = kwargs.get("title", "Configuration")
        entries = list(entries)
        logger.debug(f"Displaying {len(entries)} entries under '{title}'")

        table = Table(title=title, show_header=True, box=ROUNDED, border_style="cyan", padding=(0, 1))
        table.add_column("Line", style="dim", justify="right")
        table.add_column("Key", style="bold")
        table.add_column("Value", style="white", max_width=self.max_value_width, overflow="fold")

        for entry in entries:
            line = str(entry.line_number) if entry.line_number is not None else ""
            # Text() keeps brackets in values from being read as rich markup
            table.add_row(line, Text(entry.key), Text(entry.value))

        self.console.print(table)
        if not entries:
            self.display_info("No entries.")

    def display_keys(self, keys: Iterable[str], **kwargs: Any) -> None:
        for key in keys:
            self.console.print(key, markup=False, highlight=False, emoji=False)

    def display_error(self, error_message: str, **kwargs: Any) -> None:
        """Displays an error message in a distinct style.

        Args:
            error_message: The error message to display.
        """
        panel = Panel(
            Text(error_message, style="white"),
            title="[bold red]Error[/bold red]",
            border_style="red",
            box=HEAVY,
            padding=(0, 1)
        )
        self._error_console.print(panel)

    def display_info(self, info_message: str, **kwargs: Any) -> None:
        """Displays an informational message.

        Args:
            info_message: The informational message to display.
        """
        panel = Panel(
            Text(info_message, style="white"),
            title="[bold blue]Info[/bold blue]",
            border_style="blue",
            box=SIMPLE,
            padding=(0, 1)
        )
        self.console.print(panel)

    def display_warning(self, warning_message: str, **kwargs: Any) -> None:
        """Displays a warning message with enhanced styling.

        Args:
            warning_message: The warning message to display.
        """
        logger.warning(f"Display warning: {warning_message}")
        panel = Panel(
            Text(warning_message, style="white"),
            title="[bold yellow]Warning[/bold yellow]",
            border_style="yellow",
            box=HEAVY,
            padding=(0, 1)
        )
        self._error_console.print(panel)
