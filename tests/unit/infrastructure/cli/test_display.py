import io

import pytest
from unittest.mock import MagicMock

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from propconf.domain.models.configuration import ConfigurationEntry
from propconf.infrastructure.cli.display import ConsoleDisplay

@pytest.fixture
def mock_console():
    """Fixture to create a mock rich Console object."""
    return MagicMock()

@pytest.fixture
def console_display(mock_console: MagicMock):
    """Fixture to create a ConsoleDisplay instance with a mocked console."""
    display = ConsoleDisplay(max_value_width=40)
    display.console = mock_console # Inject the mock
    return display

def test_display_value_prints_raw_text(console_display: ConsoleDisplay, mock_console: MagicMock):
    """Values are printed without rich markup so brackets survive."""
    console_display.display_value("[not markup]")
    mock_console.print.assert_called_once_with("[not markup]", markup=False, highlight=False, emoji=False, soft_wrap=True)

def test_display_entries_renders_table(console_display: ConsoleDisplay, mock_console: MagicMock):
    entries = [
        ConfigurationEntry("Data:Inventory:Provider", "MySql", 2),
        ConfigurationEntry("DefaultKey", "", 3),
    ]
    console_display.display_entries(entries, title="app.properties")

    mock_console.print.assert_called_once()
    table = mock_console.print.call_args.args[0]
    assert isinstance(table, Table)
    assert table.title == "app.properties"
    assert table.row_count == 2
    assert [column.header for column in table.columns] == ["Line", "Key", "Value"]
    assert table.columns[2].max_width == 40

def test_display_entries_empty_adds_info(console_display: ConsoleDisplay, mock_console: MagicMock):
    console_display.display_entries([])
    assert mock_console.print.call_count == 2
    assert isinstance(mock_console.print.call_args_list[1].args[0], Panel)

def test_display_keys_prints_one_per_line(console_display: ConsoleDisplay, mock_console: MagicMock):
    console_display.display_keys(["Data", "Logging"])
    assert [c.args[0] for c in mock_console.print.call_args_list] == ["Data", "Logging"]

def test_display_error(console_display: ConsoleDisplay, mock_console: MagicMock):
    """Test that display_error prints an error panel."""
    console_display.display_error("Something went wrong")
    mock_console.print.assert_called_once()
    panel = mock_console.print.call_args.args[0]
    assert isinstance(panel, Panel)
    assert "Error" in panel.title
    assert panel.renderable.plain == "Something went wrong"

def test_display_info(console_display: ConsoleDisplay, mock_console: MagicMock):
    console_display.display_info("Process completed")
    panel = mock_console.print.call_args.args[0]
    assert "Info" in panel.title
    assert panel.renderable.plain == "Process completed"

def test_display_warning(console_display: ConsoleDisplay, mock_console: MagicMock):
    console_display.display_warning("Key not found: A")
    panel = mock_console.print.call_args.args[0]
    assert "Warning" in panel.title

def test_display_value_keeps_emoji_codes():
    """Colon-delimited values such as ':smile:' are printed unchanged."""
    console = Console(file=io.StringIO(), width=80)
    ConsoleDisplay(console=console).display_value("host:smile:8080 :smile:")
    assert console.file.getvalue() == "host:smile:8080 :smile:\n"

def test_display_keys_keep_emoji_codes():
    console = Console(file=io.StringIO(), width=80)
    ConsoleDisplay(console=console).display_keys([":smile:"])
    assert console.file.getvalue() == ":smile:\n"
