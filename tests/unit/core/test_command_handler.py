import pytest
from unittest.mock import MagicMock

from propconf.core.command_handler import EXIT_FAILURE, EXIT_OK, CommandHandler
from propconf.core.services.configuration_service import ConfigurationService
from propconf.domain.errors import PropertiesFormatError
from propconf.domain.interfaces.user_interface import UserInterface
from propconf.domain.models.common import FilePath
from propconf.domain.models.configuration import ConfigurationEntry

@pytest.fixture
def mock_configuration_service():
    return MagicMock(spec=ConfigurationService)

@pytest.fixture
def mock_ui():
    return MagicMock(spec=UserInterface)

@pytest.fixture
def command_handler(mock_configuration_service, mock_ui):
    """Fixture to create CommandHandler with mocked collaborators."""
    return CommandHandler(configuration_service=mock_configuration_service, ui=mock_ui)

def test_handle_get(command_handler: CommandHandler, mock_configuration_service: MagicMock, mock_ui: MagicMock):
    """Test that handle_get looks the key up and displays the value."""
    mock_configuration_service.get_value.return_value = (True, "MySql")

    assert command_handler.handle_get("app.properties", "Data:Inventory:Provider") == EXIT_OK

    mock_configuration_service.get_value.assert_called_once_with(FilePath("app.properties"), "Data:Inventory:Provider")
    mock_ui.display_value.assert_called_once_with("MySql")
    mock_ui.display_error.assert_not_called()

def test_handle_get_displays_empty_value(command_handler: CommandHandler, mock_configuration_service: MagicMock, mock_ui: MagicMock):
    mock_configuration_service.get_value.return_value = (True, "")
    assert command_handler.handle_get("app.properties", "DefaultKey") == EXIT_OK
    mock_ui.display_value.assert_called_once_with("")

def test_handle_get_missing_key(command_handler: CommandHandler, mock_configuration_service: MagicMock, mock_ui: MagicMock):
    mock_configuration_service.get_value.return_value = (False, None)

    assert command_handler.handle_get("app.properties", "Nope") == EXIT_FAILURE

    mock_ui.display_warning.assert_called_once_with("Key not found: Nope")
    mock_ui.display_value.assert_not_called()

def test_handle_get_error(command_handler: CommandHandler, mock_configuration_service: MagicMock, mock_ui: MagicMock):
    """Test that load errors are displayed, not raised."""
    mock_configuration_service.get_value.side_effect = FileNotFoundError("no such file")

    assert command_handler.handle_get("app.properties", "A") == EXIT_FAILURE

    mock_ui.display_error.assert_called_once_with("Get command failed: no such file")

def test_handle_show(command_handler: CommandHandler, mock_configuration_service: MagicMock, mock_ui: MagicMock):
    entries = [ConfigurationEntry("A:B", "1", 1)]
    mock_configuration_service.list_entries.return_value = entries

    assert command_handler.handle_show("app.properties") == EXIT_OK

    mock_ui.display_entries.assert_called_once_with(entries, title="app.properties")

def test_handle_show_error(command_handler: CommandHandler, mock_configuration_service: MagicMock, mock_ui: MagicMock):
    mock_configuration_service.list_entries.side_effect = PropertiesFormatError("missing key/value delimiter", 4, "oops")

    assert command_handler.handle_show("app.properties") == EXIT_FAILURE
    mock_ui.display_error.assert_called_once()
    mock_ui.display_entries.assert_not_called()

def test_handle_children(command_handler: CommandHandler, mock_configuration_service: MagicMock, mock_ui: MagicMock):
    mock_configuration_service.child_keys.return_value = ["Inventory"]

    assert command_handler.handle_children("app.properties", "Data") == EXIT_OK

    mock_configuration_service.child_keys.assert_called_once_with(FilePath("app.properties"), "Data")
    mock_ui.display_keys.assert_called_once_with(["Inventory"])

def test_handle_children_none_found(command_handler: CommandHandler, mock_configuration_service: MagicMock, mock_ui: MagicMock):
    mock_configuration_service.child_keys.return_value = []

    assert command_handler.handle_children("app.properties") == EXIT_FAILURE
    mock_ui.display_warning.assert_called_once_with("No keys below section: <root>")

def test_handle_check_ok(command_handler: CommandHandler, mock_configuration_service: MagicMock, mock_ui: MagicMock):
    mock_configuration_service.validate.return_value = 4

    assert command_handler.handle_check("app.properties") == EXIT_OK
    mock_ui.display_info.assert_called_once_with("app.properties: OK (4 entries)")

def test_handle_check_reports_offending_line(command_handler: CommandHandler, mock_configuration_service: MagicMock, mock_ui: MagicMock):
    mock_configuration_service.validate.side_effect = PropertiesFormatError("missing key/value delimiter", 7, "broken")

    assert command_handler.handle_check("app.properties") == EXIT_FAILURE
    mock_ui.display_error.assert_called_once_with("app.properties: line 7: missing key/value delimiter")

def test_handle_get_undecodable_file(command_handler: CommandHandler, mock_configuration_service: MagicMock, mock_ui: MagicMock):
    """Files that are not UTF-8 are reported, not raised."""
    mock_configuration_service.get_value.side_effect = UnicodeDecodeError("utf-8", b"\xfc", 0, 1, "invalid start byte")

    assert command_handler.handle_get("app.properties", "Key") == EXIT_FAILURE
    mock_ui.display_error.assert_called_once()

def test_handle_check_undecodable_file(command_handler: CommandHandler, mock_configuration_service: MagicMock, mock_ui: MagicMock):
    mock_configuration_service.validate.side_effect = UnicodeDecodeError("utf-8", b"\xfc", 0, 1, "invalid start byte")

    assert command_handler.handle_check("app.properties") == EXIT_FAILURE
    assert "Check command failed" in mock_ui.display_error.call_args.args[0]
