import pytest
from typer.testing import CliRunner
from pathlib import Path

from propconf.infrastructure.config.settings import clear_test_config

SAMPLE_PROPERTIES = """# Connection settings
DefaultConnection.ConnectionString="TestConnectionString"
DefaultConnection.Provider=SqlClient

Data.Inventory.ConnectionString=AnotherTestConnectionString
Data.Inventory.Provider=MySql
DefaultKey=
"""

@pytest.fixture(scope="session")
def runner():
    """Provides a Typer CliRunner instance."""
    return CliRunner()

@pytest.fixture
def write_properties(tmp_path: Path):
    """Returns a helper that writes a .properties file and gives back its path."""
    def _write(content: str = SAMPLE_PROPERTIES, name: str = "app.properties") -> Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path
    return _write

@pytest.fixture
def sample_properties(write_properties) -> Path:
    """A well-formed properties file covering quoting, sections and empty values."""
    return write_properties()

@pytest.fixture(autouse=True)
def reset_test_config():
    """Ensure settings overrides from one test never leak into the next."""
    yield
    clear_test_config()
