"""Provides functions for loading and accessing the tool's own settings.

Supports loading from environment variables, a .env file, and a YAML
settings file (e.g., ~/.propconf/config.yaml). These settings configure
the propconf command line tool (logging, display); they never change the
values served by a properties provider.
"""

import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from dotenv import load_dotenv

logger = logging.getLogger(__name__)

# --- Configuration Constants ---
DEFAULT_CONFIG_DIR = Path.home() / ".propconf"
DEFAULT_CONFIG_FILE = DEFAULT_CONFIG_DIR / "config.yaml"
ENV_FILE_NAME = ".env"
ENV_PREFIX = "PROPCONF_"

DEFAULTS: Dict[str, Any] = {
    "logging.level": "WARNING",
    "logging.format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    "logging.file": None,
    "display.max_value_width": 80,
}

# --- Module Configuration Store ---
_config: Dict[str, Any] = {}
_test_config: Dict[str, Any] = {}
_loaded = False


def _flatten(data: Dict[str, Any], prefix: str = "") -> Dict[str, Any]:
    """Flattens nested YAML sections into dotted keys ({'logging': {'level': x}} -> 'logging.level')."""
    flat: Dict[str, Any] = {}
    for key, value in data.items():
        dotted = f"{prefix}{key}"
        if isinstance(value, dict):
            flat.update(_flatten(value, f"{dotted}."))
        else:
            flat[dotted] = value
    return flat


def env_var_name(key: str) -> str:
    """Maps a dotted settings key onto its environment variable ('logging.level' -> 'PROPCONF_LOGGING_LEVEL')."""
    return f"{ENV_PREFIX}{key.upper().replace('.', '_')}"


def load_configuration(config_file: Path = DEFAULT_CONFIG_FILE, env_file: Optional[Path] = None, force: bool = False) -> None:
    """Loads settings from a YAML file and a .env file.

    Priority order (highest to lowest):
    1. Environment Variables (PROPCONF_*)
    2. .env file
    3. YAML settings file
    4. DEFAULTS

    Args:
        config_file: Path to the YAML settings file.
        env_file: Path to the .env file (searches upwards from cwd if None).
        force: Reload even if settings were already loaded.
    """
    global _config, _loaded
    if _loaded and not force:
        logger.debug("Configuration already loaded.")
        return

    _config = {}

    # 1. YAML file (lowest priority)
    if config_file.exists():
        try:
            with open(config_file, "r", encoding="utf-8") as f:
                yaml_config = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            logger.error(f"Failed to load or parse YAML config {config_file}: {e}")
        else:
            if isinstance(yaml_config, dict):
                _config.update(_flatten(yaml_config))
                logger.info(f"Loaded configuration from YAML: {config_file}")
            elif yaml_config is not None:
                logger.warning(f"YAML config file {config_file} did not contain a dictionary.")
    else:
        logger.debug(f"YAML config file not found: {config_file}")

    # 2. .env file (medium priority); override=False keeps real env vars on top
    dotenv_path = env_file or find_dotenv_path()
    if dotenv_path:
        if load_dotenv(dotenv_path=dotenv_path, override=False):
            logger.info(f"Loaded environment variables from: {dotenv_path}")
    else:
        logger.debug("Skipping .env file loading (no file found).")

    # 3. Environment variables (highest priority) are read in get_config

    _loaded = True
    logger.debug("Configuration loading process completed.")


def get_config(key: str, default: Any = None) -> Any:
    """
    Get a settings value by dotted key.

    Priority:
    1. Test configuration (if set)
    2. Environment variable (PROPCONF_<KEY>)
    3. YAML settings
    4. DEFAULTS
    5. default argument

    Args:
        key: The settings key (e.g., 'logging.level')
        default: Value returned if the key is found nowhere

    Returns:
        The settings value
    """
    if key in _test_config:
        return _test_config[key]

    env_key = env_var_name(key)
    if env_key in os.environ:
        return os.environ[env_key]

    if key in _config:
        return _config[key]

    if key in DEFAULTS and DEFAULTS[key] is not None:
        return DEFAULTS[key]

    logger.debug(f"Config key '{key}' not found in environment or loaded config. Returning default: {default}")
    return default


def set_config(key: str, value: Any) -> None:
    """Sets a settings value for the rest of the process.

    Args:
        key: Settings key (e.g., 'logging.level')
        value: Value to set
    """
    logger.debug(f"Setting config: {key} = {value}")
    _config[key] = value
    # Environment variables outrank _config, so drop a stale one
    os.environ.pop(env_var_name(key), None)


def find_dotenv_path() -> Optional[Path]:
    """Searches for the .env file upwards from the current directory."""
    cwd = Path.cwd()
    for path in [cwd] + list(cwd.parents):
        env_path = path / ENV_FILE_NAME
        if env_path.is_file():
            return env_path
    return None


# --- Convenience Functions ---

def get_log_level() -> int:
    """Returns the configured logging level as a logging constant."""
    level_name = str(get_config("logging.level")).upper()
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        logger.warning(f"Unknown logging level '{level_name}'. Falling back to WARNING.")
        return logging.WARNING
    return level


def get_max_value_width() -> int:
    """Returns the column width used for values in entry tables."""
    width = get_config("display.max_value_width")
    try:
        return max(int(width), 10)
    except (TypeError, ValueError):
        logger.warning(f"Invalid display.max_value_width '{width}'. Using {DEFAULTS['display.max_value_width']}.")
        return DEFAULTS["display.max_value_width"]


def set_config_for_testing(config_dict: Dict[str, Any]) -> None:
    """
    Set settings values for testing purposes.
    These values will override any existing configuration.

    Args:
        config_dict: Dictionary of settings values to set
    """
    _test_config.update(config_dict)
    logger.debug(f"Set testing configuration: {config_dict}")


def clear_test_config() -> None:
    """Clear all testing configuration values."""
    _test_config.clear()
    logger.debug("Cleared testing configuration")


def reset_configuration() -> None:
    """Forget loaded settings so the next load_configuration reads from disk again."""
    global _loaded
    _config.clear()
    _loaded = False
