# navstack/config.py
# Description: Configuration management for navstack.
#
# Imports
import copy
import os
import sys
if sys.version_info < (3, 11):
    import tomli as tomllib
else:
    import tomllib
from pathlib import Path
from typing import Any, Dict, Optional
#
# Third-Party Imports
import toml
from loguru import logger
#
#######################################################################################################################
#
# Functions:

# --- Path to the configuration file ---
CONFIG_ENV_VAR = "NAVSTACK_CONFIG"
DEFAULT_CONFIG_PATH = Path.home() / ".config" / "navstack" / "config.toml"

CONFIG_TOML_CONTENT = """
# Configuration for navstack.
# Values missing here fall back to the built-in defaults.

[logging]
# One of TRACE, DEBUG, INFO, SUCCESS, WARNING, ERROR, CRITICAL
level = "INFO"
console = true
# Leave empty to disable the file sink
log_file = ""
rotation = "10 MB"
retention = "7 days"

[navigation]
# Level used when a pop target is not found or out of bounds
soft_failure_level = "WARNING"
# Log every push/pop/present/dismiss at DEBUG
log_transitions = true

[ui]
show_drag_indicator = true
# Sheet height when a sheet declares no size hints
default_sheet_height = "50%"
"""

DEFAULT_CONFIG: Dict[str, Any] = tomllib.loads(CONFIG_TOML_CONTENT)

_CONFIG_CACHE: Optional[Dict[str, Any]] = None


def get_config_path() -> Path:
    """Path of the user configuration file, honouring $NAVSTACK_CONFIG."""
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        return Path(override).expanduser()
    return DEFAULT_CONFIG_PATH


def deep_merge_dicts(base: Dict, update: Dict) -> Dict:
    """Recursively merges update_dict into base_dict."""
    merged = copy.deepcopy(base)
    for key, value in update.items():
        if isinstance(value, dict) and key in merged and isinstance(merged[key], dict):
            merged[key] = deep_merge_dicts(merged[key], value)
        else:
            merged[key] = value
    return merged


def _get_typed_value(data_dict: Dict, key: str, default: Any, target_type: type = str) -> Any:
    """Helper to get value from dict and cast to type, with logging for type errors."""
    value = data_dict.get(key, default)
    if value is None:
        return default

    try:
        if target_type == bool:
            if isinstance(value, bool):
                return value
            return str(value).lower() in ['true', '1', 't', 'y', 'yes']
        return target_type(value)
    except (ValueError, TypeError) as e:
        logger.warning(f"Config key '{key}' has value '{value}' which could not be converted to {target_type}. Using default: '{default}'. Error: {e}")
        return default


def load_config(force_reload: bool = False) -> Dict[str, Any]:
    """
    Loads the navstack configuration.

    The built-in defaults are the base; the user's TOML file, when present,
    is merged on top of them. A broken file is logged and ignored.

    Args:
        force_reload: If True, bypasses the cache and reloads from disk.

    Returns:
        Dictionary containing all configuration settings.
    """
    global _CONFIG_CACHE
    if _CONFIG_CACHE is not None and not force_reload:
        return _CONFIG_CACHE

    loaded_config = copy.deepcopy(DEFAULT_CONFIG)
    config_path = get_config_path()

    if config_path.exists():
        logger.debug(f"Loading navstack config from: {config_path}")
        try:
            with open(config_path, "rb") as f:
                user_config = tomllib.load(f)
            loaded_config = deep_merge_dicts(loaded_config, user_config)
        except tomllib.TOMLDecodeError as e:
            logger.error(f"Error decoding TOML config file {config_path}: {e}. Using built-in defaults.")
        except OSError as e:
            logger.error(f"Could not read config file {config_path}: {e}. Using built-in defaults.")
    else:
        logger.debug(f"No config file at {config_path}, using built-in defaults")

    _CONFIG_CACHE = loaded_config
    return _CONFIG_CACHE


def ensure_config_file() -> Path:
    """Write the default configuration file if none exists yet."""
    config_path = get_config_path()
    if config_path.exists():
        return config_path
    try:
        config_path.parent.mkdir(parents=True, exist_ok=True)
        with open(config_path, "w", encoding="utf-8") as f:
            f.write(CONFIG_TOML_CONTENT)
        logger.info(f"Created default config file at {config_path}")
    except OSError as e:
        logger.error(f"Could not create default config file {config_path}: {e}. Using internal defaults.")
    return config_path


def get_setting(section: str, key: str, default: Any = None) -> Any:
    """Helper to get a specific setting from the loaded configuration."""
    config = load_config()
    section_data = config.get(section)
    if isinstance(section_data, dict):
        return section_data.get(key, default)
    return default


def get_bool_setting(section: str, key: str, default: bool = False) -> bool:
    section_data = load_config().get(section)
    if not isinstance(section_data, dict):
        return default
    return _get_typed_value(section_data, key, default, bool)


def save_setting(section: str, key: str, value: Any) -> bool:
    """
    Saves a specific setting to the user's TOML configuration file.

    Nested sections are written with dotted names (e.g. "ui.sheet").
    The cache is reloaded afterwards.

    Returns:
        True if the setting was saved successfully, False otherwise.
    """
    config_path = get_config_path()
    logger.info(f"Attempting to save setting: [{section}].{key} = {value!r}")

    try:
        config_path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        logger.error(f"Could not create config directory {config_path.parent}: {e}")
        return False

    config_data: Dict[str, Any] = {}
    if config_path.exists():
        try:
            with open(config_path, "rb") as f:
                config_data = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            logger.error(f"Corrupted config file at {config_path}. Cannot save. Please fix or delete it. Error: {e}")
            return False

    current_level = config_data
    try:
        for part in section.split('.'):
            current_level = current_level.setdefault(part, {})
        current_level[key] = value
    except (TypeError, AttributeError):
        logger.error(
            f"Configuration structure conflict. Could not set '{key}' in section '{section}' "
            f"because a part of the path is not a table."
        )
        return False

    try:
        with open(config_path, "w", encoding="utf-8") as f:
            toml.dump(config_data, f)
    except OSError as e:
        logger.error(f"Failed to write updated config to {config_path}: {e}")
        return False

    logger.success(f"Successfully saved setting to {config_path}")
    load_config(force_reload=True)
    return True

#
# End of config.py
#######################################################################################################################
