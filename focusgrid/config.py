# focusgrid/config.py
# Description: Configuration management for focusgrid.
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
# Local Imports
from .state.focus_state import MovementAllowed
#
#######################################################################################################################
#
# Functions:

# --- Path to the configuration file ---
DEFAULT_CONFIG_PATH = Path.home() / ".config" / "focusgrid" / "config.toml"
CONFIG_PATH_ENV_VAR = "FOCUSGRID_CONFIG"

# --- Default Fallback Configuration (if not found in TOML) ---
DEFAULT_CONFIG: Dict[str, Dict[str, Any]] = {
    "focus": {
        "movement_allowed_x": True,
        "movement_allowed_y": True,
        "focus_initial_item": True,
    },
    "input": {
        # true / false, or "auto" to detect from the environment
        "has_dpad": "auto",
        "has_few_keys": False,
    },
    "logging": {
        "level": "INFO",
        "log_file": "",
        "rotation": "10 MB",
        "retention": "7 days",
    },
}

# Global cache for load_settings to avoid redundant file I/O
_SETTINGS_CACHE: Optional[Dict[str, Any]] = None


def get_config_path() -> Path:
    """Config file location, honouring the FOCUSGRID_CONFIG override."""
    override = os.environ.get(CONFIG_PATH_ENV_VAR)
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
    if value is default and default is not None:
        return value
    if value is None:
        return None

    try:
        if target_type == bool:
            if isinstance(value, bool):
                return value
            return str(value).lower() in ['true', '1', 't', 'y', 'yes']
        if target_type == Path:
            return Path(value) if value else default
        return target_type(value)
    except (ValueError, TypeError) as e:
        logger.warning(f"Config key '{key}' has value '{value}' which could not be converted to {target_type}. Using default: '{default}'. Error: {e}")
        return default


def load_settings(force_reload: bool = False, config_path: Optional[Path] = None) -> Dict[str, Any]:
    """
    Load settings from the TOML config file merged over DEFAULT_CONFIG.

    A missing or unreadable file is not fatal: the defaults are used and the
    problem is logged. Results are cached until ``force_reload`` is set or an
    explicit ``config_path`` is given.
    """
    global _SETTINGS_CACHE
    if _SETTINGS_CACHE is not None and not force_reload and config_path is None:
        return _SETTINGS_CACHE

    path = Path(config_path) if config_path is not None else get_config_path()
    user_config: Dict[str, Any] = {}
    if path.is_file():
        try:
            with open(path, "rb") as f:
                user_config = tomllib.load(f)
            logger.debug(f"Loaded config from {path}")
        except tomllib.TOMLDecodeError as e:
            logger.error(f"Error decoding TOML config at {path}: {e}. Using defaults.")
        except OSError as e:
            logger.error(f"Could not read config at {path}: {e}. Using defaults.")
    else:
        logger.debug(f"No config file at {path}, using defaults")

    settings = deep_merge_dicts(DEFAULT_CONFIG, user_config)
    if config_path is None:
        _SETTINGS_CACHE = settings
    return settings


def clear_settings_cache() -> None:
    global _SETTINGS_CACHE
    _SETTINGS_CACHE = None


def get_setting(section: str, key: str, default: Any = None, settings: Optional[Dict[str, Any]] = None) -> Any:
    """Read one value, typed after the default when there is one."""
    settings = settings if settings is not None else load_settings()
    section_data = settings.get(section, {})
    if not isinstance(section_data, dict):
        logger.warning(f"Config section '{section}' is not a table, ignoring it")
        return default
    if default is None:
        return section_data.get(key)
    return _get_typed_value(section_data, key, default, type(default))


def save_setting_to_config(section: str, key: str, value: Any, config_path: Optional[Path] = None) -> bool:
    """
    Persist a single setting to the TOML config file.

    Returns:
        True on success, False if the file could not be written.
    """
    path = Path(config_path) if config_path is not None else get_config_path()
    data: Dict[str, Any] = {}
    try:
        if path.is_file():
            with open(path, "rb") as f:
                data = tomllib.load(f)
        data.setdefault(section, {})[key] = value
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            toml.dump(data, f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        logger.error(f"Failed to save setting [{section}].{key} to {path}: {e}")
        return False

    logger.info(f"Saved setting [{section}].{key} to {path}")
    clear_settings_cache()
    return True


def get_movement_allowed(settings: Optional[Dict[str, Any]] = None) -> MovementAllowed:
    return MovementAllowed(
        x=get_setting("focus", "movement_allowed_x", True, settings),
        y=get_setting("focus", "movement_allowed_y", True, settings),
    )

#
# End of config.py
#######################################################################################################################
