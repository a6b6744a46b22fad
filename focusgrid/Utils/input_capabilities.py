# focusgrid/Utils/input_capabilities.py
# Description: Input device capability detection
#
# Imports
#
# Standard Library
import os
from typing import Any, Dict, Optional
#
# Third-Party Imports
from loguru import logger
#
# Local Imports
from ..config import get_setting, load_settings
from ..navigation.interfaces import InputCapabilities
#
#######################################################################################################################
#
# Functions:

_TRUE_VALUES = ('1', 'true', 't', 'y', 'yes', 'on')

# Terminals that cannot deliver arrow keys as distinct events
_NO_DPAD_TERMS = ('dumb', 'unknown')


def _env_flag(name: str) -> Optional[bool]:
    raw = os.environ.get(name)
    if raw is None or raw.strip() == '':
        return None
    return raw.strip().lower() in _TRUE_VALUES


def _detect_dpad() -> bool:
    term = os.environ.get('TERM', '').lower()
    if term in _NO_DPAD_TERMS:
        return False
    return True


def detect_input_capabilities(settings: Optional[Dict[str, Any]] = None) -> InputCapabilities:
    """
    Work out whether directional focus navigation should be enabled.

    Precedence: FOCUSGRID_DPAD / FOCUSGRID_FEW_KEYS environment variables,
    then the ``[input]`` config section, then detection from TERM.
    """
    settings = settings if settings is not None else load_settings()

    has_dpad = _env_flag('FOCUSGRID_DPAD')
    if has_dpad is None:
        configured = get_setting('input', 'has_dpad', 'auto', settings)
        if isinstance(configured, bool):
            has_dpad = configured
        elif str(configured).lower() == 'auto':
            has_dpad = _detect_dpad()
        else:
            has_dpad = str(configured).lower() in _TRUE_VALUES

    has_few_keys = _env_flag('FOCUSGRID_FEW_KEYS')
    if has_few_keys is None:
        has_few_keys = get_setting('input', 'has_few_keys', False, settings)

    capabilities = InputCapabilities(has_dpad=has_dpad, has_few_keys=has_few_keys)
    logger.debug(f"Detected input capabilities: {capabilities}")
    return capabilities

#
# End of input_capabilities.py
#######################################################################################################################
