"""
Default key table for directional focus moves.
"""

from typing import Dict, Optional

from .interfaces import InputCapabilities

# These all generate the same move, just with different displacements
FOCUS_KEY_EVENTS: Dict[str, dict] = {
    "FocusUp": {"key": "up", "doc": "move focus up", "args": (0, -1)},
    "FocusDown": {"key": "down", "doc": "move focus down", "args": (0, 1)},
    "FocusLeft": {"key": "left", "doc": "move focus left", "args": (-1, 0)},
    "FocusRight": {"key": "right", "doc": "move focus right", "args": (1, 0)},
}


def build_key_events(capabilities: Optional[InputCapabilities] = None) -> Dict[str, dict]:
    """
    Return the key events a focus container should react to.

    Devices without a directional pad get none. Devices with few keys
    get no ``FocusLeft``.
    """
    capabilities = capabilities or InputCapabilities()
    if not capabilities.has_dpad:
        return {}
    key_events = {name: dict(spec) for name, spec in FOCUS_KEY_EVENTS.items()}
    if capabilities.has_few_keys:
        key_events.pop("FocusLeft", None)
    return key_events


def key_to_displacement(key_events: Dict[str, dict], key: str) -> Optional[tuple]:
    """Look up the (dx, dy) bound to ``key``, or None if it is not bound."""
    for spec in key_events.values():
        if spec["key"] == key:
            return spec["args"]
    return None
