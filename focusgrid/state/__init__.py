"""
State containers for focus navigation.
"""

from .focus_state import Cursor, MovementAllowed

__all__ = [
    'Cursor',
    'MovementAllowed',
]
