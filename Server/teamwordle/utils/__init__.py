"""
Utilities Package

Contains utility functions, decorators, and helper modules.
"""

from .decorators import room_bound, synchronized
from .helpers import (
    get_share_url,
    make_code,
    normalize_letter,
    parse_slot_index,
    pick_available_color,
    sanitize_color,
    sanitize_name,
)
from .game_logger import game_logger

__all__ = [
    'room_bound', 'synchronized',
    'get_share_url', 'make_code', 'normalize_letter', 'parse_slot_index',
    'pick_available_color', 'sanitize_color', 'sanitize_name',
    'game_logger'
]
