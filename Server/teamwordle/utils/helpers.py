"""
Helper Functions

Contains utility functions used throughout the application.
"""

import secrets
from typing import Iterable, Optional

from ..config.game_settings import (
    COLOR_PALETTE,
    DEFAULT_PLAYER_NAME,
    NAME_MAX_LENGTH,
    ROOM_CODE_ALPHABET,
    ROOM_CODE_LENGTH,
)


def make_code(length: int = ROOM_CODE_LENGTH) -> str:
    """Human-typeable code without ambiguous characters (0/O, 1/I)."""
    return "".join(secrets.choice(ROOM_CODE_ALPHABET) for _ in range(length))


def sanitize_name(raw) -> str:
    name = str(raw or "").strip()
    return (name or DEFAULT_PLAYER_NAME)[:NAME_MAX_LENGTH]


def sanitize_color(raw) -> Optional[str]:
    """Return the palette entry matching raw, or None if it is not in the palette."""
    color = str(raw or "").strip().upper()
    return color if color in COLOR_PALETTE else None


def pick_available_color(used: Iterable[Optional[str]]) -> str:
    taken = {color for color in used if color}
    for color in COLOR_PALETTE:
        if color not in taken:
            return color
    return secrets.choice(COLOR_PALETTE)


def normalize_letter(raw) -> str:
    """Uppercase single A-Z letter, or "" for anything else."""
    letter = str(raw if raw is not None else "").strip().upper()
    if len(letter) == 1 and "A" <= letter <= "Z":
        return letter
    return ""


def parse_slot_index(raw, slot_count: int) -> Optional[int]:
    """Slot index from client input, or None if it is not a valid position."""
    if isinstance(raw, bool):
        return None
    try:
        index = int(raw)
    except (TypeError, ValueError):
        return None
    if isinstance(raw, float) and raw != index:
        return None
    return index if 0 <= index < slot_count else None


def get_share_url(request_obj, room_id: str) -> str:
    """Join link for a room, honoring reverse proxy headers."""
    proto = request_obj.headers.get('X-Forwarded-Proto') or request_obj.scheme or 'http'
    host = request_obj.headers.get('X-Forwarded-Host') or request_obj.host
    return f"{proto}://{host}/?lobby={room_id}"
