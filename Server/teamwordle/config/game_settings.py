"""
Game Configuration Constants Module

Defines the fixed rules of a team round: board width, palette, built-in
fallback vocabulary and the alphabets used for room codes and client tokens.
Deployment-specific values (ports, word list paths, default round count)
live in app_config.py instead.
"""

import os
from typing import Final, Tuple

SLOT_COUNT: Final[int] = 5
"""
Number of letter positions in the shared row (and maximum players per room).
"""

DEFAULT_MAX_ROUNDS: Final[int] = 5
"""
Guesses a team gets before the room is exhausted.
"""

MIN_ROUNDS: Final[int] = 1
MAX_ROUNDS_LIMIT: Final[int] = 10

AUTO_OWNER_TOKEN: Final[str] = "AUTO"
"""
Owner token recorded on slots filled by the assist feature instead of a player.
"""

NAME_MAX_LENGTH: Final[int] = 16
DEFAULT_PLAYER_NAME: Final[str] = "Player"

ROOM_CODE_ALPHABET: Final[str] = "ABCDEFGHJKLMNPQRSTUVWXYZ23456789"
ROOM_CODE_LENGTH: Final[int] = 6
CLIENT_TOKEN_LENGTH: Final[int] = 8

# Player colors. Green is reserved for locked/correct tiles.
COLOR_PALETTE: Final[Tuple[str, ...]] = (
    "#60A5FA",  # blue
    "#F472B6",  # pink
    "#F59E0B",  # amber
    "#A78BFA",  # violet
    "#14B8A6",  # teal
    "#EF4444",  # red
    "#22D3EE",  # cyan
    "#FB7185",  # rose
    "#8B5CF6",  # indigo
    "#F97316",  # orange
)

DEFAULT_WORDS: Final[Tuple[str, ...]] = (
    "CRANE", "SLATE", "SMILE", "MINTY", "NASAL", "APPLE", "BREAD", "CHAIR",
    "DANCE", "EARTH", "TIGER", "RIVER", "STONE", "WATER",
)
"""
Used for both validation and drawing when no word list file can be read.
"""

_CONFIG_DIR = os.path.dirname(os.path.abspath(__file__))

WORDS_ALLOWED_FILE: Final[str] = os.path.join(_CONFIG_DIR, 'words_allowed.txt')
WORDS_ANSWERS_FILE: Final[str] = os.path.join(_CONFIG_DIR, 'words_answers.txt')
