"""
Participant Data Models

Contains the per-connection data a room keeps about its players.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass
class Participant:
    """A live connection bound to one slot of a room."""
    handle: str
    token: str
    name: str
    color: Optional[str] = None
    slot: Optional[int] = None

    def roster_entry(self) -> Dict[str, Any]:
        return {'name': self.name, 'color': self.color}
