"""
Room Data Models

Contains the multiplayer roster and room lifecycle structures.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict


class RoomPhase(Enum):
    """Room lifecycle. Transitions only move forward: lobby -> active -> finished."""
    LOBBY = "lobby"
    ACTIVE = "active"
    FINISHED = "finished"


@dataclass
class Player:
    """A player seated in one room. Names need not be unique, ids must."""
    id: str
    display_name: str
    ready: bool = False

    def to_dict(self) -> Dict:
        return {
            'id': self.id,
            'display_name': self.display_name,
            'ready': self.ready
        }
