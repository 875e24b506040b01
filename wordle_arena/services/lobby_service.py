"""
Lobby Service

Creates multiplayer rooms and routes player actions to the right room.
"""

import random
import uuid
from typing import Dict, List, Optional

from ..config.game_settings import resolve_settings
from ..errors import InvalidConfig, InvalidInput
from ..models.game import GameSettings, GuessOutcome
from .room_coordinator import Room
from .session_registry import ROOM, SessionRegistry

MAX_NAME_LENGTH = 32


class LobbyService:
    """
    Multiplayer room operations.

    Room ids are opaque tokens handed out at creation; there is no room
    discovery. The host key returned at creation guards settings, the word
    list and closing the room.
    """
    
    def __init__(self, registry: SessionRegistry, base_settings: GameSettings,
                 default_capacity: int = 8, rng=None):
        self.registry = registry
        self.base_settings = base_settings
        self.default_capacity = default_capacity
        self._rng = rng or random.Random()
    
    def create_room(self,
                    max_attempts=None,
                    word_list=None,
                    host_cheating=None,
                    enforce_dictionary=None,
                    capacity=None) -> Dict:
        """
        Creates a room in the lobby phase.
        
        Returns:
            Dict with session_id, max_attempts and the host_key
        """
        settings = resolve_settings(
            self.base_settings,
            max_attempts=max_attempts,
            word_list=word_list,
            host_cheating=host_cheating,
            enforce_dictionary=enforce_dictionary
        )
        if capacity is None:
            capacity = self.default_capacity
        if isinstance(capacity, bool) or not isinstance(capacity, int) or capacity < 1:
            raise InvalidConfig("capacity must be an integer of at least 1")
        
        host_key = uuid.uuid4().hex
        session_id = self.registry.create(
            ROOM, lambda room_id: Room(room_id, settings, capacity=capacity, host_key=host_key, rng=self._rng)
        )
        return {
            'session_id': session_id,
            'max_attempts': settings.max_attempts,
            'host_key': host_key
        }
    
    def get_room(self, room_id: str) -> Room:
        return self.registry.get(room_id, ROOM)
    
    def join_room(self, room_id: str, player_name: str, player_id: Optional[str] = None) -> Dict:
        """
        Seats a player. A player id is generated unless the caller brings one.
        
        Raises:
            NotFound, RoomFull, DuplicatePlayer, RoomAlreadyStarted, InvalidInput
        """
        if not isinstance(player_name, str) or not player_name.strip():
            raise InvalidInput("Player name is required")
        display_name = player_name.strip()[:MAX_NAME_LENGTH]
        if player_id is not None and (not isinstance(player_id, str) or not player_id.strip()):
            raise InvalidInput("Player id must be a non-empty string")
        
        room = self.get_room(room_id)
        player = room.join(player_id.strip() if player_id else uuid.uuid4().hex[:8], display_name)
        return {
            'player_id': player.id,
            'roster': room.roster()
        }
    
    def leave_room(self, room_id: str, player_id: str) -> Dict:
        room = self.get_room(room_id)
        room.leave(player_id)
        return {
            'roster': room.roster(),
            'phase': room.phase.value
        }
    
    def mark_ready(self, room_id: str, player_id: str) -> Dict:
        """Marks a player ready; the room activates once everyone is."""
        room = self.get_room(room_id)
        phase = room.set_ready(player_id)
        return {
            'roster': room.roster(),
            'phase': phase.value
        }
    
    def submit_guess(self, room_id: str, player_id: str, guess: str) -> GuessOutcome:
        return self.get_room(room_id).submit_guess(player_id, guess)
    
    def get_room_state(self, room_id: str, player_id: Optional[str] = None) -> Dict:
        return self.get_room(room_id).snapshot(player_id)
    
    def update_settings(self, room_id: str, host_key: Optional[str], **overrides) -> GameSettings:
        """Host-only settings change while the room is in the lobby."""
        room = self.get_room(room_id)
        room.check_host(host_key)
        return room.update_settings(**overrides)
    
    def get_word_list(self, room_id: str, host_key: Optional[str]) -> List[str]:
        room = self.get_room(room_id)
        room.check_host(host_key)
        return room.word_list()
    
    def close_room(self, room_id: str, host_key: Optional[str]) -> bool:
        room = self.get_room(room_id)
        room.check_host(host_key)
        return self.registry.expire(room_id)


# Global service instance
_lobby_service = None


def get_lobby_service() -> Optional[LobbyService]:
    """Get the global lobby service instance."""
    return _lobby_service


def initialize_lobby_service(registry: SessionRegistry, base_settings: GameSettings,
                             default_capacity: int = 8) -> LobbyService:
    """Initialize the global lobby service instance."""
    global _lobby_service
    _lobby_service = LobbyService(registry, base_settings, default_capacity=default_capacity)
    return _lobby_service
