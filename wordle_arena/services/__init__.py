"""
Services Package

Contains the game engine and the service classes built on it.
"""

from .game_service import GameService, get_game_service
from .lobby_service import LobbyService, get_lobby_service
from .session_registry import SessionRegistry, get_session_registry

__all__ = [
    'GameService', 'get_game_service',
    'LobbyService', 'get_lobby_service',
    'SessionRegistry', 'get_session_registry'
]
