"""
Game Service

Single-player games: creation, guesses, settings and expiry, all resolved
through the session registry.
"""

import random
from typing import Dict, List, Optional

from ..config.game_settings import resolve_settings
from ..models.game import GameSettings, GameState, GuessOutcome
from .game_instance import GameInstance
from .session_registry import GAME, SessionRegistry


class GameService:
    """
    Standalone game operations.

    The service holds no game state of its own: every game lives in the
    registry under its session id, and the secret never leaves the game
    until it is over.
    """
    
    def __init__(self, registry: SessionRegistry, base_settings: GameSettings, rng=None):
        self.registry = registry
        self.base_settings = base_settings
        self._rng = rng or random.Random()
    
    def create_new_game(self,
                        max_attempts=None,
                        word_list=None,
                        host_cheating=None,
                        enforce_dictionary=None) -> Dict:
        """
        Creates a new game session.
        
        Returns:
            Dict with the new session_id and the game's max_attempts
            
        Raises:
            InvalidConfig, InvalidWordList, EmptyWordPool: For rejected options
        """
        settings = resolve_settings(
            self.base_settings,
            max_attempts=max_attempts,
            word_list=word_list,
            host_cheating=host_cheating,
            enforce_dictionary=enforce_dictionary
        )
        session_id = self.registry.create(
            GAME, lambda game_id: GameInstance.from_settings(game_id, settings, rng=self._rng)
        )
        return {
            'session_id': session_id,
            'max_attempts': settings.max_attempts
        }
    
    def get_game(self, game_id: str) -> GameInstance:
        return self.registry.get(game_id, GAME)
    
    def get_game_state(self, game_id: str) -> GameState:
        """Returns the current game state (without revealing the answer)."""
        return self.get_game(game_id).current_state()
    
    def make_guess(self, game_id: str, guess: str) -> GuessOutcome:
        """
        Processes a guess and updates game state.
        
        Raises:
            NotFound, GameAlreadyOver, InvalidGuess
        """
        return self.get_game(game_id).submit_guess(guess)
    
    def update_settings(self, game_id: str, **overrides) -> GameSettings:
        """
        Applies new settings by restarting the game under the same id.
        
        A fresh secret is drawn from the (possibly new) word list and all
        attempts are cleared. A rejected update leaves the running game as is.
        """
        current = self.get_game(game_id)
        settings = resolve_settings(current.settings or self.base_settings, **overrides)
        self.registry.replace(game_id, GameInstance.from_settings(game_id, settings, rng=self._rng))
        return settings
    
    def get_word_list(self, game_id: str) -> List[str]:
        """The configured candidate pool, never the secret itself."""
        game = self.get_game(game_id)
        settings = game.settings or self.base_settings
        return list(settings.word_list)
    
    def delete_game(self, game_id: str) -> bool:
        """
        Expires a game session.
        
        Returns:
            bool: True if game was deleted, False if not found
        """
        return self.registry.expire(game_id)


# Global service instance
_game_service = None


def get_game_service() -> Optional[GameService]:
    """Get the global game service instance."""
    return _game_service


def initialize_game_service(registry: SessionRegistry, base_settings: GameSettings) -> GameService:
    """Initialize the global game service instance."""
    global _game_service
    _game_service = GameService(registry, base_settings)
    return _game_service
