"""
Room Coordinator

Owns one multiplayer room: the roster, the readiness gate, one game per
player, and the round bookkeeping that drives "waiting for others".
"""

import random
import threading
from typing import Dict, List, Optional

from ..config.game_settings import resolve_settings
from ..errors import (
    DuplicatePlayer, NotFound, NotHost, RoomAlreadyStarted, RoomFinished,
    RoomFull, RoomNotStarted, UnknownPlayer
)
from ..models.game import GameSettings, GuessOutcome, TerminalState
from ..models.room import Player, RoomPhase
from ..utils.game_logger import game_logger
from .game_instance import GameInstance

_STANDING_ORDER = {
    TerminalState.WON: 0,
    TerminalState.NONE: 1,
    TerminalState.LOST: 2,
}


class Room:
    """
    A multiplayer session moving through lobby -> active -> finished.

    Every mutation and every snapshot runs under the room lock, so rooms
    never contend with each other and one room only ever has a single writer.
    """

    def __init__(self, room_id: str, settings: GameSettings, capacity: int = 8,
                 host_key: Optional[str] = None, rng=None):
        self.room_id = room_id
        self.capacity = capacity
        self.host_key = host_key
        self._settings = settings
        self._rng = rng or random.Random()
        self._players: Dict[str, Player] = {}
        self._games: Dict[str, GameInstance] = {}
        self._phase = RoomPhase.LOBBY
        self._closed = False
        self._lock = threading.RLock()

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def phase(self) -> RoomPhase:
        with self._lock:
            return self._phase

    @property
    def settings(self) -> GameSettings:
        with self._lock:
            return self._settings

    def roster(self) -> List[Dict]:
        with self._lock:
            return [player.to_dict() for player in self._players.values()]

    def word_list(self) -> List[str]:
        """The configurable candidate pool. Never reveals any player's secret."""
        with self._lock:
            self._ensure_open()
            return list(self._settings.word_list)

    def game_for(self, player_id: str) -> GameInstance:
        with self._lock:
            self._ensure_open()
            if player_id not in self._players:
                raise UnknownPlayer(f"Player {player_id} is not in this room")
            if player_id not in self._games:
                raise RoomNotStarted("The game has not started yet")
            return self._games[player_id]

    def check_host(self, host_key: Optional[str]) -> None:
        if not self.host_key or host_key != self.host_key:
            raise NotHost("Only the room host can do this")

    def _ensure_open(self) -> None:
        if self._closed:
            raise NotFound("Room not found")

    def _ensure_lobby(self) -> None:
        self._ensure_open()
        if self._phase == RoomPhase.FINISHED:
            raise RoomFinished("Room has finished")
        if self._phase != RoomPhase.LOBBY:
            raise RoomAlreadyStarted("Room has already started")

    # ------------------------------------------------------------------
    # Lobby
    # ------------------------------------------------------------------

    def join(self, player_id: str, display_name: str) -> Player:
        """
        Seats a new, unready player.

        Raises:
            RoomFull: If the room is at capacity
            DuplicatePlayer: If the id is already seated
        """
        with self._lock:
            self._ensure_lobby()
            if player_id in self._players:
                raise DuplicatePlayer(f"Player {player_id} is already in this room")
            if len(self._players) >= self.capacity:
                raise RoomFull("Room is full")

            player = Player(id=player_id, display_name=display_name)
            self._players[player_id] = player
            return player

    def leave(self, player_id: str) -> None:
        with self._lock:
            self._ensure_lobby()
            if player_id not in self._players:
                raise UnknownPlayer(f"Player {player_id} is not in this room")
            del self._players[player_id]
            self._maybe_activate()

    def set_ready(self, player_id: str) -> RoomPhase:
        """
        Marks a player ready and activates the room once everyone is.

        Returns:
            The phase after the call
        """
        with self._lock:
            self._ensure_lobby()
            if player_id not in self._players:
                raise UnknownPlayer(f"Player {player_id} is not in this room")
            self._players[player_id].ready = True
            self._maybe_activate()
            return self._phase

    def update_settings(self, **overrides) -> GameSettings:
        """
        Replaces the room's settings while still in the lobby.

        Readiness is reset for everyone so players confirm the new rules.
        A rejected update leaves both settings and readiness untouched.
        """
        with self._lock:
            self._ensure_lobby()
            self._settings = resolve_settings(self._settings, **overrides)
            for player in self._players.values():
                player.ready = False
            return self._settings

    def _maybe_activate(self) -> bool:
        if not self._players or not all(player.ready for player in self._players.values()):
            return False

        settings = self._settings
        # One shared secret unless every player faces their own adversary
        secret = None if settings.host_cheating else self._rng.choice(settings.word_list)
        self._games = {
            player_id: GameInstance.from_settings(
                f"{self.room_id}:{player_id}", settings, rng=self._rng, secret=secret
            )
            for player_id in self._players
        }
        self._phase = RoomPhase.ACTIVE
        game_logger.log_game_event(
            self.room_id, 'room_activated', 'system',
            players=len(self._players), host_cheating=settings.host_cheating,
            max_attempts=settings.max_attempts
        )
        return True

    # ------------------------------------------------------------------
    # Active play
    # ------------------------------------------------------------------

    def submit_guess(self, player_id: str, guess: str) -> GuessOutcome:
        """
        Submits one player's guess.

        Never waits on other players; the returned outcome says whether this
        player is now ahead of the others and whether the guess completed a
        round.

        Raises:
            RoomNotStarted: While the room is still in the lobby
            RoomFinished: Once every game in the room is over
            UnknownPlayer: If the player is not seated here
            GameAlreadyOver, InvalidGuess: From the player's game
        """
        with self._lock:
            self._ensure_open()
            if self._phase == RoomPhase.LOBBY:
                raise RoomNotStarted("The game has not started yet")
            if self._phase == RoomPhase.FINISHED:
                raise RoomFinished("Room has finished")
            if player_id not in self._players:
                raise UnknownPlayer(f"Player {player_id} is not in this room")

            rounds_before = self._completed_rounds()
            outcome = self._games[player_id].submit_guess(guess)
            outcome.round_complete = self._completed_rounds() > rounds_before

            if all(game.is_over for game in self._games.values()):
                self._phase = RoomPhase.FINISHED
                game_logger.log_game_event(
                    self.room_id, 'room_finished', 'system',
                    winners=[pid for pid, game in self._games.items()
                             if game.terminal == TerminalState.WON]
                )

            outcome.waiting_for_others = self._is_waiting(player_id)
            outcome.phase = self._phase.value
            return outcome

    def _completed_rounds(self) -> int:
        """
        Number of attempt indices every still-playing player has reached.
        Once nobody is playing, the longest game decides.
        """
        playing = [game.attempts_used for game in self._games.values() if not game.is_over]
        if playing:
            return min(playing)
        return max((game.attempts_used for game in self._games.values()), default=0)

    def _is_waiting(self, player_id: str) -> bool:
        if self._phase != RoomPhase.ACTIVE:
            return False
        game = self._games[player_id]
        others = [other for pid, other in self._games.items() if pid != player_id and not other.is_over]
        if game.is_over:
            return bool(others)
        return any(other.attempts_used < game.attempts_used for other in others)

    # ------------------------------------------------------------------
    # Snapshots & lifetime
    # ------------------------------------------------------------------

    def _standings(self) -> List[Dict]:
        entries = []
        for player_id, player in self._players.items():
            game = self._games.get(player_id)
            if game is None:
                continue
            entries.append({
                'player_id': player_id,
                'display_name': player.display_name,
                'attempts_used': game.attempts_used,
                'terminal': game.terminal.value,
                'waiting_for_others': self._is_waiting(player_id)
            })
        return sorted(
            entries,
            key=lambda entry: (_STANDING_ORDER[TerminalState(entry['terminal'])], entry['attempts_used'])
        )

    def snapshot(self, player_id: Optional[str] = None) -> Dict:
        """
        Consistent view of the room for display.

        With a player_id, the caller's own board is included. Other players'
        boards and secrets never are.
        """
        with self._lock:
            self._ensure_open()
            if player_id is not None and player_id not in self._players:
                raise UnknownPlayer(f"Player {player_id} is not in this room")

            state = {
                'room_id': self.room_id,
                'phase': self._phase.value,
                'capacity': self.capacity,
                'settings': self._settings.to_dict(),
                'roster': self.roster(),
                'completed_rounds': self._completed_rounds(),
                'standings': self._standings()
            }
            if player_id is not None and player_id in self._games:
                state['board'] = self._games[player_id].current_state().to_dict()
            return state

    def close(self) -> None:
        """Expires the room; in-flight and later calls fail with NotFound."""
        with self._lock:
            self._closed = True
            for game in self._games.values():
                game.close()
