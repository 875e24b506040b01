"""
Game Instance

One player's attempt sequence against one secret word, or against an
adversarial host when host cheating is on.
"""

import random
import threading
from typing import Dict, FrozenSet, Iterable, List, Optional

from ..config.game_settings import normalize_word
from ..errors import GameAlreadyOver, InvalidConfig, InvalidGuess, InvalidInput, NotFound
from ..models.game import GameSettings, GameState, GuessOutcome, GuessResult, TerminalState
from .absurdle import AdversarialSelector
from .evaluator import evaluate
from .keyboard import empty_hints, fold

WIN_MESSAGE = "Congratulations! You guessed the word!"
LOSS_MESSAGE = "Game over! The word was {answer}"


class GameInstance:
    """
    Owns the attempts, keyboard hints and termination state of one game.

    submit_guess is the only mutator. It is atomic: the result is computed
    before any state changes, all under the instance lock.
    """

    def __init__(self,
                 game_id: str,
                 max_attempts: int,
                 secret: Optional[str] = None,
                 selector: Optional[AdversarialSelector] = None,
                 accepted_words: Optional[Iterable[str]] = None):
        if isinstance(max_attempts, bool) or not isinstance(max_attempts, int) or max_attempts < 1:
            raise InvalidConfig("max_attempts must be an integer of at least 1")
        if (secret is None) == (selector is None):
            raise InvalidConfig("A game needs either a secret or an adversarial selector")

        if secret is not None:
            normalized = normalize_word(secret)
            if normalized is None:
                raise InvalidInput("Secret must be exactly 5 letters")
            secret = normalized

        self.game_id = game_id
        self.max_attempts = max_attempts
        self._secret = secret
        self._selector = selector
        self._accepted_words: Optional[FrozenSet[str]] = (
            frozenset(accepted_words) if accepted_words is not None else None
        )
        self._attempts: List[GuessResult] = []
        self._keyboard_hints: Dict[str, str] = empty_hints()
        self._terminal = TerminalState.NONE
        self._closed = False
        self._lock = threading.Lock()
        self.settings: Optional[GameSettings] = None

    @classmethod
    def create(cls, secret: str, max_attempts: int, game_id: str = "", **kwargs) -> "GameInstance":
        """Creates a game against a fixed secret."""
        return cls(game_id, max_attempts, secret=secret, **kwargs)

    @classmethod
    def from_settings(cls, game_id: str, settings: GameSettings, rng=None,
                      secret: Optional[str] = None) -> "GameInstance":
        """
        Builds a game from validated settings.

        With host cheating on, the game gets its own selector seeded from the
        settings' word list. Otherwise it uses the given secret, or draws one.
        """
        accepted_words = settings.word_list if settings.enforce_dictionary else None

        if settings.host_cheating:
            game = cls(game_id, settings.max_attempts,
                       selector=AdversarialSelector(settings.word_list),
                       accepted_words=accepted_words)
        else:
            if secret is None:
                secret = (rng or random).choice(settings.word_list)
            game = cls(game_id, settings.max_attempts, secret=secret, accepted_words=accepted_words)
        game.settings = settings
        return game

    @property
    def host_cheating(self) -> bool:
        return self._selector is not None

    @property
    def secret(self) -> Optional[str]:
        """The committed secret; None while an adversary is still undecided."""
        if self._selector is not None:
            return self._selector.committed_secret
        return self._secret

    @property
    def terminal(self) -> TerminalState:
        with self._lock:
            return self._terminal

    @property
    def attempts_used(self) -> int:
        with self._lock:
            return len(self._attempts)

    @property
    def is_over(self) -> bool:
        return self.terminal != TerminalState.NONE

    def close(self) -> None:
        """Marks the game expired; later calls fail with NotFound."""
        with self._lock:
            self._closed = True

    def _validate_guess(self, guess) -> str:
        normalized = normalize_word(guess)
        if normalized is None:
            raise InvalidGuess("Guess must be exactly 5 letters")
        if self._accepted_words is not None and normalized not in self._accepted_words:
            raise InvalidGuess("Word not in the allowed list")
        return normalized

    def submit_guess(self, guess: str) -> GuessOutcome:
        """
        Evaluates a guess and records it.

        Raises:
            NotFound: If the game has been expired
            GameAlreadyOver: If the game is already won or lost
            InvalidGuess: If the guess is not 5 letters, or not in the word
                list when dictionary enforcement is on
        """
        with self._lock:
            if self._closed:
                raise NotFound("Game not found")
            if self._terminal != TerminalState.NONE:
                raise GameAlreadyOver("Game is already over")

            normalized_guess = self._validate_guess(guess)

            if self._selector is not None:
                result = self._selector.respond(normalized_guess)
            else:
                result = evaluate(self._secret, normalized_guess)

            self._attempts.append(result)
            assert len(self._attempts) <= self.max_attempts, "attempts exceeded max_attempts"
            self._keyboard_hints = fold(self._keyboard_hints, result)

            message = ""
            if result.is_win:
                self._terminal = TerminalState.WON
                message = WIN_MESSAGE
            elif len(self._attempts) == self.max_attempts:
                self._terminal = TerminalState.LOST
                message = LOSS_MESSAGE.format(answer=self._answer())

            return GuessOutcome(
                result=result,
                terminal=self._terminal,
                keyboard_hints=dict(self._keyboard_hints),
                message=message
            )

    def _answer(self) -> Optional[str]:
        if self._selector is not None:
            # Any survivor is consistent with every answer given
            return self._selector.candidates[0]
        return self._secret

    def current_state(self) -> GameState:
        """Read-only snapshot. The answer is only included once the game is over."""
        with self._lock:
            return GameState(
                game_id=self.game_id,
                max_attempts=self.max_attempts,
                attempts=list(self._attempts),
                terminal=self._terminal,
                keyboard_hints=dict(self._keyboard_hints),
                host_cheating=self._selector is not None,
                answer=self._answer() if self._terminal != TerminalState.NONE else None
            )
