"""
Game Data Models

Contains all game-related data structures and enums.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional, Tuple


class LetterStatus(Enum):
    """Letter evaluation status for one letter-position pairing."""
    CORRECT = "correct"
    PRESENT = "present"
    ABSENT = "absent"
    UNKNOWN = "unknown"  # Keyboard hints only; never part of a GuessResult


class TerminalState(Enum):
    """Termination state of a single game."""
    NONE = "none"
    WON = "won"
    LOST = "lost"


@dataclass(frozen=True)
class GameSettings:
    """Rules a game (or every game in a room) is played under."""
    max_attempts: int
    word_list: Tuple[str, ...]
    host_cheating: bool = False
    enforce_dictionary: bool = False

    def to_dict(self) -> Dict:
        return {
            'max_attempts': self.max_attempts,
            'word_count': len(self.word_list),
            'host_cheating': self.host_cheating,
            'enforce_dictionary': self.enforce_dictionary
        }


@dataclass(frozen=True)
class GuessResult:
    """A guess and its per-position statuses, index-aligned to the guess."""
    guess: str
    statuses: Tuple[LetterStatus, ...]

    @property
    def is_win(self) -> bool:
        return all(status == LetterStatus.CORRECT for status in self.statuses)

    def pattern_key(self) -> str:
        return ''.join(status.value[0] for status in self.statuses)

    def to_dict(self) -> Dict:
        return {
            'guess': self.guess,
            'letter_statuses': [status.value for status in self.statuses]
        }


@dataclass
class GuessOutcome:
    """What a caller gets back from one accepted guess."""
    result: GuessResult
    terminal: TerminalState
    keyboard_hints: Dict[str, str]
    message: str = ""
    waiting_for_others: Optional[bool] = None
    round_complete: Optional[bool] = None
    phase: Optional[str] = None

    def to_dict(self) -> Dict:
        data = {
            'result': self.result.to_dict(),
            'terminal': self.terminal.value,
            'keyboard_hints': dict(self.keyboard_hints),
            'message': self.message
        }
        if self.waiting_for_others is not None:
            data['waiting_for_others'] = self.waiting_for_others
        if self.round_complete is not None:
            data['round_complete'] = self.round_complete
        if self.phase is not None:
            data['phase'] = self.phase
        return data


@dataclass
class GameState:
    """Read-only snapshot of one game (the answer only once it is over)."""
    game_id: str
    max_attempts: int
    attempts: List[GuessResult]
    terminal: TerminalState
    keyboard_hints: Dict[str, str]
    host_cheating: bool = False
    answer: Optional[str] = None

    @property
    def attempts_used(self) -> int:
        return len(self.attempts)

    def to_dict(self) -> Dict:
        return {
            'game_id': self.game_id,
            'max_attempts': self.max_attempts,
            'attempts_used': self.attempts_used,
            'attempts': [attempt.to_dict() for attempt in self.attempts],
            'terminal': self.terminal.value,
            'game_over': self.terminal != TerminalState.NONE,
            'keyboard_hints': dict(self.keyboard_hints),
            'host_cheating': self.host_cheating,
            'answer': self.answer
        }
