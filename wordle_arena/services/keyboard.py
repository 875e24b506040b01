"""
Keyboard Hint Aggregator

Folds guess feedback into the best-known status of every letter so the client
keyboard can be coloured. Status only ever strengthens:
CORRECT > PRESENT > ABSENT > UNKNOWN.
"""

import string
from typing import Dict, Iterable, Mapping, Optional

from ..models.game import GuessResult, LetterStatus

_PRECEDENCE = {
    LetterStatus.UNKNOWN: 0,
    LetterStatus.ABSENT: 1,
    LetterStatus.PRESENT: 2,
    LetterStatus.CORRECT: 3,
}


def empty_hints() -> Dict[str, str]:
    """Every letter A-Z marked unknown."""
    return {letter: LetterStatus.UNKNOWN.value for letter in string.ascii_uppercase}


def fold(existing: Optional[Mapping[str, str]], result: GuessResult) -> Dict[str, str]:
    """
    Returns new hints with one guess result applied.

    The input mapping is never mutated. Folding the same result twice gives
    the same hints as folding it once.
    """
    hints = empty_hints()
    if existing:
        hints.update(existing)

    for letter, new_status in zip(result.guess, result.statuses):
        current_status = LetterStatus(hints.get(letter, LetterStatus.UNKNOWN.value))
        if _PRECEDENCE[new_status] > _PRECEDENCE[current_status]:
            hints[letter] = new_status.value
    return hints


def hints_from_attempts(attempts: Iterable[GuessResult]) -> Dict[str, str]:
    """
    Recomputes hints from scratch over a full attempt history.

    Takes the strongest status seen for each letter across every attempt,
    without going through fold.
    """
    strongest = {letter: LetterStatus.UNKNOWN for letter in string.ascii_uppercase}
    for result in attempts:
        for letter, status in zip(result.guess, result.statuses):
            strongest[letter] = max(strongest.get(letter, LetterStatus.UNKNOWN), status,
                                    key=_PRECEDENCE.__getitem__)
    return {letter: status.value for letter, status in strongest.items()}
