"""
Letter Evaluator

Implements the authentic Wordle letter evaluation algorithm.
"""

from typing import List, Optional

from ..config.game_settings import WORD_LENGTH
from ..errors import InvalidInput
from ..models.game import GuessResult, LetterStatus


def evaluate(secret: str, guess: str) -> GuessResult:
    """
    Scores a guess against a secret word.

    Two passes resolve duplicate letters: exact position matches are marked
    CORRECT first and consume that letter from the secret; the remaining
    guess letters are then marked PRESENT while unconsumed occurrences are
    left, otherwise ABSENT.

    Args:
        secret: The 5-letter answer
        guess: The 5-letter guess

    Returns:
        GuessResult index-aligned to the guess

    Raises:
        InvalidInput: If either word is not exactly 5 characters
    """
    if not isinstance(secret, str) or len(secret) != WORD_LENGTH:
        raise InvalidInput("Secret must be exactly 5 letters")
    if not isinstance(guess, str) or len(guess) != WORD_LENGTH:
        raise InvalidInput("Guess must be exactly 5 letters")

    statuses: List[Optional[LetterStatus]] = [None] * WORD_LENGTH
    # Working copy tracks which secret letters are still unconsumed
    remaining: List[Optional[str]] = list(secret)

    # First pass: exact position matches
    for i in range(WORD_LENGTH):
        if guess[i] == secret[i]:
            statuses[i] = LetterStatus.CORRECT
            remaining[i] = None

    # Second pass: present letters and misses
    for i in range(WORD_LENGTH):
        if statuses[i] is not None:
            continue
        letter = guess[i]
        if letter in remaining:
            statuses[i] = LetterStatus.PRESENT
            remaining[remaining.index(letter)] = None
        else:
            statuses[i] = LetterStatus.ABSENT

    return GuessResult(guess=guess, statuses=tuple(statuses))
