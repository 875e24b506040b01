"""
Adversarial Selector (host cheating / Absurdle mode)

Instead of committing to a secret up front, the host keeps every word that is
still consistent with the feedback given so far and answers each guess with
the feedback that keeps the most words alive.
"""

import threading
from typing import Dict, Iterable, List, Optional, Tuple

from ..errors import EmptyWordPool
from ..models.game import GuessResult
from .evaluator import evaluate


class AdversarialSelector:
    """
    Narrowing candidate set for one player.

    Every returned GuessResult is produced by at least one surviving
    candidate, so the host never contradicts earlier feedback.
    """

    def __init__(self, word_pool: Iterable[str]):
        candidates = sorted(set(word_pool))
        if not candidates:
            raise EmptyWordPool("Adversarial mode needs at least one candidate word")
        self._candidates: List[str] = candidates
        self._lock = threading.Lock()

    @property
    def candidates(self) -> Tuple[str, ...]:
        with self._lock:
            return tuple(self._candidates)

    @property
    def committed_secret(self) -> Optional[str]:
        """The secret once only one candidate is left, otherwise None."""
        with self._lock:
            return self._candidates[0] if len(self._candidates) == 1 else None

    def respond(self, guess: str) -> GuessResult:
        """
        Chooses the feedback for a guess and narrows the candidate set to it.

        Returns:
            GuessResult actually shown to the player
        """
        with self._lock:
            if len(self._candidates) == 1:
                return evaluate(self._candidates[0], guess)

            chosen, words = self._worst_case_group(guess, self._candidates)
            self._candidates = words
            return chosen

    @staticmethod
    def _worst_case_group(guess: str, candidates: List[str]) -> Tuple[GuessResult, List[str]]:
        """
        Groups candidates by the pattern they would produce for this guess and
        picks the largest group.

        Ties prefer a non-winning pattern, then the lexicographically smallest
        pattern key, then the smallest first word. Candidates are kept sorted,
        so each group's first word is its smallest.
        """
        pattern_groups: Dict[str, Dict] = {}

        for word in candidates:
            pattern = evaluate(word, guess)
            pattern_key = pattern.pattern_key()
            if pattern_key not in pattern_groups:
                pattern_groups[pattern_key] = {
                    'pattern': pattern,
                    'words': []
                }
            pattern_groups[pattern_key]['words'].append(word)

        chosen_key = min(
            pattern_groups,
            key=lambda key: (
                -len(pattern_groups[key]['words']),
                pattern_groups[key]['pattern'].is_win,
                key,
                pattern_groups[key]['words'][0]
            )
        )
        chosen_group = pattern_groups[chosen_key]
        return chosen_group['pattern'], chosen_group['words']
