from collections import Counter

import pytest

from wordle_arena.config import WORD_LIST
from wordle_arena.errors import InvalidInput
from wordle_arena.models.game import LetterStatus
from wordle_arena.services.evaluator import evaluate

C = LetterStatus.CORRECT
P = LetterStatus.PRESENT
A = LetterStatus.ABSENT


def test_exact_match_is_all_correct():
    result = evaluate("CRANE", "CRANE")

    assert result.statuses == (C, C, C, C, C)
    assert result.is_win


def test_speed_erase_duplicate_letters():
    # SPEED has two E's, so both unmatched E's in ERASE find an occurrence
    result = evaluate("SPEED", "ERASE")

    assert result.guess == "ERASE"
    assert result.statuses == (P, A, A, P, P)


def test_single_secret_letter_matched_in_place_is_not_reused():
    # One E in CRANE, matched at the last position; the earlier E's get nothing
    result = evaluate("CRANE", "EERIE")

    assert result.statuses == (A, A, P, A, C)


def test_present_consumes_one_occurrence():
    result = evaluate("ABBEY", "BOBBY")

    # B at index 2 is exact; only one B remains for index 0, none for index 3
    assert result.statuses == (P, A, C, A, C)


def test_all_absent():
    assert evaluate("CRANE", "BUILT").statuses == (A, A, A, A, A)


@pytest.mark.parametrize("secret, guess", [
    ("CRANE", "CRAN"),
    ("CRANE", "CRANES"),
    ("CRAN", "CRANE"),
    ("CRANE", None),
])
def test_rejects_wrong_length(secret, guess):
    with pytest.raises(InvalidInput):
        evaluate(secret, guess)


def test_counts_never_exceed_secret_multiplicity():
    words = WORD_LIST[:40]
    for secret in words:
        secret_counts = Counter(secret)
        for guess in words:
            result = evaluate(secret, guess)
            exact = sum(1 for s, g in zip(secret, guess) if s == g)
            assert result.statuses.count(C) == exact

            matched = Counter(
                letter for letter, status in zip(guess, result.statuses) if status != A
            )
            for letter, count in matched.items():
                assert count <= secret_counts[letter]
