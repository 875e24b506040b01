from wordle_arena.models.game import GuessResult, LetterStatus
from wordle_arena.services.evaluator import evaluate
from wordle_arena.services.game_instance import GameInstance
from wordle_arena.services.keyboard import empty_hints, fold, hints_from_attempts


def test_empty_hints_cover_alphabet():
    hints = empty_hints()

    assert len(hints) == 26
    assert set(hints.values()) == {"unknown"}


def test_fold_marks_statuses():
    hints = fold(empty_hints(), evaluate("CRANE", "CRATE"))

    assert hints["C"] == "correct"
    assert hints["T"] == "absent"
    assert hints["Z"] == "unknown"


def test_correct_is_never_downgraded():
    hints = fold(None, evaluate("CRANE", "CRANE"))
    hints = fold(hints, evaluate("CRANE", "ACORN"))

    assert hints["A"] == "correct"
    assert hints["C"] == "correct"


def test_present_is_never_downgraded_to_absent():
    # E is seen as present first, then reported absent at another position
    hints = fold(None, GuessResult("EXXXX", (LetterStatus.PRESENT,) + (LetterStatus.ABSENT,) * 4))
    hints = fold(hints, GuessResult("XEXXX", (LetterStatus.ABSENT,) * 5))

    assert hints["E"] == "present"


def test_duplicate_letters_in_one_guess_keep_the_strongest():
    hints = fold(None, evaluate("CRANE", "EERIE"))

    assert hints["E"] == "correct"


def test_fold_is_idempotent_and_pure():
    prior = fold(None, evaluate("SPEED", "CRANE"))
    snapshot = dict(prior)
    result = evaluate("SPEED", "ERASE")

    once = fold(prior, result)
    twice = fold(once, result)

    assert once == twice
    assert prior == snapshot


def test_incremental_matches_recompute():
    attempts = [evaluate("SHAKE", guess) for guess in ("CRANE", "SLATE", "SHAPE", "SHAKE")]

    incremental = empty_hints()
    for result in attempts:
        incremental = fold(incremental, result)

    assert incremental == hints_from_attempts(attempts)


def test_recompute_takes_the_strongest_status_per_letter():
    attempts = [
        GuessResult("EXXXX", (LetterStatus.PRESENT,) + (LetterStatus.ABSENT,) * 4),
        GuessResult("XXXXE", (LetterStatus.ABSENT,) * 4 + (LetterStatus.CORRECT,)),
        GuessResult("EEXXX", (LetterStatus.ABSENT,) * 5),
    ]

    hints = hints_from_attempts(attempts)

    assert hints["E"] == "correct"
    assert hints["X"] == "absent"
    assert hints["Q"] == "unknown"


def test_game_hints_match_recompute_with_duplicate_letters():
    game = GameInstance.create("SPEED", 6)
    for guess in ("ERASE", "GEESE", "EERIE", "SPELL", "STEED"):
        game.submit_guess(guess)

    state = game.current_state()

    assert state.keyboard_hints == hints_from_attempts(state.attempts)
    assert state.keyboard_hints["E"] == "correct"
    assert state.keyboard_hints["S"] == "correct"
