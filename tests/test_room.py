import threading

import pytest

from wordle_arena.errors import (
    DuplicatePlayer, EmptyWordPool, GameAlreadyOver, InvalidConfig, InvalidWordList,
    NotFound, NotHost, RoomAlreadyStarted, RoomFinished, RoomFull, RoomNotStarted, UnknownPlayer
)
from wordle_arena.models.game import TerminalState
from wordle_arena.models.room import RoomPhase


def _ready_room(make_room, players=("a", "b"), **overrides):
    room = make_room(**overrides)
    for player_id in players:
        room.join(player_id, player_id.upper())
    for player_id in players:
        room.set_ready(player_id)
    return room


def test_join_keeps_insertion_order(make_room):
    room = make_room()
    room.join("p2", "Zed")
    room.join("p1", "Amy")
    room.join("p3", "Amy")

    assert [player['id'] for player in room.roster()] == ["p2", "p1", "p3"]
    assert all(not player['ready'] for player in room.roster())


def test_duplicate_player_is_rejected(make_room):
    room = make_room()
    room.join("p1", "Amy")

    with pytest.raises(DuplicatePlayer):
        room.join("p1", "Someone else")


def test_room_full(make_room):
    room = make_room(capacity=2)
    room.join("p1", "A")
    room.join("p2", "B")

    with pytest.raises(RoomFull):
        room.join("p3", "C")


def test_ready_requires_known_player(make_room):
    room = make_room()

    with pytest.raises(UnknownPlayer):
        room.set_ready("ghost")


def test_empty_room_never_activates(make_room):
    room = make_room()

    assert room.phase == RoomPhase.LOBBY
    with pytest.raises(RoomNotStarted):
        room.submit_guess("p1", "CRANE")


def test_activates_only_when_everyone_is_ready(make_room):
    room = make_room()
    room.join("a", "A")
    room.join("b", "B")

    assert room.set_ready("a") == RoomPhase.LOBBY
    assert room.set_ready("b") == RoomPhase.ACTIVE


def test_leaving_can_open_the_gate(make_room):
    room = make_room()
    room.join("a", "A")
    room.join("b", "B")
    room.set_ready("a")

    room.leave("b")

    assert room.phase == RoomPhase.ACTIVE


def test_shared_secret_without_host_cheating(make_room):
    room = _ready_room(make_room, word_list=["CRANE", "SLATE", "BLOCK"])

    secrets = {room.game_for(player_id).secret for player_id in ("a", "b")}
    assert len(secrets) == 1
    assert room.game_for("a").max_attempts == room.game_for("b").max_attempts


def test_host_cheating_gives_each_player_an_adversary(make_room):
    room = _ready_room(make_room, word_list=["CRANE", "CRATE", "CRAZE", "BLOCK"], host_cheating=True)

    game_a = room.game_for("a")
    game_b = room.game_for("b")
    assert game_a.host_cheating and game_b.host_cheating
    assert game_a._selector is not game_b._selector

    room.submit_guess("a", "CRANE")
    assert game_b._selector.candidates == ("BLOCK", "CRANE", "CRATE", "CRAZE")


def test_settings_change_resets_readiness(make_room):
    room = make_room()
    room.join("a", "A")
    room.join("b", "B")
    room.set_ready("a")

    settings = room.update_settings(max_attempts=3)

    assert settings.max_attempts == 3
    assert all(not player['ready'] for player in room.roster())


def test_rejected_word_list_changes_nothing(make_room):
    room = make_room(word_list=["CRANE"])
    room.join("a", "A")
    room.join("b", "B")
    room.set_ready("a")

    with pytest.raises(InvalidWordList) as exc_info:
        room.update_settings(word_list=["SLATE", "TOOLONG", "ok", "BLOCK"])

    assert exc_info.value.invalid_words == ["TOOLONG", "ok"]
    assert room.word_list() == ["CRANE"]
    assert room.roster()[0]['ready'] is True


@pytest.mark.parametrize("overrides", [
    {'max_attempts': 0},
    {'word_list': []},
    {'host_cheating': "false"},
    {'enforce_dictionary': 1},
])
def test_invalid_settings_are_config_errors(make_room, overrides):
    room = make_room()

    with pytest.raises(InvalidConfig):
        room.update_settings(**overrides)
    assert room.settings.host_cheating is False


def test_empty_word_list_is_an_empty_pool_config_error(make_room):
    with pytest.raises(EmptyWordPool) as exc_info:
        make_room().update_settings(word_list=[])

    assert isinstance(exc_info.value, InvalidConfig)


def test_lobby_operations_closed_once_active(make_room):
    room = _ready_room(make_room)

    with pytest.raises(RoomAlreadyStarted):
        room.update_settings(max_attempts=3)
    with pytest.raises(RoomAlreadyStarted):
        room.join("c", "C")


def test_round_tracking(make_room):
    room = _ready_room(make_room, word_list=["CRANE"])

    first = room.submit_guess("a", "SLATE")
    assert first.waiting_for_others is True
    assert first.round_complete is False

    second = room.submit_guess("b", "BLOCK")
    assert second.waiting_for_others is False
    assert second.round_complete is True
    assert room.snapshot()['completed_rounds'] == 1


def test_two_player_scenario(make_room):
    room = _ready_room(make_room, word_list=["CRANE"], max_attempts=6)
    assert room.game_for("a").secret == "CRANE"
    assert room.game_for("b").secret == "CRANE"

    won = room.submit_guess("a", "CRANE")
    assert won.result.is_win
    assert won.terminal == TerminalState.WON
    assert won.waiting_for_others is True
    assert room.phase == RoomPhase.ACTIVE

    with pytest.raises(GameAlreadyOver):
        room.submit_guess("a", "CRANE")

    for _ in range(5):
        assert room.submit_guess("b", "SLATE").terminal == TerminalState.NONE
    lost = room.submit_guess("b", "SLATE")

    assert lost.terminal == TerminalState.LOST
    assert room.phase == RoomPhase.FINISHED
    with pytest.raises(RoomFinished):
        room.submit_guess("b", "CRANE")

    standings = room.snapshot()['standings']
    assert [entry['player_id'] for entry in standings] == ["a", "b"]


def test_snapshot_shows_only_own_board(make_room):
    room = _ready_room(make_room, word_list=["CRANE"])
    room.submit_guess("a", "SLATE")

    state = room.snapshot("a")

    assert state['board']['attempts_used'] == 1
    assert state['board']['answer'] is None
    assert 'board' not in room.snapshot()
    with pytest.raises(UnknownPlayer):
        room.snapshot("ghost")


def test_host_key_check(make_room):
    room = make_room()

    room.check_host("host")
    with pytest.raises(NotHost):
        room.check_host("wrong")


def test_closed_room_rejects_everything(make_room):
    room = _ready_room(make_room, word_list=["CRANE"])
    room.close()

    with pytest.raises(NotFound):
        room.submit_guess("a", "CRANE")
    with pytest.raises(NotFound):
        room.snapshot()


def test_concurrent_guesses_are_serialized(make_room):
    players = tuple(f"p{i}" for i in range(4))
    room = _ready_room(make_room, players=players, word_list=["CRANE"], max_attempts=6)
    errors = []

    def play(player_id):
        try:
            for _ in range(6):
                room.submit_guess(player_id, "SLATE")
        except Exception as e:
            errors.append(e)

    threads = [threading.Thread(target=play, args=(player_id,)) for player_id in players]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert errors == []
    assert room.phase == RoomPhase.FINISHED
    assert all(room.game_for(player_id).attempts_used == 6 for player_id in players)


def test_guess_outcome_carries_the_phase(make_room):
    room = _ready_room(make_room, word_list=["CRANE"], max_attempts=1)

    first = room.submit_guess("a", "SLATE")
    last = room.submit_guess("b", "SLATE")

    assert first.phase == "active"
    assert last.phase == "finished"
    assert last.to_dict()['phase'] == "finished"
