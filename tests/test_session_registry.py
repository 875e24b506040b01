import threading

import pytest

from wordle_arena.errors import NotFound
from wordle_arena.services.game_instance import GameInstance
from wordle_arena.services.session_registry import GAME, ROOM, SessionRegistry


class FakeClock:
    def __init__(self):
        self.now = 0.0

    def __call__(self):
        return self.now


def _new_game(game_id):
    return GameInstance.create("CRANE", 6, game_id=game_id)


def test_create_and_get():
    registry = SessionRegistry()

    game_id = registry.create(GAME, _new_game)

    game = registry.get(game_id)
    assert game.game_id == game_id
    assert registry.get(game_id, GAME) is game
    assert game_id in registry
    assert len(registry) == 1


def test_unknown_or_wrong_kind_is_not_found():
    registry = SessionRegistry()
    game_id = registry.create(GAME, _new_game)

    with pytest.raises(NotFound):
        registry.get("nope")
    with pytest.raises(NotFound):
        registry.get(game_id, ROOM)


def test_expire_closes_the_entity():
    registry = SessionRegistry()
    game_id = registry.create(GAME, _new_game)
    game = registry.get(game_id)

    assert registry.expire(game_id) is True
    assert registry.expire(game_id) is False

    with pytest.raises(NotFound):
        registry.get(game_id)
    with pytest.raises(NotFound):
        game.submit_guess("CRANE")


def test_replace_swaps_and_closes_old():
    registry = SessionRegistry()
    game_id = registry.create(GAME, _new_game)
    old = registry.get(game_id)

    registry.replace(game_id, _new_game(game_id))

    assert registry.get(game_id) is not old
    with pytest.raises(NotFound):
        old.submit_guess("CRANE")


def test_sweep_only_expires_idle_sessions():
    clock = FakeClock()
    registry = SessionRegistry(idle_timeout_seconds=10, clock=clock)
    idle_id = registry.create(GAME, _new_game)
    clock.now = 8
    busy_id = registry.create(GAME, _new_game)

    clock.now = 15
    registry.get(busy_id)
    expired = registry.sweep_idle()

    assert expired == [idle_id]
    assert busy_id in registry
    assert idle_id not in registry


def test_count_by_kind():
    registry = SessionRegistry()
    registry.create(GAME, _new_game)
    registry.create(ROOM, _new_game)
    registry.create(ROOM, _new_game)

    assert registry.count(GAME) == 1
    assert registry.count(ROOM) == 2
    assert registry.count() == 3


def test_concurrent_creates_get_unique_ids():
    registry = SessionRegistry()
    ids = []
    lock = threading.Lock()

    def create_many():
        for _ in range(50):
            game_id = registry.create(GAME, _new_game)
            with lock:
                ids.append(game_id)

    threads = [threading.Thread(target=create_many) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert len(set(ids)) == 400
    assert len(registry) == 400
