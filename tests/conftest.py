import os
import random
import tempfile

os.environ.setdefault('LOG_DIR', os.path.join(tempfile.gettempdir(), 'wordle_arena_test_logs'))

import pytest

from wordle_arena import create_app
from wordle_arena.config import TestingConfig, default_settings, resolve_settings
from wordle_arena.services.game_service import initialize_game_service
from wordle_arena.services.lobby_service import initialize_lobby_service
from wordle_arena.services.room_coordinator import Room
from wordle_arena.services.session_registry import initialize_session_registry


@pytest.fixture
def base_settings():
    return default_settings()


@pytest.fixture
def registry():
    return initialize_session_registry(TestingConfig.SESSION_IDLE_TIMEOUT_SECONDS)


@pytest.fixture
def game_service(registry, base_settings):
    return initialize_game_service(registry, base_settings)


@pytest.fixture
def lobby_service(registry, base_settings):
    return initialize_lobby_service(registry, base_settings, TestingConfig.ROOM_CAPACITY)


@pytest.fixture
def app_and_socketio(game_service, lobby_service):
    return create_app(TestingConfig)


@pytest.fixture
def client(app_and_socketio):
    app, _ = app_and_socketio
    return app.test_client()


@pytest.fixture
def make_room(base_settings):
    def _make_room(capacity=4, **overrides):
        settings = resolve_settings(base_settings, **overrides)
        return Room("room-1", settings, capacity=capacity, host_key="host", rng=random.Random(7))
    return _make_room
