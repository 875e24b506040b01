"""
Lobby Controller

Handles all multiplayer room HTTP endpoints. Every room mutation is followed
by a room_state_update broadcast to the room's subscribers.
"""

from flask import Blueprint, request

from ..errors import ServiceUnavailable
from ..models.game import TerminalState
from ..services.lobby_service import get_lobby_service
from ..utils.decorators import game_route, require_host_key
from ..utils.game_logger import game_logger
from ..utils.helpers import get_request_data, require_field, settings_overrides
from ..websocket.handlers import broadcast_room_state

lobby_bp = Blueprint('lobby', __name__)


def _lobby_service():
    lobby_service = get_lobby_service()
    if not lobby_service:
        raise ServiceUnavailable('Lobby service unavailable')
    return lobby_service


@lobby_bp.route('/rooms', methods=['POST'])
@game_route('create_room')
def create_room():
    """Create a room in the lobby phase."""
    data = get_request_data()
    return _lobby_service().create_room(capacity=data.get('capacity'), **settings_overrides(data))


@lobby_bp.route('/rooms/<room_id>/join', methods=['POST'])
@game_route('join_room', 'room_id')
def join_room(room_id):
    data = get_request_data()
    result = _lobby_service().join_room(
        room_id, require_field(data, 'player_name'), data.get('player_id')
    )
    broadcast_room_state(room_id)
    return result


@lobby_bp.route('/rooms/<room_id>/leave', methods=['POST'])
@game_route('leave_room', 'room_id')
def leave_room(room_id):
    player_id = require_field(get_request_data(), 'player_id')
    result = _lobby_service().leave_room(room_id, player_id)
    broadcast_room_state(room_id)
    return result


@lobby_bp.route('/rooms/<room_id>/ready', methods=['POST'])
@game_route('mark_ready', 'room_id')
def mark_ready(room_id):
    player_id = require_field(get_request_data(), 'player_id')
    result = _lobby_service().mark_ready(room_id, player_id)
    broadcast_room_state(room_id)
    return result


@lobby_bp.route('/rooms/<room_id>/guess', methods=['POST'])
@game_route('room_guess', 'room_id')
def make_room_guess(room_id):
    """Submit a guess for one player in an active room."""
    data = get_request_data()
    player_id = require_field(data, 'player_id')
    guess = require_field(data, 'guess')
    
    outcome = _lobby_service().submit_guess(room_id, player_id, guess)
    
    if outcome.terminal != TerminalState.NONE:
        game_logger.log_game_event(
            room_id, f'game_{outcome.terminal.value}', request.remote_addr,
            player_id=player_id, final_guess=outcome.result.guess
        )
    broadcast_room_state(room_id)
    return outcome.to_dict()


@lobby_bp.route('/rooms/<room_id>/state', methods=['GET'])
@game_route('get_room_state', 'room_id')
def get_room_state(room_id):
    state = _lobby_service().get_room_state(room_id, request.args.get('player_id'))
    return {'state': state}


@lobby_bp.route('/rooms/<room_id>/settings', methods=['PUT'])
@game_route('update_room_settings', 'room_id')
@require_host_key
def update_room_settings(room_id, host_key=None):
    data = get_request_data()
    settings = _lobby_service().update_settings(room_id, host_key, **settings_overrides(data))
    broadcast_room_state(room_id)
    return {'settings': settings.to_dict()}


@lobby_bp.route('/rooms/<room_id>/word_list', methods=['GET'])
@game_route('get_room_word_list', 'room_id')
@require_host_key
def get_room_word_list(room_id, host_key=None):
    return {'word_list': _lobby_service().get_word_list(room_id, host_key)}


@lobby_bp.route('/rooms/<room_id>', methods=['DELETE'])
@game_route('close_room', 'room_id')
@require_host_key
def close_room(room_id, host_key=None):
    closed = _lobby_service().close_room(room_id, host_key)
    broadcast_room_state(room_id, closed=True)
    return {'closed': closed}
