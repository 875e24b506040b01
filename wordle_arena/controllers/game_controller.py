"""
Game Controller

Handles all single-player HTTP endpoints.
"""

from flask import Blueprint, request

from ..errors import ServiceUnavailable
from ..models.game import TerminalState
from ..services.game_service import get_game_service
from ..services.session_registry import GAME, ROOM, get_session_registry
from ..utils.decorators import game_route
from ..utils.game_logger import game_logger
from ..utils.helpers import get_request_data, require_field, settings_overrides

game_bp = Blueprint('game', __name__)


def _game_service():
    game_service = get_game_service()
    if not game_service:
        raise ServiceUnavailable('Game service unavailable')
    return game_service


@game_bp.route('/new_game', methods=['POST'])
@game_route('new_game')
def new_game():
    """Create a new game session."""
    data = get_request_data()
    return _game_service().create_new_game(**settings_overrides(data))


@game_bp.route('/game/<game_id>/state', methods=['GET'])
@game_route('get_state', 'game_id')
def get_state(game_id):
    """Get current game state."""
    state = _game_service().get_game_state(game_id)
    return {'state': state.to_dict()}


@game_bp.route('/game/<game_id>/guess', methods=['POST'])
@game_route('submit_guess', 'game_id')
def make_guess(game_id):
    """Submit a guess for validation and evaluation."""
    guess = require_field(get_request_data(), 'guess')
    outcome = _game_service().make_guess(game_id, guess)
    
    if outcome.terminal != TerminalState.NONE:
        game_logger.log_game_event(
            game_id, f'game_{outcome.terminal.value}', request.remote_addr,
            final_guess=outcome.result.guess
        )
    return outcome.to_dict()


@game_bp.route('/game/<game_id>/settings', methods=['PUT'])
@game_route('update_settings', 'game_id')
def update_settings(game_id):
    """Apply new settings; the game restarts under the same id."""
    data = get_request_data()
    settings = _game_service().update_settings(game_id, **settings_overrides(data))
    return {'settings': settings.to_dict()}


@game_bp.route('/game/<game_id>/word_list', methods=['GET'])
@game_route('get_word_list', 'game_id')
def get_word_list(game_id):
    """Return the configured word pool (never the secret)."""
    return {'word_list': _game_service().get_word_list(game_id)}


@game_bp.route('/game/<game_id>', methods=['DELETE'])
@game_route('delete_game', 'game_id')
def delete_game(game_id):
    """Expire a game session."""
    deleted = _game_service().delete_game(game_id)
    return {'deleted': deleted}


@game_bp.route('/health', methods=['GET'])
@game_route('health_check')
def health_check():
    """Health check endpoint."""
    registry = get_session_registry()
    return {
        'status': 'healthy',
        'active_games': registry.count(GAME) if registry else 0,
        'active_rooms': registry.count(ROOM) if registry else 0
    }
