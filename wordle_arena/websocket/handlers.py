"""
WebSocket Event Handlers

Push channel for room state. Clients subscribe to a room and receive
room_state_update after every change instead of polling; nothing here ever
blocks the engine.
"""

from flask import current_app
from flask_socketio import emit, join_room, leave_room

from ..errors import NotFound, WordleError
from ..services.lobby_service import get_lobby_service
from ..utils.game_logger import game_logger


def _room_channel(room_id: str) -> str:
    return f"room_{room_id}"


def broadcast_room_state(room_id: str, closed: bool = False) -> None:
    """
    Broadcasts the public room snapshot to everyone subscribed to the room.

    Must be called inside an application context.
    """
    socketio = getattr(current_app, 'socketio', None)
    lobby_service = get_lobby_service()
    if socketio is None or lobby_service is None:
        return

    if closed:
        payload = {'room_id': room_id, 'closed': True}
    else:
        try:
            payload = {'success': True, 'state': lobby_service.get_room_state(room_id)}
        except NotFound:
            payload = {'room_id': room_id, 'closed': True}
    socketio.emit('room_state_update', payload, to=_room_channel(room_id))


def register_websocket_handlers(socketio):
    """Register all WebSocket event handlers."""
    
    @socketio.on('subscribe_room')
    def handle_subscribe_room(data):
        """Subscribe to a room's updates; the caller's own board is sent back once."""
        data = data or {}
        room_id = data.get('room_id')
        if not room_id:
            emit('error', {'error': 'Room ID is required', 'kind': 'InvalidInput'})
            return
        
        lobby_service = get_lobby_service()
        if not lobby_service:
            emit('error', {'error': 'Lobby service unavailable', 'kind': 'ServiceUnavailable'})
            return
        
        try:
            state = lobby_service.get_room_state(room_id, data.get('player_id'))
        except WordleError as e:
            emit('error', {'error': e.message, 'kind': e.kind})
            return
        
        join_room(_room_channel(room_id))
        game_logger.logger.info(f"WebSocket: subscribed to room {room_id}")
        emit('room_state_update', {'success': True, 'state': state})

    @socketio.on('unsubscribe_room')
    def handle_unsubscribe_room(data):
        """Stop receiving a room's updates."""
        room_id = (data or {}).get('room_id')
        if room_id:
            leave_room(_room_channel(room_id))
            emit('unsubscribed', {'room_id': room_id})
