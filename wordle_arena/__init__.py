"""
Wordle Arena Application Package

Game and session engine for single-player Wordle, host-cheating (Absurdle)
games and multiplayer rooms, served over Flask with Socket.IO room updates.
"""

from flask import Flask
from flask_cors import CORS
from flask_socketio import SocketIO
from .config import Config


def create_app(config_class=Config):
    """
    Application factory pattern for creating Flask app instances.
    
    Services are initialized separately (see main.py) so tests can install
    their own registry before the app is built.
    
    Args:
        config_class: Configuration class to use
        
    Returns:
        Flask application instance and its SocketIO wrapper
    """
    app = Flask(__name__)
    app.config.from_object(config_class)
    
    # Initialize extensions
    CORS(app)
    socketio = SocketIO(app, cors_allowed_origins="*", logger=False, engineio_logger=False)
    
    # Register blueprints
    from .controllers.game_controller import game_bp
    from .controllers.lobby_controller import lobby_bp
    
    app.register_blueprint(game_bp, url_prefix='/api')
    app.register_blueprint(lobby_bp, url_prefix='/api')
    
    # Register WebSocket handlers
    from .websocket.handlers import register_websocket_handlers
    register_websocket_handlers(socketio)
    
    # Store socketio instance for use in other modules
    app.socketio = socketio
    
    return app, socketio
