"""
Wordle Arena Server - Main Entry Point

Initializes the session registry and services, starts the idle sweep worker,
and runs the Flask-SocketIO application.
"""

import threading
import time
from wordle_arena import create_app
from wordle_arena.config import Config, default_settings
from wordle_arena.services.game_service import initialize_game_service
from wordle_arena.services.lobby_service import initialize_lobby_service
from wordle_arena.services.session_registry import initialize_session_registry
from wordle_arena.utils.game_logger import game_logger


def idle_sweep_worker(registry, interval_seconds):
    """
    Background worker that expires games and rooms nobody has touched within
    the idle timeout. Requests against them then fail with NotFound.
    """
    game_logger.logger.info("Idle sweep worker started")
    while True:
        try:
            expired = registry.sweep_idle()
            if expired:
                game_logger.logger.info(f"Idle sweep: expired {len(expired)} session(s)")
        except Exception as e:
            game_logger.logger.error(f"Error in idle sweep worker: {e}")
        
        time.sleep(interval_seconds)


def main():
    """Main function to initialize services and start the server."""
    try:
        print("Initializing services...")
        
        registry = initialize_session_registry(Config.SESSION_IDLE_TIMEOUT_SECONDS)
        base_settings = default_settings(Config.MAX_ATTEMPTS, Config.ENFORCE_DICTIONARY)
        initialize_game_service(registry, base_settings)
        initialize_lobby_service(registry, base_settings, Config.ROOM_CAPACITY)
        print("✓ Game and lobby services initialized successfully")
        
        print("Creating Flask application...")
        app, socketio = create_app(Config)
        print("✓ Flask application created successfully")
        
        sweep_thread = threading.Thread(
            target=idle_sweep_worker, args=(registry, Config.SWEEP_INTERVAL_SECONDS), daemon=True
        )
        sweep_thread.start()
        print(f"✓ Idle sweep worker started - checking every {Config.SWEEP_INTERVAL_SECONDS} seconds")
        
        game_logger.logger.info("Wordle Arena Server Starting")
        
        print(f"\nStarting Wordle Arena Server on {Config.HOST}:{Config.PORT}")
        print(f"Debug mode: {Config.DEBUG}")
        print("=" * 50)
        
        socketio.run(app, host=Config.HOST, port=Config.PORT, debug=Config.DEBUG)
        
    except KeyboardInterrupt:
        print("\nServer shutting down...")
        game_logger.logger.info("Wordle Arena Server shutting down (KeyboardInterrupt)")
    except Exception as e:
        print(f"Error starting server: {e}")
        game_logger.logger.error(f"Error starting server: {e}")
        raise


if __name__ == '__main__':
    main()
