"""
Game Logger Module

Structured logging for client actions, server responses, and game/room
lifecycle events. Secrets never reach the log: responses are summarized
before they are written.
"""

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Optional

from ..config.app_config import Config


class GameLogger:
    """
    Centralized logging system for the game server.

    Features:
    - Client action tracking with IP identification
    - Server response logging (sanitized)
    - Game and room event logging
    - JSON structured entries for easy parsing
    """
    
    def __init__(self, log_dir: str = "logs", level: str = "INFO"):
        self.log_dir = Path(log_dir)
        self.log_dir.mkdir(parents=True, exist_ok=True)
        self.level = getattr(logging, str(level).upper(), logging.INFO)
        
        self.logger = self._setup_logger()
        
    def _setup_logger(self) -> logging.Logger:
        """Setup the main logger with a dated file handler and a console handler."""
        logger = logging.getLogger('wordle_arena')
        logger.setLevel(self.level)
        
        # Prevent duplicate handlers
        if logger.handlers:
            logger.handlers.clear()
        
        log_file = self.log_dir / f"game_log_{datetime.now().strftime('%Y-%m-%d')}.log"
        
        file_handler = logging.FileHandler(log_file, encoding='utf-8')
        file_handler.setLevel(self.level)
        
        # Console only shows warnings and errors
        console_handler = logging.StreamHandler()
        console_handler.setLevel(logging.WARNING)
        
        file_handler.setFormatter(logging.Formatter(
            '%(asctime)s | %(levelname)s | %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        ))
        console_handler.setFormatter(logging.Formatter('%(levelname)s: %(message)s'))
        
        logger.addHandler(file_handler)
        logger.addHandler(console_handler)
        
        return logger
    
    @staticmethod
    def _client_identity(request) -> Dict[str, Optional[str]]:
        """Client IP, plus the player id when a room route carries one."""
        player_id = None
        if hasattr(request, 'get_json'):
            data = request.get_json(silent=True)
            if isinstance(data, dict):
                player_id = data.get('player_id')
        if player_id is None and getattr(request, 'args', None) is not None:
            player_id = request.args.get('player_id')
        return {
            'client_ip': getattr(request, 'remote_addr', None) or 'unknown',
            'player_id': player_id
        }
    
    @staticmethod
    def _create_log_entry(event_type: str,
                          action: str,
                          client: Dict[str, Optional[str]],
                          details: Dict[str, Any]) -> str:
        log_entry = {
            'timestamp': datetime.now().isoformat(),
            'event_type': event_type,
            'action': action,
            'client': client,
            'details': details
        }
        return json.dumps(log_entry, ensure_ascii=False, default=str)
    
    def log_user_action(self,
                        request,
                        action: str,
                        session_id: Optional[str] = None,
                        **kwargs):
        """
        Log a client action.
        
        Args:
            request: Flask request object
            action: Type of action (e.g. 'new_game', 'submit_guess', 'join_room')
            session_id: Game or room identifier if applicable
            **kwargs: Additional details to log
        """
        details = {
            'session_id': session_id,
            'endpoint': getattr(request, 'endpoint', None),
            'method': getattr(request, 'method', None),
            **kwargs
        }
        self.logger.info(self._create_log_entry('USER_ACTION', action, self._client_identity(request), details))
    
    def log_server_response(self,
                            request,
                            action: str,
                            success: bool,
                            response_data: Dict[str, Any],
                            session_id: Optional[str] = None,
                            **kwargs):
        """
        Log a response. Failures are written at ERROR level.
        """
        details = {
            'session_id': session_id,
            'success': success,
            'response_data': self._sanitize_response_data(response_data),
            **kwargs
        }
        event_type = 'SERVER_RESPONSE_SUCCESS' if success else 'SERVER_RESPONSE_ERROR'
        log_message = self._create_log_entry(event_type, action, self._client_identity(request), details)
        
        if success:
            self.logger.info(log_message)
        else:
            self.logger.error(log_message)
    
    def log_game_event(self,
                       session_id: Optional[str],
                       event: str,
                       client_ip: str,
                       **kwargs):
        """
        Log game and room lifecycle events (game_won, room_activated, session_expired, ...).
        """
        client = {'client_ip': client_ip, 'player_id': kwargs.pop('player_id', None)}
        details = {
            'session_id': session_id,
            **kwargs
        }
        self.logger.info(self._create_log_entry('GAME_EVENT', event, client, details))
    
    def log_error(self,
                  request,
                  error: Exception,
                  action: str,
                  session_id: Optional[str] = None):
        """Log an unexpected error with full context."""
        details = {
            'session_id': session_id,
            'error_type': type(error).__name__,
            'error_message': str(error),
            'action': action
        }
        self.logger.error(self._create_log_entry('ERROR', action, self._client_identity(request), details))
    
    @staticmethod
    def _sanitize_response_data(data: Dict[str, Any]) -> Dict[str, Any]:
        """Summarize large payloads and drop anything that could reveal a word."""
        if not isinstance(data, dict):
            return {'data_type': type(data).__name__}
        
        sanitized = {key: value for key, value in data.items()
                     if key not in ('word_list', 'host_key', 'keyboard_hints')}
        
        state = sanitized.get('state')
        if isinstance(state, dict):
            sanitized['state'] = {
                'phase': state.get('phase'),
                'terminal': state.get('terminal'),
                'attempts_used': state.get('attempts_used'),
                'max_attempts': state.get('max_attempts'),
                'answer_revealed': state.get('answer') is not None
            }
        if 'word_list' in data:
            sanitized['word_count'] = len(data['word_list'])
        
        return sanitized


# Global logger instance
game_logger = GameLogger(Config.LOG_DIR, Config.LOG_LEVEL)
