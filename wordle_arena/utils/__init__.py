"""
Utilities Package

Contains utility functions, decorators, and helper modules.
"""

from .decorators import game_route, require_host_key
from .helpers import get_request_data, require_field, settings_overrides
from .game_logger import game_logger

__all__ = ['game_route', 'require_host_key', 'get_request_data', 'require_field',
           'settings_overrides', 'game_logger']
