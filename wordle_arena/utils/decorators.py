"""
Route Decorators

Contains decorators shared by the HTTP controllers.
"""

from functools import wraps
from flask import request, jsonify

from ..errors import WordleError
from .game_logger import game_logger


def game_route(action: str, id_arg: str = None):
    """
    Wraps a route that returns a plain dict.
    
    Logs the action and response, turns engine errors into
    {'success': False, 'error', 'kind'} with the error's status code, and
    answers 500 for anything unexpected.
    """
    def decorator(f):
        @wraps(f)
        def decorated_function(*args, **kwargs):
            session_id = kwargs.get(id_arg) if id_arg else None
            game_logger.log_user_action(request, action, session_id)
            try:
                response_data = {'success': True, **f(*args, **kwargs)}
            except WordleError as e:
                error_response = e.to_dict()
                game_logger.log_server_response(
                    request, action, False, error_response, session_id, kind=e.kind
                )
                return jsonify(error_response), e.status_code
            except Exception as e:
                game_logger.log_error(request, e, action, session_id)
                error_response = {
                    'success': False,
                    'error': str(e)
                }
                game_logger.log_server_response(request, action, False, error_response, session_id)
                return jsonify(error_response), 500
            
            game_logger.log_server_response(request, action, True, response_data, session_id)
            return jsonify(response_data)
        
        return decorated_function
    return decorator


def require_host_key(f):
    """
    Passes the X-Host-Key header to the route as host_key.
    
    The room itself decides whether the key is right.
    """
    @wraps(f)
    def decorated_function(*args, **kwargs):
        kwargs['host_key'] = request.headers.get('X-Host-Key')
        return f(*args, **kwargs)
    
    return decorated_function
