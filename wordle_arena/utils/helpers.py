"""
Helper Functions

Contains request parsing helpers used by the controllers.
"""

from typing import Dict

from flask import request

from ..errors import InvalidInput

SETTINGS_FIELDS = ('max_attempts', 'word_list', 'host_cheating', 'enforce_dictionary')


def get_request_data(request_obj=None) -> Dict:
    """JSON body of the request, or an empty dict when there is none."""
    if request_obj is None:
        request_obj = request
    data = request_obj.get_json(silent=True)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise InvalidInput("Request body must be a JSON object")
    return data


def settings_overrides(data: Dict) -> Dict:
    """Picks the recognised settings options out of a request body."""
    return {field: data[field] for field in SETTINGS_FIELDS if field in data}


def require_field(data: Dict, field: str):
    if data.get(field) in (None, ''):
        raise InvalidInput(f"{field} is required")
    return data[field]
