"""
Helper Functions

Contains utility functions used throughout the application.
"""

from typing import Any, Dict

from flask import request

from ..errors import ValidationError


def get_user_identity(request_obj=None) -> Dict[str, str]:
    """Extract user identity information from request."""
    if request_obj is None:
        request_obj = request

    return {
        'user_ip': getattr(request_obj, 'remote_addr', None) or 'unknown',
    }


def get_json_body(required: bool = False) -> Dict[str, Any]:
    """
    Parse the request body as a JSON object.

    An empty body yields an empty dict unless ``required`` is set.

    Raises:
        ValidationError: If the body is missing (when required), not JSON, or not an object
    """
    if not request.get_data(cache=True):
        if required:
            raise ValidationError("Request body is required")
        return {}

    data = request.get_json(force=True, silent=True)
    if not isinstance(data, dict):
        raise ValidationError("Invalid request body: expected a JSON object")
    return data


def parse_int_field(data: Dict[str, Any], key: str, default=None) -> int:
    """
    Read an integer field from a JSON body.

    Raises:
        ValidationError: If the value is present but not an integer
    """
    value = data.get(key, default)
    if value is None:
        raise ValidationError(f"{key} is required")
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(f"{key} must be an integer")
    return value
