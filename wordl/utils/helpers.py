"""
Helper Functions

Contains utility functions used throughout the application.
"""

from typing import Any, Dict, Mapping, Optional


def get_user_identity(request_obj) -> Dict[str, Optional[str]]:
    """Extract user identity information from a request-like object."""
    user_ip = getattr(request_obj, 'remote_addr', None) or 'unknown'

    return {
        'user_ip': user_ip,
        'session_id': getattr(request_obj, 'sid', None)  # Socket.IO requests only
    }


def get_int_field(data: Mapping[str, Any], key: str, default: Optional[int] = None) -> Optional[int]:
    """
    Reads an optional integer from a JSON payload.

    Raises:
        ValueError: If the value is present but not an integer
    """
    value = data.get(key, default)
    if value is None:
        return None
    if isinstance(value, bool):
        raise ValueError(f"{key} must be an integer")
    if isinstance(value, str) and value.strip().lstrip('-').isdigit():
        return int(value)
    if not isinstance(value, int):
        raise ValueError(f"{key} must be an integer")
    return value
