"""
Helper Functions

Contains utility functions used throughout the application.
"""

from datetime import date
from typing import Dict, Optional


def get_user_identity(request_obj) -> Dict[str, str]:
    """Extract user identity information from a request."""
    user_ip = getattr(request_obj, 'remote_addr', None) or 'unknown'

    return {
        'user_ip': user_ip,
        'session_id': getattr(request_obj, 'sid', None)  # Socket.IO requests carry a sid
    }


def parse_selection_date(value) -> Optional[date]:
    """
    Parse the optional "date" field of a new-game request.

    Raises:
        ValueError: If the value is not an ISO date (YYYY-MM-DD)
    """
    if value in (None, ''):
        return None
    if not isinstance(value, str):
        raise ValueError("Date must be an ISO string (YYYY-MM-DD)")
    try:
        return date.fromisoformat(value)
    except ValueError:
        raise ValueError(f"Invalid date '{value}'. Expected YYYY-MM-DD") from None
