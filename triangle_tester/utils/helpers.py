"""
Utility helper functions
"""
import re
from datetime import datetime
from typing import Optional

from ..config import settings


def sanitize_filename(name: str, default: Optional[str] = None) -> str:
    """
    Sanitize a string to be used as a download filename.

    Args:
        name: Requested name
        default: Returned when nothing usable is left

    Returns:
        Sanitized filename, always ending in .txt
    """
    # Remove invalid characters
    sanitized = re.sub(r'[<>:"/\\|?*\x00-\x1f]', '', name or '').strip()
    # Replace spaces with underscores
    sanitized = sanitized.replace(' ', '_').lstrip('.')
    if not sanitized:
        return default or settings.LOG_FILENAME
    if not sanitized.lower().endswith('.txt'):
        sanitized += '.txt'
    # Limit length
    return sanitized[-100:]


def format_date_time(moment: datetime) -> str:
    """Format as DD/MM/YYYY HH:MM:SS."""
    return f"{moment.strftime(settings.DATE_FORMAT)} {moment.strftime(settings.TIME_FORMAT)}"


def format_time(moment: datetime) -> str:
    """Format as 24-hour HH:MM:SS."""
    return moment.strftime(settings.TIME_FORMAT)


def format_area(area: float) -> str:
    """
    Area with exactly two decimals.

    Areas of integer sides are whole or half numbers, so nothing rounds.
    """
    return f"{area:.2f}"


def timestamp_now() -> str:
    """Get current timestamp as ISO format string."""
    return datetime.now().isoformat()
