"""Text and timestamp utilities.

Common formatting functions used across modules.
"""

from datetime import datetime, timezone

DISPLAY_TIME_FORMAT = "%Y-%m-%d %H:%M:%S"


def utc_now() -> str:
    """Current time as ISO-8601 UTC string."""
    return datetime.now(timezone.utc).isoformat()


def format_timestamp(iso_timestamp: str) -> str:
    """Render an ISO-8601 timestamp as 'YYYY-MM-DD HH:MM:SS' local time.

    Unparseable input is returned unchanged.
    """
    try:
        moment = datetime.fromisoformat(iso_timestamp)
    except ValueError:
        return iso_timestamp
    if moment.tzinfo is not None:
        moment = moment.astimezone()
    return moment.strftime(DISPLAY_TIME_FORMAT)


def truncate(text: str, max_len: int = 50) -> str:
    """Truncate text with ellipsis if too long."""
    if len(text) <= max_len:
        return text
    return text[:max_len - 3] + "..."
