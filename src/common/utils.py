"""
Common utilities shared across all modules.
"""
from datetime import datetime, timezone


def utcnow() -> datetime:
    """
    Current UTC time as a naive datetime, the form stored in the database.
    """
    return datetime.now(timezone.utc).replace(tzinfo=None)
