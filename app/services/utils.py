"""
Utility functions shared by services and API routes
"""
import uuid
from datetime import datetime, timezone


def new_id() -> str:
    """
    Generate a unique entity identifier
    """
    return str(uuid.uuid4())


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def now_iso() -> str:
    """
    Current UTC time as an ISO-8601 string for JSON storage
    """
    return utc_now().isoformat()


def parse_timestamp(value: str) -> datetime:
    """
    Parse a stored ISO-8601 timestamp into an aware datetime

    Accepts the trailing 'Z' form as well; naive values are taken as UTC.
    """
    if value.endswith('Z'):
        value = value[:-1] + '+00:00'
    parsed = datetime.fromisoformat(value)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed
