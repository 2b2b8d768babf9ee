"""
Client membership computation

Remaining days are derived on every read from start date + duration (months)
and memberships are deactivated once they run out.
"""
import calendar
import math
from datetime import date, datetime, timezone
from typing import List, Optional

from app.database.schemas import Client

SECONDS_PER_DAY = 24 * 60 * 60


def add_months(start: date, months: int) -> date:
    """
    Shift a date by a number of months

    The day is clamped to the last day of the target month (Jan 31 + 1 month -> Feb 28/29).
    """
    month_index = start.month - 1 + months
    year = start.year + month_index // 12
    month = month_index % 12 + 1
    day = min(start.day, calendar.monthrange(year, month)[1])
    return date(year, month, day)


def compute_days_left(client: Client, now: datetime) -> Optional[int]:
    """
    Days until the membership ends, floored at 0

    Start dates count from midnight UTC. Returns None when the client has no
    start date or no duration.
    """
    if not client.start_date or not client.duration:
        return None
    end_date = add_months(client.start_date, client.duration)
    end = datetime(end_date.year, end_date.month, end_date.day, tzinfo=timezone.utc)
    days_left = math.ceil((end - now).total_seconds() / SECONDS_PER_DAY)
    return max(days_left, 0)


def refresh_clients(clients: List[Client], now: datetime) -> bool:
    """
    Recompute days_left for every client and deactivate expired memberships

    Returns True if any client was deactivated (the caller should persist).
    """
    updated = False
    for client in clients:
        client.days_left = compute_days_left(client, now)
        if client.days_left is not None and client.days_left <= 0 and client.active:
            client.active = False
            updated = True
    return updated
