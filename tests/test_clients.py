"""
Membership computation tests
"""
from datetime import date, datetime, timezone

from app.database.schemas import Client
from app.services.clients import add_months, compute_days_left, refresh_clients


def make_client(**fields):
    return Client(id="c1", name="Test", email="test@example.com", **fields)


def test_add_months():
    assert add_months(date(2023, 11, 15), 3) == date(2024, 2, 15)
    assert add_months(date(2024, 1, 31), 1) == date(2024, 2, 29)
    assert add_months(date(2023, 1, 31), 1) == date(2023, 2, 28)
    assert add_months(date(2024, 5, 10), 12) == date(2025, 5, 10)


def test_days_left_rounds_up():
    client = make_client(start_date=date(2024, 1, 1), duration=1)

    # Membership ends 2024-02-01T00:00Z
    assert compute_days_left(client, datetime(2024, 1, 15, 12, tzinfo=timezone.utc)) == 17
    assert compute_days_left(client, datetime(2024, 1, 31, 23, tzinfo=timezone.utc)) == 1
    assert compute_days_left(client, datetime(2024, 2, 1, tzinfo=timezone.utc)) == 0


def test_days_left_floored_at_zero():
    client = make_client(start_date=date(2020, 1, 1), duration=6)
    assert compute_days_left(client, datetime(2024, 1, 1, tzinfo=timezone.utc)) == 0


def test_days_left_requires_start_and_duration():
    now = datetime(2024, 1, 1, tzinfo=timezone.utc)
    assert compute_days_left(make_client(start_date=date(2024, 1, 1)), now) is None
    assert compute_days_left(make_client(duration=3), now) is None


def test_refresh_clients_deactivates_expired():
    now = datetime(2024, 6, 1, tzinfo=timezone.utc)
    expired = make_client(start_date=date(2024, 1, 1), duration=2)
    running = make_client(start_date=date(2024, 5, 1), duration=2)
    open_ended = make_client(start_date=date(2024, 1, 1))

    assert refresh_clients([expired, running, open_ended], now) is True

    assert expired.active is False
    assert expired.days_left == 0
    assert running.active is True
    assert running.days_left == 30
    assert open_ended.active is True
    assert open_ended.days_left is None


def test_refresh_clients_reports_no_change():
    now = datetime(2024, 6, 1, tzinfo=timezone.utc)
    already_inactive = make_client(start_date=date(2024, 1, 1), duration=2, active=False)

    assert refresh_clients([already_inactive], now) is False
    assert already_inactive.days_left == 0
