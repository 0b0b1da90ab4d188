from __future__ import annotations

from datetime import date, datetime, timedelta
from decimal import Decimal

import pytest

from src.salon_crm.salon_crm.core.exceptions import InvalidRateError, ValidationError
from src.salon_crm.salon_crm.work_sessions.model import WorkSession
from src.salon_crm.salon_crm.work_sessions.service import WorkSessionService, hours_by_date
from tests.fakes import InMemorySessions


def test_start_then_end_records_minutes_and_fires_hook(fixed_now):
    calls = []
    repo = InMemorySessions()
    svc = WorkSessionService(repo, on_session_closed=lambda user_id, d: calls.append((user_id, d)))

    svc.start_session("u1", now=fixed_now)
    minutes = svc.end_session("u1", now=fixed_now + timedelta(hours=8, minutes=30))

    assert minutes == 510
    assert repo.sessions[0].total_minutes == 510
    assert calls == [("u1", fixed_now.date())]


def test_cannot_start_twice(fixed_now):
    svc = WorkSessionService(InMemorySessions())
    svc.start_session("u1", now=fixed_now)

    with pytest.raises(ValidationError):
        svc.start_session("u1", now=fixed_now + timedelta(minutes=1))


def test_cannot_end_without_running_session(fixed_now):
    with pytest.raises(ValidationError):
        WorkSessionService(InMemorySessions()).end_session("u1", now=fixed_now)


def test_payroll_failure_does_not_reopen_session(fixed_now):
    def broken_hook(user_id, work_date):
        raise InvalidRateError("overtime_rate must be at least 1")

    repo = InMemorySessions()
    svc = WorkSessionService(repo, on_session_closed=broken_hook)
    svc.start_session("u1", now=fixed_now)

    assert svc.end_session("u1", now=fixed_now + timedelta(hours=1)) == 60
    assert not repo.sessions[0].is_open


def test_hours_by_date_ignores_open_sessions():
    d1, d2 = date(2025, 3, 3), date(2025, 3, 4)
    login = datetime(2025, 3, 3, 9, 0)
    sessions = [
        WorkSession(1, "u1", d1, login, login, 300),
        WorkSession(2, "u1", d1, login, login, 180),
        WorkSession(3, "u1", d2, login, login, 450),
        WorkSession(4, "u1", d2, login),
    ]

    assert hours_by_date(sessions) == {d1: Decimal("8"), d2: Decimal("7.5")}
