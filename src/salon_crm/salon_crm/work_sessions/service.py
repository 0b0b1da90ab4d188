from __future__ import annotations

import logging
from collections import defaultdict
from datetime import date, datetime
from decimal import Decimal
from typing import Callable, Iterable, Optional

from ..core.exceptions import DomainError, ValidationError
from .repository import WorkSessionRepository
from .model import WorkSession

logger = logging.getLogger(__name__)

SessionClosedHook = Callable[[str, date], None]


def hours_by_date(sessions: Iterable[WorkSession]) -> dict[date, Decimal]:
    """Sum closed session minutes per work date, as hours."""
    minutes: dict[date, int] = defaultdict(int)
    for s in sessions:
        if s.is_open:
            continue
        minutes[s.work_date] += int(s.total_minutes or 0)
    return {d: Decimal(m) / Decimal(60) for d, m in minutes.items()}


class WorkSessionService:
    """Use case: start/stop the work timer.

    Closing a session fires ``on_session_closed(user_id, work_date)`` so the
    day's payroll is recalculated.
    """

    def __init__(self, sessions: WorkSessionRepository, *, on_session_closed: Optional[SessionClosedHook] = None):
        self._sessions = sessions
        self._on_session_closed = on_session_closed

    def start_session(self, user_id: str, *, now: datetime | None = None) -> int:
        now = now or datetime.now()
        if self._sessions.get_open_for_user(user_id):
            raise ValidationError("A work session is already running")
        return self._sessions.create(user_id=user_id, work_date=now.date(), login_time=now)

    def end_session(self, user_id: str, *, now: datetime | None = None) -> int:
        now = now or datetime.now()
        session = self._sessions.get_open_for_user(user_id)
        if not session:
            raise ValidationError("No running work session")
        if now < session.login_time:
            raise ValidationError("Logout time is before login time")

        total_minutes = int((now - session.login_time).total_seconds() // 60)
        if not self._sessions.close(session_id=session.session_id, logout_time=now, total_minutes=total_minutes):
            raise ValidationError("Work session was already closed")

        if self._on_session_closed:
            try:
                self._on_session_closed(user_id, session.work_date)
            except DomainError as exc:
                # The session itself is closed; payroll can be resynced later.
                logger.warning("Payroll recalculation failed for user %s on %s: %s", user_id, session.work_date, exc)
        return total_minutes
