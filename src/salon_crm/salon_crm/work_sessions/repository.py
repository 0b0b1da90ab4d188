from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Protocol, Sequence

from .model import WorkSession


class WorkSessionRepository(Protocol):
    def get_open_for_user(self, user_id: str) -> Optional[WorkSession]:
        raise NotImplementedError

    def create(self, *, user_id: str, work_date: date, login_time: datetime) -> int:
        raise NotImplementedError

    def close(self, *, session_id: int, logout_time: datetime, total_minutes: int) -> bool:
        raise NotImplementedError

    def list_closed_between(self, *, user_id: str, start_date: date, end_date: date) -> Sequence[WorkSession]:
        """Closed sessions only; open sessions never count toward pay."""

        raise NotImplementedError
