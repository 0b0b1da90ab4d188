from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional


@dataclass(frozen=True)
class WorkSession:
    """Domain entity: one login/logout span of tracked work."""

    session_id: int
    user_id: str
    work_date: date
    login_time: datetime
    logout_time: Optional[datetime] = None
    total_minutes: Optional[int] = None

    @property
    def is_open(self) -> bool:
        return self.logout_time is None
