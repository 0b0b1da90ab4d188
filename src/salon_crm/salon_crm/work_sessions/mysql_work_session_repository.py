from __future__ import annotations

from datetime import date, datetime
from typing import Any, Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import WorkSession
from .repository import WorkSessionRepository


def _to_session(r: dict[str, Any]) -> WorkSession:
    return WorkSession(
        session_id=int(r["session_id"]),
        user_id=str(r["user_id"]),
        work_date=r["work_date"],
        login_time=r["login_time"],
        logout_time=r.get("logout_time"),
        total_minutes=int(r["total_minutes"]) if r.get("total_minutes") is not None else None,
    )


class MySQLWorkSessionRepository(WorkSessionRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_open_for_user(self, user_id: str) -> Optional[WorkSession]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT session_id, user_id, work_date, login_time, logout_time, total_minutes
                FROM work_sessions
                WHERE user_id=%s AND logout_time IS NULL
                ORDER BY login_time DESC
                LIMIT 1
                """,
                (user_id,),
            )
            r = fetchone(cur)
            return _to_session(r) if r else None

    def create(self, *, user_id: str, work_date: date, login_time: datetime) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO work_sessions(user_id, work_date, login_time)
                VALUES(%s,%s,%s)
                """,
                (user_id, work_date, login_time),
            )
            return int(cur.lastrowid)

    def close(self, *, session_id: int, logout_time: datetime, total_minutes: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE work_sessions
                SET logout_time=%s, total_minutes=%s
                WHERE session_id=%s AND logout_time IS NULL
                """,
                (logout_time, int(total_minutes), int(session_id)),
            )
            return cur.rowcount > 0

    def list_closed_between(self, *, user_id: str, start_date: date, end_date: date) -> Sequence[WorkSession]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT session_id, user_id, work_date, login_time, logout_time, total_minutes
                FROM work_sessions
                WHERE user_id=%s
                  AND work_date BETWEEN %s AND %s
                  AND logout_time IS NOT NULL
                ORDER BY work_date ASC, login_time ASC
                """,
                (user_id, start_date, end_date),
            )
            return [_to_session(r) for r in fetchall(cur)]
