from __future__ import annotations

from datetime import date
from typing import Sequence

from ..core.enums import HolidayType
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .model import Holiday
from .repository import HolidayRepository


class MySQLHolidayRepository(HolidayRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_between(self, *, start_date: date, end_date: date) -> Sequence[Holiday]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT holiday_date, name, holiday_type
                FROM turkish_holidays
                WHERE holiday_date BETWEEN %s AND %s
                ORDER BY holiday_date ASC
                """,
                (start_date, end_date),
            )
            return [
                Holiday(
                    holiday_date=r["holiday_date"],
                    name=r["name"],
                    holiday_type=HolidayType(r["holiday_type"]),
                )
                for r in fetchall(cur)
            ]

    def upsert(self, holiday: Holiday) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO turkish_holidays(holiday_date, name, holiday_type)
                VALUES(%s,%s,%s)
                ON DUPLICATE KEY UPDATE name=VALUES(name), holiday_type=VALUES(holiday_type)
                """,
                (holiday.holiday_date, holiday.name, holiday.holiday_type.value),
            )
