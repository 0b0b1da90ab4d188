from __future__ import annotations

from typing import Any, Optional, Sequence

from ..core.enums import Role
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, optional_decimal
from .model import Employee
from .repository import EmployeeRepository

_COLUMNS = """
    employee_id, user_id, first_name, last_name, role, monthly_salary, hourly_rate,
    daily_working_hours, overtime_rate, weekend_rate, holiday_rate, is_active
"""


def _to_employee(row: dict[str, Any]) -> Employee:
    return Employee(
        employee_id=str(row["employee_id"]),
        user_id=str(row["user_id"]) if row.get("user_id") else None,
        first_name=row["first_name"],
        last_name=row["last_name"],
        role=Role(row.get("role") or Role.EMPLOYEE.value),
        monthly_salary=optional_decimal(row.get("monthly_salary")),
        hourly_rate=optional_decimal(row.get("hourly_rate")),
        daily_working_hours=optional_decimal(row.get("daily_working_hours")),
        overtime_rate=optional_decimal(row.get("overtime_rate")),
        weekend_rate=optional_decimal(row.get("weekend_rate")),
        holiday_rate=optional_decimal(row.get("holiday_rate")),
        is_active=bool(row.get("is_active", 1)),
    )


class MySQLEmployeeRepository(EmployeeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, employee_id: str) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM employees WHERE employee_id=%s", (employee_id,))
            row = fetchone(cur)
            return _to_employee(row) if row else None

    def get_by_user_id(self, user_id: str) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM employees WHERE user_id=%s", (user_id,))
            row = fetchone(cur)
            return _to_employee(row) if row else None

    def list_active(self) -> Sequence[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM employees
                WHERE is_active=1
                ORDER BY first_name ASC, last_name ASC
                """
            )
            return [_to_employee(r) for r in fetchall(cur)]
