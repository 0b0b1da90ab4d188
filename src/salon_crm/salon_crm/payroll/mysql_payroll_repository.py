from __future__ import annotations

from datetime import date
from typing import Any, Optional, Sequence

from ..common.datetime_utils import month_bounds
from ..core.enums import DayContext, TaxAggregationPolicy
from ..database.connection import DatabaseConnection
from ..database.mysql_base import as_decimal, db_cursor, fetchall, fetchone
from .model import DailyPayRecord, MonthlyPayRecord
from .repository import EmployeeMonthlyPay, PayrollRepository

_DAILY_FIELDS = (
    "work_date", "day_context", "planned_hours", "actual_hours", "overtime_hours", "hourly_rate",
    "base_pay", "overtime_pay", "gross_pay", "income_tax", "stamp_tax", "social_security_employee",
    "unemployment_insurance_employee", "total_deductions", "net_pay",
)

_MONTHLY_FIELDS = (
    "month", "year", "working_days", "days_worked", "contracted_hours", "planned_hours", "actual_hours",
    "overtime_hours", "hourly_rate", "base_pay", "overtime_pay", "gross_salary", "income_tax", "stamp_tax",
    "social_security_employee", "unemployment_insurance_employee", "total_deductions", "net_salary",
    "social_security_employer", "unemployment_insurance_employer", "total_employer_cost", "tax_policy",
)

_MONTHLY_INTS = {"month", "year", "working_days", "days_worked"}


def _upsert_sql(table: str, fields: Sequence[str], key: Sequence[str]) -> str:
    columns = ("employee_id",) + tuple(fields)
    placeholders = ",".join(["%s"] * len(columns))
    updates = ", ".join(f"{c}=VALUES({c})" for c in fields if c not in key)
    return f"INSERT INTO {table}({', '.join(columns)}) VALUES({placeholders}) ON DUPLICATE KEY UPDATE {updates}"


_UPSERT_DAILY = _upsert_sql("daily_payroll", _DAILY_FIELDS, key=("work_date",))
_UPSERT_MONTHLY = _upsert_sql("monthly_payroll", _MONTHLY_FIELDS, key=("month", "year"))


def _to_daily(r: dict[str, Any]) -> DailyPayRecord:
    values: dict[str, Any] = {f: as_decimal(r.get(f)) for f in _DAILY_FIELDS[2:]}
    return DailyPayRecord(work_date=r["work_date"], day_context=DayContext(r["day_context"]), **values)


def _to_monthly(r: dict[str, Any]) -> MonthlyPayRecord:
    values: dict[str, Any] = {}
    for f in _MONTHLY_FIELDS:
        if f in _MONTHLY_INTS:
            values[f] = int(r[f])
        elif f == "tax_policy":
            values[f] = TaxAggregationPolicy(r[f])
        else:
            values[f] = as_decimal(r.get(f))
    return MonthlyPayRecord(**values)


class MySQLPayrollRepository(PayrollRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_daily_between(self, *, employee_id: str, start_date: date, end_date: date) -> Sequence[DailyPayRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {', '.join(_DAILY_FIELDS)}
                FROM daily_payroll
                WHERE employee_id=%s AND work_date BETWEEN %s AND %s
                ORDER BY work_date ASC
                """,
                (employee_id, start_date, end_date),
            )
            return [_to_daily(r) for r in fetchall(cur)]

    def save_month(
        self,
        *,
        employee_id: str,
        daily: Sequence[DailyPayRecord],
        monthly: MonthlyPayRecord,
        replace: bool = False,
    ) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            if replace:
                start, end = month_bounds(monthly.month, monthly.year)
                cur.execute(
                    "DELETE FROM daily_payroll WHERE employee_id=%s AND work_date BETWEEN %s AND %s",
                    (employee_id, start, end),
                )
            for record in daily:
                row = record.to_row()
                cur.execute(_UPSERT_DAILY, (employee_id,) + tuple(row[f] for f in _DAILY_FIELDS))

            row = monthly.to_row()
            cur.execute(_UPSERT_MONTHLY, (employee_id,) + tuple(row[f] for f in _MONTHLY_FIELDS))

    def delete_day(self, *, employee_id: str, work_date: date, monthly: MonthlyPayRecord) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM daily_payroll WHERE employee_id=%s AND work_date=%s", (employee_id, work_date))
            if cur.rowcount == 0:
                return False
            row = monthly.to_row()
            cur.execute(_UPSERT_MONTHLY, (employee_id,) + tuple(row[f] for f in _MONTHLY_FIELDS))
            return True

    def get_monthly(self, *, employee_id: str, month: int, year: int) -> Optional[MonthlyPayRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {', '.join(_MONTHLY_FIELDS)}
                FROM monthly_payroll
                WHERE employee_id=%s AND month=%s AND year=%s
                """,
                (employee_id, int(month), int(year)),
            )
            r = fetchone(cur)
            return _to_monthly(r) if r else None

    def list_monthly(self, *, month: int, year: int, employee_id: Optional[str] = None) -> Sequence[EmployeeMonthlyPay]:
        clauses = ["mp.month=%s", "mp.year=%s"]
        params: list[object] = [int(month), int(year)]
        if employee_id is not None:
            clauses.append("mp.employee_id=%s")
            params.append(employee_id)

        columns = ", ".join(f"mp.{f}" for f in _MONTHLY_FIELDS)
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT mp.employee_id, e.first_name, e.last_name, {columns}
                FROM monthly_payroll mp
                JOIN employees e ON e.employee_id = mp.employee_id
                WHERE {' AND '.join(clauses)}
                ORDER BY e.first_name ASC, e.last_name ASC
                """,
                tuple(params),
            )
            return [
                EmployeeMonthlyPay(
                    employee_id=str(r["employee_id"]),
                    employee_name=f"{r['first_name']} {r['last_name']}".strip(),
                    record=_to_monthly(r),
                )
                for r in fetchall(cur)
            ]
