from __future__ import annotations

from dataclasses import dataclass

from .core.enums import TaxAggregationPolicy
from .database.connection import DBConfig, DatabaseConnection
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .holidays.holiday_calendar import HolidayCalendar
from .holidays.mysql_holiday_repository import MySQLHolidayRepository
from .payroll.mysql_payroll_repository import MySQLPayrollRepository
from .payroll.service import PayrollService
from .work_sessions.mysql_work_session_repository import MySQLWorkSessionRepository
from .work_sessions.service import WorkSessionService


@dataclass(frozen=True)
class Container:
    conn: DatabaseConnection

    employees_repo: MySQLEmployeeRepository
    work_sessions_repo: MySQLWorkSessionRepository
    holidays_repo: MySQLHolidayRepository
    payroll_repo: MySQLPayrollRepository

    holiday_calendar: HolidayCalendar
    payroll_service: PayrollService
    work_session_service: WorkSessionService


def build_container(*, db_config: dict, tax_policy: TaxAggregationPolicy = TaxAggregationPolicy.PER_MONTH) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_mapping(db_config))

    employees_repo = MySQLEmployeeRepository(conn)
    work_sessions_repo = MySQLWorkSessionRepository(conn)
    holidays_repo = MySQLHolidayRepository(conn)
    payroll_repo = MySQLPayrollRepository(conn)

    holiday_calendar = HolidayCalendar(holidays_repo)
    payroll_service = PayrollService(
        employees_repo,
        work_sessions_repo,
        holiday_calendar,
        payroll_repo,
        tax_policy=tax_policy,
    )
    work_session_service = WorkSessionService(
        work_sessions_repo,
        on_session_closed=payroll_service.recalculate_day,
    )

    return Container(
        conn=conn,
        employees_repo=employees_repo,
        work_sessions_repo=work_sessions_repo,
        holidays_repo=holidays_repo,
        payroll_repo=payroll_repo,
        holiday_calendar=holiday_calendar,
        payroll_service=payroll_service,
        work_session_service=work_session_service,
    )
