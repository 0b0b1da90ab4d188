from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal
from typing import Optional

from src.salon_crm.salon_crm.employees.model import Employee
from src.salon_crm.salon_crm.holidays.model import Holiday
from src.salon_crm.salon_crm.payroll.model import DailyPayRecord, DailyWorkRecord, MonthlyPayRecord
from src.salon_crm.salon_crm.payroll.repository import EmployeeMonthlyPay
from src.salon_crm.salon_crm.work_sessions.model import WorkSession

# March 2025: the 1st is a Saturday, the 3rd a Monday.
MONDAY = date(2025, 3, 3)
TUESDAY = date(2025, 3, 4)
SATURDAY = date(2025, 3, 8)


def work_day(day: date, actual: str, *, planned: str = "8", holiday: bool = False) -> DailyWorkRecord:
    return DailyWorkRecord(
        work_date=day,
        planned_hours=Decimal(planned),
        actual_hours=Decimal(actual),
        is_holiday=holiday,
    )


class InMemoryEmployees:
    def __init__(self, employees: list[Employee]):
        self._by_id = {e.employee_id: e for e in employees}

    def get_by_id(self, employee_id: str) -> Optional[Employee]:
        return self._by_id.get(employee_id)

    def get_by_user_id(self, user_id: str) -> Optional[Employee]:
        return next((e for e in self._by_id.values() if e.user_id == user_id), None)

    def list_active(self):
        return [e for e in self._by_id.values() if e.is_active]


class InMemorySessions:
    def __init__(self, sessions: Optional[list[WorkSession]] = None):
        self.sessions: list[WorkSession] = list(sessions or [])

    def add_closed(self, user_id: str, work_date: date, minutes: int) -> None:
        login = datetime.combine(work_date, datetime.min.time()).replace(hour=9)
        self.sessions.append(
            WorkSession(
                session_id=len(self.sessions) + 1,
                user_id=user_id,
                work_date=work_date,
                login_time=login,
                logout_time=login,
                total_minutes=minutes,
            )
        )

    def get_open_for_user(self, user_id: str) -> Optional[WorkSession]:
        return next((s for s in self.sessions if s.user_id == user_id and s.is_open), None)

    def create(self, *, user_id: str, work_date: date, login_time: datetime) -> int:
        session_id = len(self.sessions) + 1
        self.sessions.append(WorkSession(session_id=session_id, user_id=user_id, work_date=work_date, login_time=login_time))
        return session_id

    def close(self, *, session_id: int, logout_time: datetime, total_minutes: int) -> bool:
        for i, s in enumerate(self.sessions):
            if s.session_id == session_id and s.is_open:
                self.sessions[i] = WorkSession(
                    session_id=s.session_id,
                    user_id=s.user_id,
                    work_date=s.work_date,
                    login_time=s.login_time,
                    logout_time=logout_time,
                    total_minutes=total_minutes,
                )
                return True
        return False

    def list_closed_between(self, *, user_id: str, start_date: date, end_date: date):
        return [
            s
            for s in self.sessions
            if s.user_id == user_id and start_date <= s.work_date <= end_date and not s.is_open
        ]


class InMemoryHolidays:
    def __init__(self, holidays: Optional[list[Holiday]] = None):
        self._holidays = list(holidays or [])

    def list_between(self, *, start_date: date, end_date: date):
        return [h for h in self._holidays if start_date <= h.holiday_date <= end_date]

    def upsert(self, holiday: Holiday) -> None:
        self._holidays = [h for h in self._holidays if h.holiday_date != holiday.holiday_date] + [holiday]


class InMemoryPayroll:
    def __init__(self, employees: InMemoryEmployees):
        self._employees = employees
        self.daily: dict[tuple[str, date], DailyPayRecord] = {}
        self.monthly: dict[tuple[str, int, int], MonthlyPayRecord] = {}
        self.saves = 0

    def list_daily_between(self, *, employee_id: str, start_date: date, end_date: date):
        return sorted(
            (r for (eid, d), r in self.daily.items() if eid == employee_id and start_date <= d <= end_date),
            key=lambda r: r.work_date,
        )

    def save_month(self, *, employee_id: str, daily, monthly: MonthlyPayRecord, replace: bool = False) -> None:
        self.saves += 1
        if replace:
            for key in [k for k in self.daily if k[0] == employee_id and k[1].month == monthly.month and k[1].year == monthly.year]:
                del self.daily[key]
        for r in daily:
            self.daily[(employee_id, r.work_date)] = r
        self.monthly[(employee_id, monthly.month, monthly.year)] = monthly

    def get_monthly(self, *, employee_id: str, month: int, year: int):
        return self.monthly.get((employee_id, month, year))

    def list_monthly(self, *, month: int, year: int, employee_id: Optional[str] = None):
        out = []
        for (eid, m, y), record in self.monthly.items():
            if m != month or y != year or (employee_id is not None and eid != employee_id):
                continue
            out.append(EmployeeMonthlyPay(employee_id=eid, employee_name=self._employees.get_by_id(eid).full_name, record=record))
        return out

    def delete_day(self, *, employee_id: str, work_date: date, monthly: MonthlyPayRecord) -> bool:
        if self.daily.pop((employee_id, work_date), None) is None:
            return False
        self.monthly[(employee_id, monthly.month, monthly.year)] = monthly
        return True
