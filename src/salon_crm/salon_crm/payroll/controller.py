from __future__ import annotations

from datetime import date

from flask import Flask, jsonify, request

from ..common.datetime_utils import month_bounds, now_local, parse_iso_date
from ..common.http import current_role, current_user_id, handle_domain_errors, login_required
from ..common.money import quantize_money
from ..common.validators import require_decimal, require_int, require_non_empty
from ..core.exceptions import ValidationError
from ..container import Container
from .repository import EmployeeMonthlyPay


def _parse_date(value: str | None, field_name: str) -> date:
    try:
        return parse_iso_date(require_non_empty(value or "", field_name))
    except ValueError:
        raise ValidationError(f"{field_name} must be YYYY-MM-DD")


def _sync_summary(r: EmployeeMonthlyPay) -> dict:
    row = r.record.to_row()
    return {
        "employee_id": r.employee_id,
        "employee": r.employee_name,
        "actual_hours": row["actual_hours"],
        "gross_salary": row["gross_salary"],
        "net_salary": row["net_salary"],
    }


def register(app: Flask, container: Container) -> None:
    service = container.payroll_service

    @app.route("/api/payroll/monthly", methods=["GET"], endpoint="payroll_monthly")
    @login_required
    @handle_domain_errors
    def monthly():
        month = require_int(request.args.get("month"), "month")
        year = require_int(request.args.get("year"), "year")
        rows = service.list_monthly(current_role=current_role(), user_id=current_user_id(), month=month, year=year)
        return jsonify(
            [
                {"employee_id": r.employee_id, "employee": r.employee_name, **r.record.to_row()}
                for r in rows
            ]
        )

    @app.route("/api/payroll/daily", methods=["GET"], endpoint="payroll_daily")
    @login_required
    @handle_domain_errors
    def daily():
        if request.args.get("start_date") or request.args.get("end_date"):
            start = _parse_date(request.args.get("start_date"), "start_date")
            end = _parse_date(request.args.get("end_date"), "end_date")
        else:
            today = now_local().date()
            start, end = month_bounds(today.month, today.year)

        rows = service.calculate_daily(
            current_role=current_role(),
            user_id=current_user_id(),
            start=start,
            end=end,
            employee_id=request.args.get("employee_id") or None,
        )
        return jsonify(
            [
                {
                    "id": f"{r.employee_id}-{r.record.work_date.isoformat()}",
                    "employee_id": r.employee_id,
                    "employee": r.employee_name,
                    **r.record.to_row(),
                    "work_date": r.record.work_date.isoformat(),
                }
                for r in rows
            ]
        )

    @app.route("/api/payroll/sync", methods=["POST"], endpoint="payroll_sync")
    @login_required
    @handle_domain_errors
    def sync():
        body = request.get_json(silent=True) or {}
        month = require_int(body.get("month"), "month")
        year = require_int(body.get("year"), "year")

        report = service.sync_all(current_role=current_role(), month=month, year=year)
        return jsonify(
            {
                "message": "Payroll synchronized successfully",
                "synced_employees": len(report.synced),
                "results": [_sync_summary(r) for r in report.synced],
                "failed": [
                    {"employee_id": f.employee_id, "employee": f.employee_name, "reason": f.reason}
                    for f in report.failed
                ],
            }
        )

    @app.route("/api/payroll/daily/recalculate", methods=["POST"], endpoint="payroll_daily_recalculate")
    @login_required
    @handle_domain_errors
    def recalculate_day():
        body = request.get_json(silent=True) or {}
        employee_id = require_non_empty(str(body.get("employee_id") or ""), "employee_id")
        work_date = _parse_date(body.get("date"), "date")

        record = service.recalculate_employee_day(
            current_role=current_role(), employee_id=employee_id, work_date=work_date
        )
        if record is None:
            return jsonify({"message": "No closed work sessions on this date"}), 200
        return jsonify({**record.to_row(), "work_date": record.work_date.isoformat()}), 201

    @app.route("/api/payroll/monthly/summary", methods=["GET"], endpoint="payroll_monthly_summary")
    @login_required
    @handle_domain_errors
    def monthly_summary():
        month = require_int(request.args.get("month"), "month")
        year = require_int(request.args.get("year"), "year")
        rows = service.list_monthly(current_role=current_role(), user_id=current_user_id(), month=month, year=year)
        totals = service.monthly_totals(rows)
        return jsonify(
            {
                "month": month,
                "year": year,
                "employees": len(rows),
                **{k: quantize_money(v) for k, v in totals.items()},
            }
        )

    @app.route("/api/payroll/daily", methods=["POST"], endpoint="payroll_daily_create")
    @login_required
    @handle_domain_errors
    def create_daily():
        body = request.get_json(silent=True) or {}
        employee_id = require_non_empty(str(body.get("employee_id") or ""), "employee_id")
        work_date = _parse_date(body.get("date"), "date")
        planned = body.get("planned_hours")

        record = service.record_manual_day(
            current_role=current_role(),
            employee_id=employee_id,
            work_date=work_date,
            actual_hours=require_decimal(body.get("actual_hours"), "actual_hours"),
            planned_hours=None if planned is None else require_decimal(planned, "planned_hours"),
        )
        return jsonify({**record.to_row(), "work_date": record.work_date.isoformat()}), 201

    @app.route("/api/payroll/daily/<employee_id>/<work_date>", methods=["DELETE"], endpoint="payroll_daily_delete")
    @login_required
    @handle_domain_errors
    def delete_daily(employee_id: str, work_date: str):
        service.delete_day(
            current_role=current_role(), employee_id=employee_id, work_date=_parse_date(work_date, "date")
        )
        return jsonify({"message": "Daily payroll deleted"})
