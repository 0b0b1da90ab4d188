from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.http import handle_domain_errors, login_required
from ..common.validators import require_int
from ..container import Container


def register(app: Flask, container: Container) -> None:
    calendar = container.holiday_calendar

    @app.route("/api/holidays", methods=["GET"], endpoint="holidays_list")
    @login_required
    @handle_domain_errors
    def list_holidays():
        month = require_int(request.args.get("month"), "month")
        year = require_int(request.args.get("year"), "year")
        return jsonify(
            [
                {"date": h.holiday_date.isoformat(), "name": h.name, "type": h.holiday_type.value}
                for h in calendar.holidays_in_month(month, year)
            ]
        )
