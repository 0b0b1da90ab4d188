from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import current_user_id, handle_domain_errors, login_required
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/work-sessions/start", methods=["POST"], endpoint="work_session_start")
    @login_required
    @handle_domain_errors
    def start():
        session_id = container.work_session_service.start_session(current_user_id())
        return jsonify({"session_id": session_id}), 201

    @app.route("/api/work-sessions/end", methods=["POST"], endpoint="work_session_end")
    @login_required
    @handle_domain_errors
    def end():
        total_minutes = container.work_session_service.end_session(current_user_id())
        return jsonify({"total_minutes": total_minutes})
