from __future__ import annotations

import logging
from functools import wraps

from flask import jsonify, session

from ..core.enums import Role
from ..core.exceptions import AuthorizationError, NotFoundError, ValidationError

logger = logging.getLogger(__name__)


def login_required(view):
    """JSON API guard. Login itself is handled by the external OIDC layer,
    which stores ``user_id`` and ``role`` in the Flask session."""

    @wraps(view)
    def wrapper(*args, **kwargs):
        if "user_id" not in session:
            return jsonify({"message": "Unauthorized"}), 401
        return view(*args, **kwargs)

    return wrapper


def handle_domain_errors(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        try:
            return view(*args, **kwargs)
        except ValidationError as e:
            return jsonify({"message": str(e)}), 400
        except AuthorizationError as e:
            return jsonify({"message": str(e)}), 403
        except NotFoundError as e:
            return jsonify({"message": str(e)}), 404

    return wrapper


def current_user_id() -> str:
    return str(session["user_id"])


def current_role() -> Role:
    try:
        return Role(session.get("role") or Role.EMPLOYEE.value)
    except ValueError:
        logger.warning("Unknown role %r in session; treating as employee", session.get("role"))
        return Role.EMPLOYEE
