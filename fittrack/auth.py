# backend/fittrack/auth.py
from functools import wraps

from flask import g, jsonify, request

from . import db
from .models.enums import SCOPE_AUTHENTICATION
from .services.tokens import get_user_for_token


def _bearer_token():
    header = request.headers.get("Authorization", "")
    scheme, _, value = header.partition(" ")
    if scheme != "Bearer" or not value.strip():
        return None
    return value.strip()


def token_required(view_func):
    """
    Require ``Authorization: Bearer <token>`` with a live authentication
    token. The matching user is passed to the view as ``current_user``.
    """

    @wraps(view_func)
    def wrapper(*args, **kwargs):
        user = get_user_for_token(db.session, SCOPE_AUTHENTICATION, _bearer_token())
        if user is None:
            return jsonify({"error": "invalid or missing authentication token"}), 401

        if not user.active:
            return jsonify({"error": "your user account must be active to access this resource"}), 403

        g.current_user = user
        kwargs["current_user"] = user
        return view_func(*args, **kwargs)

    return wrapper
