# backend/fittrack/routes/user_routes.py

from flask import Blueprint, current_app, jsonify, request

from .. import db
from ..auth import token_required
from ..errors import FitTrackError
from ..services import accounts
from ..validator import Validator

user_bp = Blueprint("user", __name__)


def _json_body():
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def _error_response(err: FitTrackError):
    return jsonify(err.to_dict()), err.status_code


# -----------------------------
# Routes
# -----------------------------
@user_bp.route("", methods=["POST"])
def create_user():
    data = _json_body()

    try:
        user = accounts.create_user(
            db.session, data, current_app.config["PASSWORD_HASH_METHOD"]
        )
    except FitTrackError as err:
        if err.status_code >= 500:
            current_app.logger.exception("[user/create] %s", type(err).__name__)
        else:
            current_app.logger.info("[user/create] rejected: %s", type(err).__name__)
        return _error_response(err)
    except Exception:
        db.session.rollback()
        current_app.logger.exception("[user/create] unexpected error")
        return jsonify({"error": "Unknown error occurred"}), 500

    current_app.logger.info(f"[user/create] user_id={user.id}")
    return jsonify({"message": "User created successfully"}), 200


@user_bp.route("/login", methods=["POST"])
def login():
    data = _json_body()

    email = data.get("email") or ""
    password = data.get("password") or ""  # do NOT strip passwords

    v = Validator()
    v.check(not isinstance(email, str) or not email, "email", "is required")
    v.check(not isinstance(password, str) or not password, "password", "is required")
    if not v.valid:
        return jsonify({"errors": v.errors}), 400

    try:
        plaintext, token, user = accounts.authenticate(
            db.session, email, password, current_app.config["AUTH_TOKEN_TTL"]
        )
    except FitTrackError as err:
        current_app.logger.info("[user/login] failed for '%s'", email)
        return _error_response(err)

    return jsonify({
        "token": plaintext,
        "expiry": token.expiry.isoformat(),
        "user": user.to_dict(),
    }), 200


@user_bp.route("/password", methods=["PUT"])
def reset_password():
    data = _json_body()

    try:
        user = accounts.reset_password(
            db.session,
            data.get("token"),
            data.get("password"),
            current_app.config["PASSWORD_HASH_METHOD"],
        )
    except FitTrackError as err:
        if err.status_code >= 500:
            current_app.logger.exception("[user/password] %s", type(err).__name__)
        return _error_response(err)

    current_app.logger.info(f"[user/password] reset for user_id={user.id}")
    return jsonify({"message": "your password was successfully reset"}), 200


@user_bp.route("", methods=["GET"])
@token_required
def get_user(current_user):
    return jsonify({"user": current_user.to_dict()}), 200


@user_bp.route("", methods=["PUT"])
@token_required
def update_user(current_user):
    data = _json_body()

    try:
        user = accounts.update_user(
            db.session, current_user, data, current_app.config["PASSWORD_HASH_METHOD"]
        )
    except FitTrackError as err:
        if err.status_code >= 500:
            current_app.logger.exception("[user/update] %s", type(err).__name__)
        return _error_response(err)

    return jsonify({"user": user.to_dict()}), 200


@user_bp.route("", methods=["DELETE"])
@token_required
def delete_user(current_user):
    try:
        accounts.delete_user(db.session, current_user)
    except FitTrackError as err:
        current_app.logger.exception("[user/delete] %s", type(err).__name__)
        return _error_response(err)

    return jsonify({"message": "User deleted successfully"}), 200
