# backend/fittrack/services/accounts.py
"""
Account lifecycle: registration, login, profile edits and deletion.

Every function takes the SQLAlchemy session it should use as its first
argument; routes pass ``db.session``, tests and the CLI can pass their own.
"""

import logging
import uuid
from datetime import datetime, timedelta
from typing import Any, Mapping, Optional, Tuple

from sqlalchemy import func
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from ..errors import (
    ConflictError,
    HashingError,
    InvalidCredentialsError,
    PersistenceError,
    ValidationError,
)
from ..models.enums import (
    ACCOUNT_TYPES,
    SCOPE_AUTHENTICATION,
    SCOPE_PASSWORD_RESET,
    UNIT_SYSTEMS,
)
from ..models.token import Token
from ..models.user import User
from ..validator import EMAIL_RX, Validator
from . import tokens

logger = logging.getLogger(__name__)

NAME_MIN_LENGTH = 3
PASSWORD_MIN_LENGTH = 8


# ------------------------------
# Helpers
# ------------------------------
def _text(data: Mapping[str, Any], key: str) -> str:
    value = data.get(key)
    return value if isinstance(value, str) else ""


def _check_name(v: Validator, field: str, value: str) -> None:
    v.check(not value, field, "is required")
    v.check(len(value) < NAME_MIN_LENGTH, field, f"must be at least {NAME_MIN_LENGTH} characters")


def _check_email(v: Validator, value: str) -> None:
    v.check(not value, "email", "is required")
    v.check(not Validator.matches(value, EMAIL_RX), "email", "must be a valid email address")


def _check_password(v: Validator, value: str) -> None:
    v.check(not value, "password", "is required")
    v.check(
        len(value) < PASSWORD_MIN_LENGTH,
        "password",
        f"must be at least {PASSWORD_MIN_LENGTH} characters",
    )


def validate_registration(data: Mapping[str, Any]) -> Validator:
    v = Validator()
    _check_name(v, "firstName", _text(data, "firstName"))
    _check_name(v, "lastName", _text(data, "lastName"))
    _check_email(v, _text(data, "email"))
    _check_password(v, _text(data, "password"))
    return v


def _hash_password(user: User, password: str, hash_method: str) -> None:
    try:
        user.set_password(password, hash_method)
    except Exception as exc:
        raise HashingError() from exc


def find_by_email(session, email: str) -> Optional[User]:
    return session.query(User).filter(func.lower(User.email) == email.lower()).first()


def _commit_user(session, user: User) -> None:
    """Commit pending changes for ``user``, mapping store failures."""
    # a rollback expires the instance, so read these first
    email, user_id = user.email, user.id
    try:
        session.commit()
    except IntegrityError as exc:
        session.rollback()
        other = find_by_email(session, email) if email else None
        if other is not None and other.id != user_id:
            raise ConflictError() from exc
        raise PersistenceError() from exc
    except SQLAlchemyError as exc:
        session.rollback()
        raise PersistenceError() from exc


def _revoke_credentials(session, user_id) -> None:
    try:
        tokens.revoke(session, SCOPE_AUTHENTICATION, user_id)
        tokens.revoke(session, SCOPE_PASSWORD_RESET, user_id)
    except SQLAlchemyError as exc:
        session.rollback()
        raise PersistenceError() from exc


def _build_user(data: Mapping[str, Any], account_type: str, hash_method: str) -> User:
    user = User(
        id=uuid.uuid4(),
        first_name=_text(data, "firstName"),
        last_name=_text(data, "lastName"),
        email=_text(data, "email"),
        account_type=account_type,
    )
    _hash_password(user, _text(data, "password"), hash_method)
    return user


# ------------------------------
# Registration
# ------------------------------
def create_user(session, data: Mapping[str, Any], hash_method: str) -> User:
    """
    Validate ``data`` and persist a new ``user`` account.

    Raises ValidationError with every failing field, HashingError when the
    password cannot be hashed, ConflictError when the email is taken
    (case-insensitively) and PersistenceError for any other store failure.
    """
    v = validate_registration(data)
    if not v.valid:
        raise ValidationError(v.errors)

    requested_type = data.get("accountType")
    if requested_type not in (None, "user"):
        # privileged accounts are only created through the CLI
        logger.info("ignoring requested accountType=%r on public registration", requested_type)

    user = _build_user(data, "user", hash_method)
    session.add(user)
    _commit_user(session, user)

    logger.info("created user id=%s", user.id)
    return user


def create_privileged_user(
    session, data: Mapping[str, Any], account_type: str, hash_method: str
) -> User:
    v = validate_registration(data)
    v.check(
        not Validator.permitted(account_type, *ACCOUNT_TYPES),
        "accountType",
        "must be one of " + ", ".join(ACCOUNT_TYPES),
    )
    if not v.valid:
        raise ValidationError(v.errors)

    user = _build_user(data, account_type, hash_method)
    session.add(user)
    _commit_user(session, user)

    logger.info("created %s account id=%s", account_type, user.id)
    return user


# ------------------------------
# Login
# ------------------------------
def authenticate(
    session, email: str, password: str, token_ttl: timedelta, now=None
) -> Tuple[str, Token, User]:
    """Check credentials and issue an authentication token."""
    user = find_by_email(session, email) if email else None

    if user is None or not password or not user.check_password(password):
        raise InvalidCredentialsError()

    if not user.active:
        logger.info("login refused for inactive user id=%s", user.id)
        raise InvalidCredentialsError()

    now = now or datetime.utcnow()
    user.last_login = now
    try:
        plaintext, token = tokens.issue_token(
            session, user, token_ttl, SCOPE_AUTHENTICATION, now=now
        )
    except SQLAlchemyError as exc:
        session.rollback()
        raise PersistenceError() from exc

    return plaintext, token, user


# ------------------------------
# Account management
# ------------------------------
def update_user(session, user: User, data: Mapping[str, Any], hash_method: str) -> User:
    """
    Apply a partial update. Only keys present in ``data`` are validated and
    changed; ``accountType`` cannot be changed here.
    """
    v = Validator()
    if "firstName" in data:
        _check_name(v, "firstName", _text(data, "firstName"))
    if "lastName" in data:
        _check_name(v, "lastName", _text(data, "lastName"))
    if "email" in data:
        _check_email(v, _text(data, "email"))
    if "password" in data:
        _check_password(v, _text(data, "password"))
    if "preferredUnitSystem" in data:
        v.check(
            not Validator.permitted(data.get("preferredUnitSystem"), *UNIT_SYSTEMS),
            "preferredUnitSystem",
            "must be one of " + ", ".join(UNIT_SYSTEMS),
        )
    if not v.valid:
        raise ValidationError(v.errors)

    if "password" in data:
        _hash_password(user, data["password"], hash_method)
        # old sessions and reset links die with the old password; revoked
        # before the other changes so autoflush cannot hit the email index
        _revoke_credentials(session, user.id)
    if "firstName" in data:
        user.first_name = data["firstName"]
    if "lastName" in data:
        user.last_name = data["lastName"]
    if "email" in data:
        user.email = data["email"]
    if "preferredUnitSystem" in data:
        user.preferred_unit_system = data["preferredUnitSystem"]

    _commit_user(session, user)
    return user


# ------------------------------
# Password reset
# ------------------------------
def request_password_reset(
    session, email: str, token_ttl: timedelta, now=None
) -> Optional[Tuple[str, Token]]:
    """
    Issue a password-reset token for the active account owning ``email``.
    Returns None when there is no such account. Earlier reset tokens are
    revoked so only the newest one works.
    """
    user = find_by_email(session, email) if email else None
    if user is None or not user.active:
        return None

    try:
        tokens.revoke(session, SCOPE_PASSWORD_RESET, user.id)
        plaintext, token = tokens.issue_token(
            session, user, token_ttl, SCOPE_PASSWORD_RESET, now=now
        )
    except SQLAlchemyError as exc:
        session.rollback()
        raise PersistenceError() from exc

    logger.info("issued password reset token for user id=%s", user.id)
    return plaintext, token


def reset_password(
    session, plaintext: str, password: Any, hash_method: str, now=None
) -> User:
    """Consume a reset token and set a new password."""
    v = Validator()
    v.check(not isinstance(plaintext, str) or not plaintext, "token", "is required")
    _check_password(v, password if isinstance(password, str) else "")
    if not v.valid:
        raise ValidationError(v.errors)

    user = tokens.get_user_for_token(session, SCOPE_PASSWORD_RESET, plaintext, now=now)
    if user is None or not user.active:
        raise ValidationError(
            [{"field": "token", "message": "invalid or expired password reset token"}]
        )

    _hash_password(user, password, hash_method)
    _revoke_credentials(session, user.id)
    _commit_user(session, user)

    logger.info("password reset for user id=%s", user.id)
    return user


def delete_user(session, user: User) -> None:
    """Remove the account; owned rows go with it through ON DELETE CASCADE."""
    user_id = user.id
    session.delete(user)
    try:
        session.commit()
    except SQLAlchemyError as exc:
        session.rollback()
        raise PersistenceError() from exc
    logger.info("deleted user id=%s", user_id)

