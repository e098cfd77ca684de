# backend/fittrack/services/tokens.py
import hashlib
import secrets
from datetime import datetime, timedelta
from typing import Optional, Tuple

from ..models.token import Token
from ..models.user import User

TOKEN_BYTES = 16


def hash_token(plaintext: str) -> str:
    return hashlib.sha256(plaintext.encode("utf-8")).hexdigest()


def generate_token(user_id, ttl: timedelta, scope: str, now=None) -> Tuple[str, Token]:
    """
    Build a token row for ``user_id``. Returns ``(plaintext, token)``; only the
    hash ends up on the row, so the plaintext must be handed back to the
    caller now or never.
    """
    plaintext = secrets.token_urlsafe(TOKEN_BYTES)
    token = Token(
        user_id=user_id,
        hash=hash_token(plaintext),
        expiry=(now or datetime.utcnow()) + ttl,
        scope=scope,
    )
    return plaintext, token


def prune_expired(session, user_id, now=None) -> int:
    """Queue a delete of ``user_id``'s expired tokens; the caller commits."""
    return (
        session.query(Token)
        .filter(Token.user_id == user_id, Token.expiry <= (now or datetime.utcnow()))
        .delete(synchronize_session=False)
    )


def issue_token(session, user: User, ttl: timedelta, scope: str, now=None) -> Tuple[str, Token]:
    now = now or datetime.utcnow()
    plaintext, token = generate_token(user.id, ttl, scope, now=now)
    prune_expired(session, user.id, now=now)
    session.add(token)
    session.commit()
    return plaintext, token


def get_user_for_token(session, scope: str, plaintext: str, now=None) -> Optional[User]:
    if not plaintext:
        return None

    token = session.query(Token).filter_by(hash=hash_token(plaintext)).first()
    if token is None or not token.is_valid(scope, now):
        return None
    return token.user


def revoke(session, scope: str, user_id) -> int:
    """Queue a delete of every ``scope`` token for ``user_id``; the caller commits."""
    return (
        session.query(Token)
        .filter(Token.user_id == user_id, Token.scope == scope)
        .delete(synchronize_session=False)
    )


def delete_all_for_user(session, scope: str, user_id) -> int:
    deleted = revoke(session, scope, user_id)
    session.commit()
    return deleted
