from datetime import datetime, timedelta

from fittrack.models import Token
from fittrack.models.enums import SCOPE_AUTHENTICATION, SCOPE_PASSWORD_RESET
from fittrack.services import accounts, tokens

NOW = datetime(2030, 6, 1, 8, 30)


def _user(session, registration):
    return accounts.create_user(session, registration(), "pbkdf2:sha256:1000")


def test_generate_token_stores_only_the_hash(session, registration):
    user = _user(session, registration)

    plaintext, token = tokens.generate_token(user.id, timedelta(minutes=5), SCOPE_AUTHENTICATION, now=NOW)

    assert token.hash == tokens.hash_token(plaintext)
    assert plaintext not in token.hash
    assert len(token.hash) == 64
    assert token.expiry == NOW + timedelta(minutes=5)
    assert token.user_id == user.id


def test_tokens_are_unique(session, registration):
    user = _user(session, registration)
    seen = {tokens.generate_token(user.id, timedelta(minutes=1), SCOPE_AUTHENTICATION)[0] for _ in range(50)}
    assert len(seen) == 50


def test_get_user_for_token(session, registration):
    user = _user(session, registration)
    plaintext, _ = tokens.issue_token(session, user, timedelta(hours=1), SCOPE_AUTHENTICATION, now=NOW)

    found = tokens.get_user_for_token(session, SCOPE_AUTHENTICATION, plaintext, now=NOW + timedelta(minutes=59))

    assert found.id == user.id


def test_token_invalid_for_other_scope(session, registration):
    user = _user(session, registration)
    plaintext, _ = tokens.issue_token(session, user, timedelta(hours=1), SCOPE_PASSWORD_RESET, now=NOW)

    assert tokens.get_user_for_token(session, SCOPE_AUTHENTICATION, plaintext, now=NOW) is None


def test_token_invalid_once_expired(session, registration):
    user = _user(session, registration)
    plaintext, _ = tokens.issue_token(session, user, timedelta(hours=1), SCOPE_AUTHENTICATION, now=NOW)

    assert tokens.get_user_for_token(session, SCOPE_AUTHENTICATION, plaintext, now=NOW + timedelta(hours=1)) is None


def test_unknown_or_empty_token(session, registration):
    _user(session, registration)

    assert tokens.get_user_for_token(session, SCOPE_AUTHENTICATION, "not-a-token") is None
    assert tokens.get_user_for_token(session, SCOPE_AUTHENTICATION, None) is None


def test_is_valid():
    token = Token(scope=SCOPE_AUTHENTICATION, expiry=NOW)

    assert token.is_valid(SCOPE_AUTHENTICATION, now=NOW - timedelta(seconds=1))
    assert not token.is_valid(SCOPE_AUTHENTICATION, now=NOW)
    assert not token.is_valid(SCOPE_PASSWORD_RESET, now=NOW - timedelta(seconds=1))


def test_delete_all_for_user(session, registration):
    user = _user(session, registration)
    tokens.issue_token(session, user, timedelta(hours=1), SCOPE_AUTHENTICATION)
    tokens.issue_token(session, user, timedelta(hours=1), SCOPE_AUTHENTICATION)
    tokens.issue_token(session, user, timedelta(hours=1), SCOPE_PASSWORD_RESET)

    assert tokens.delete_all_for_user(session, SCOPE_AUTHENTICATION, user.id) == 2
    assert [t.scope for t in session.query(Token).all()] == [SCOPE_PASSWORD_RESET]


def test_issue_token_prunes_expired_rows(session, registration):
    user = _user(session, registration)
    tokens.issue_token(session, user, timedelta(hours=1), SCOPE_AUTHENTICATION, now=NOW)
    kept, _ = tokens.issue_token(session, user, timedelta(hours=4), SCOPE_PASSWORD_RESET, now=NOW)

    latest, _ = tokens.issue_token(session, user, timedelta(hours=1), SCOPE_AUTHENTICATION, now=NOW + timedelta(hours=2))

    assert session.query(Token).count() == 2
    later = NOW + timedelta(hours=2)
    assert tokens.get_user_for_token(session, SCOPE_PASSWORD_RESET, kept, now=later).id == user.id
    assert tokens.get_user_for_token(session, SCOPE_AUTHENTICATION, latest, now=later).id == user.id


def test_prune_leaves_other_users_alone(session, registration):
    alice = _user(session, registration)
    bob = accounts.create_user(session, registration(email="bob@example.com"), "pbkdf2:sha256:1000")
    tokens.issue_token(session, bob, timedelta(hours=1), SCOPE_AUTHENTICATION, now=NOW)

    tokens.issue_token(session, alice, timedelta(hours=1), SCOPE_AUTHENTICATION, now=NOW + timedelta(days=1))

    assert session.query(Token).filter_by(user_id=bob.id).count() == 1
