import pytest

from config import TestingConfig
from fittrack import create_app, db


@pytest.fixture
def app():
    app = create_app(TestingConfig)
    with app.app_context():
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def session(app):
    return db.session


@pytest.fixture
def registration():
    def _make(**overrides):
        payload = {
            "firstName": "Alice",
            "lastName": "Walker",
            "email": "alice@example.com",
            "password": "correct-horse",
        }
        payload.update(overrides)
        return payload

    return _make


@pytest.fixture
def login(client, registration):
    """Register (if needed) and log in; returns the bearer headers."""

    def _login(**overrides):
        payload = registration(**overrides)
        client.post("/v1/user", json=payload)
        resp = client.post(
            "/v1/user/login",
            json={"email": payload["email"], "password": payload["password"]},
        )
        assert resp.status_code == 200, resp.get_json()
        return {"Authorization": f"Bearer {resp.get_json()['token']}"}

    return _login
