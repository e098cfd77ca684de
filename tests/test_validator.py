import pytest

from fittrack.validator import EMAIL_RX, Validator


def test_new_validator_is_valid():
    v = Validator()
    assert v.valid
    assert v.errors == []


def test_check_records_only_violations():
    v = Validator()
    v.check(False, "firstName", "is required")
    v.check(True, "lastName", "is required")

    assert not v.valid
    assert v.errors == [{"field": "lastName", "message": "is required"}]


def test_errors_keep_order_and_duplicates():
    v = Validator()
    v.check(True, "password", "is required")
    v.check(True, "email", "must be a valid email address")
    v.check(True, "password", "must be at least 8 characters")

    assert [e["field"] for e in v.errors] == ["password", "email", "password"]


def test_errors_is_a_copy():
    v = Validator()
    v.check(True, "email", "is required")
    v.errors.clear()
    assert len(v.errors) == 1


def test_same_input_gives_same_errors():
    def run(first_name):
        v = Validator()
        v.check(not first_name, "firstName", "is required")
        v.check(len(first_name) < 3, "firstName", "must be at least 3 characters")
        return v.errors

    assert run("") == run("")
    assert run("Jo") == run("Jo")


@pytest.mark.parametrize(
    "email",
    [
        "jo@example.com",
        "A@B.com",
        "first.last+tag@sub.example.co.uk",
        "o'reilly@example.org",
        "user@localhost",
    ],
)
def test_email_pattern_accepts(email):
    assert Validator.matches(email, EMAIL_RX)


@pytest.mark.parametrize(
    "email",
    [
        "",
        "plainaddress",
        "@example.com",
        "user@",
        "user@-example.com",
        "user@example-.com",
        "user name@example.com",
        "user@example.com\n",
        None,
        42,
    ],
)
def test_email_pattern_rejects(email):
    assert not Validator.matches(email, EMAIL_RX)


def test_permitted():
    assert Validator.permitted("metric", "metric", "imperial")
    assert not Validator.permitted("furlongs", "metric", "imperial")
