from datetime import datetime, timedelta, timezone

import pytest

from dtoken import InvalidFormatError, Session, TokenFactory


class ObjectId:
    """Stand-in for a driver id type compared by its hex value."""

    def __init__(self, value: str) -> None:
        self.value = value

    def __eq__(self, other: object) -> bool:
        return NotImplemented


def test_create_generates_a_fresh_token(factory) -> None:
    session = Session.create("user-1", factory)
    assert session.token.persistent
    assert session.session_token == session.token.to_string()


def test_create_parses_a_token_string(factory) -> None:
    session = Session.create("user-1", factory, token="abc_def:1535454879537_1535454879999")
    assert session.token.persistent == "abc"
    assert session.token.transient == "def"


def test_create_rejects_a_malformed_token_string(factory) -> None:
    with pytest.raises(InvalidFormatError):
        Session.create("user-1", factory, token="not-a-token")


def test_create_reuses_a_given_token(factory) -> None:
    token = factory.create()
    session = Session.create(42, factory, token=token)
    assert session.token is token


def test_validate_checks_user_id_and_token(factory) -> None:
    session = Session.create("user-1", factory)
    current = session.session_token

    assert session.validate("user-1", current) is True
    assert session.validate("user-2", current) is False

    session.next()
    assert session.validate("user-1", current) is False
    assert session.validate_token(session.session_token) is True


def test_next_returns_previous_transient(factory) -> None:
    session = Session.create("user-1", factory)
    transient = session.token.transient
    assert session.next() == transient


def test_custom_comparator_is_used_for_user_ids(factory) -> None:
    session = Session.create(
        ObjectId("5b8a"),
        factory,
        comparator=lambda a, b: a.value == b.value,
    )
    assert session.validate_user_id(ObjectId("5b8a")) is True
    assert session.validate_user_id(ObjectId("ffff")) is False


def test_default_comparator_uses_equality(factory) -> None:
    session = Session.create(7, factory)
    assert session.validate_user_id(7) is True
    assert session.validate_user_id(8) is False


def test_session_without_expiration_never_expires(factory) -> None:
    assert Session.create("user-1", factory).has_expired is False


def test_session_expiry_uses_factory_clock(factory, fixed_now) -> None:
    past = Session.create("user-1", factory, expiration=fixed_now - timedelta(minutes=5))
    future = Session.create("user-1", factory, expiration=fixed_now + timedelta(minutes=5))
    assert past.clock is factory.clock
    assert past.has_expired is True
    assert future.has_expired is False


def test_session_expires_at_its_expiration_instant(fixed_now) -> None:
    factory = TokenFactory(clock=lambda: fixed_now)
    assert Session.create("user-1", factory, expiration=fixed_now).has_expired is True
    assert Session.create("user-1", factory, expiration=fixed_now + timedelta(milliseconds=1)).has_expired is False


def test_session_without_factory_clock_uses_wall_clock(factory) -> None:
    now = datetime.now(timezone.utc)
    session = Session(user_id="user-1", token=factory.create(), expiration=now - timedelta(minutes=5))
    assert session.has_expired is True
