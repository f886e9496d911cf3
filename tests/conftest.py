from datetime import datetime, timezone

import pytest

from signup.directory import InMemoryDirectory
from signup.session import SignupSession
from signup.state import User

FIXED_NOW = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)

VALID_FIELDS = {
    "email": "a@b.com",
    "phone": "010-1234-5678",
    "password": "Abc12345!",
    "confirmPassword": "Abc12345!",
    "username": "abc123",
    "referralUsername": "",
}


@pytest.fixture
def directory():
    return InMemoryDirectory([User(id=1, username="alice"), User(id=2, username="bob")])


@pytest.fixture
def session(directory):
    return SignupSession(directory, clock=lambda: FIXED_NOW)


def fill(session, **overrides):
    fields = dict(VALID_FIELDS, **overrides)
    for name, value in fields.items():
        session.update_field(name, value)
    session.toggle_agreement("terms", True)
    session.toggle_agreement("privacy", True)
    return session
