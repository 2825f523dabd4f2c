"""Test configuration and fixtures."""

import pytest

from tests.factories import FrozenClock, make_member


@pytest.fixture
def clock() -> FrozenClock:
    """Clock frozen at a fixed instant."""
    return FrozenClock()


@pytest.fixture
def inviter():
    """The user sending invites."""
    return make_member()
