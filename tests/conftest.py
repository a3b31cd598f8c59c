import os

# Tests never touch disk or AWS unless a test builds that store itself
os.environ["BOOKING_STORE_BACKEND"] = "memory"

import pytest  # noqa: E402

from seat_selector.database import InMemoryBookingStore  # noqa: E402
from seat_selector.main import app  # noqa: E402
from seat_selector.session import SeatingSession  # noqa: E402


@pytest.fixture
def store():
    return InMemoryBookingStore()


@pytest.fixture(autouse=True)
def session(store):
    """Fresh seating session backed by an in-memory store for every test"""
    seating_session = SeatingSession(store)
    app.state.session = seating_session
    return seating_session
