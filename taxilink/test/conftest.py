import pytest

from taxilink.db.models import DriverDraft
from taxilink.db.store import InMemoryStore
from taxilink.state import create_app_state
from taxilink.services.match_service import FirstAvailableMatcher
from taxilink.utils.utils import IdGenerator


@pytest.fixture
def store():
    return InMemoryStore(prefix="test")


@pytest.fixture
def frozen_ids():
    # every call sees the same millisecond
    return IdGenerator(clock=lambda: 1_700_000_000.0)


@pytest.fixture
def state(store, frozen_ids):
    return create_app_state(store, matcher=FirstAvailableMatcher(), ids=frozen_ids)


@pytest.fixture
def jane():
    return DriverDraft(name="Jane", phone="071 555 0101", car="CA 123")
