from dataclasses import dataclass
from typing import Optional

from taxilink.config import conf
from taxilink.db.repositories.booking_repository import BookingRepository
from taxilink.db.repositories.driver_repository import DriverRepository
from taxilink.db.repositories.user_repository import UserRepository
from taxilink.db.store import Store, build_store
from taxilink.services.match_service import DriverMatcher, build_matcher
from taxilink.utils.utils import IdGenerator


@dataclass
class AppState:
    """
    The state every channel shares. Channels get this object handed to
    them and change it only through the repositories' named operations.
    """

    store: Store
    drivers: DriverRepository
    history: BookingRepository
    users: UserRepository
    matcher: DriverMatcher
    ids: IdGenerator


def create_app_state(store: Optional[Store] = None,
                     matcher: Optional[DriverMatcher] = None,
                     ids: Optional[IdGenerator] = None) -> AppState:
    store = store if store is not None else build_store()
    ids = ids or IdGenerator()
    return AppState(
        store=store,
        drivers=DriverRepository(store, ids),
        history=BookingRepository(store),
        users=UserRepository(store),
        matcher=matcher or build_matcher(conf.MATCH_STRATEGY),
        ids=ids,
    )
