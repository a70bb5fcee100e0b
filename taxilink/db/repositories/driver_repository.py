# repositories/driver_repository.py
import logging
from typing import Optional, Sequence

from taxilink.db.init_db import DEFAULT_DRIVERS
from taxilink.db.models import Driver, DriverDraft
from taxilink.db.repositories.base_repository import BaseRepository
from taxilink.db.store import Store
from taxilink.utils.utils import IdGenerator

logger = logging.getLogger(__name__)


class DriverRepository(BaseRepository[Driver]):
    key = "drivers"

    def __init__(self, store: Store, id_generator: Optional[IdGenerator] = None):
        super().__init__(store, Driver, DEFAULT_DRIVERS)
        self.ids = id_generator or IdGenerator()

    def register(self, draft: DriverDraft) -> Driver:
        # No field checks here, the driver portal validates before calling
        driver = Driver(
            id=self.ids.next_id(self.max_id()),
            available=True if draft.available is None else draft.available,
            **draft.model_dump(exclude={"available"}),
        )
        self.items.append(driver)
        self.persist()
        logger.info(f"Registered driver {driver.id} ({driver.name})")
        return driver

    def list_available(self) -> Sequence[Driver]:
        return [d for d in self.items if d.available]

    def set_availability(self, driver_id: int, available: bool) -> Optional[Driver]:
        driver = self._replace(driver_id, available=available)
        if driver is None:
            logger.info(f"No driver {driver_id} to update")
        return driver
