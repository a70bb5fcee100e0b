import logging
from typing import Optional

from taxilink.channels.domain import Outcome
from taxilink.db.models import Driver, DriverDraft
from taxilink.state import AppState

logger = logging.getLogger(__name__)

MISSING_DRIVER_FIELDS = "Please fill in driver name and phone"


class DriverService:
    """Driver portal: validates the registration form, then hands it to the registry."""

    def __init__(self, state: AppState):
        self.state = state

    def register(self, draft: DriverDraft) -> Outcome:
        if not draft.name.strip() or not draft.phone.strip():
            return Outcome.refused(MISSING_DRIVER_FIELDS)
        driver = self.state.drivers.register(draft)
        return Outcome.done(f"Welcome aboard, {driver.name}", driver=driver)

    def set_availability(self, driver_id: int, available: bool) -> Optional[Driver]:
        return self.state.drivers.set_availability(driver_id, available)
