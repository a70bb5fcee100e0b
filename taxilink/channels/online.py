import logging
from typing import Any, Sequence

from pydantic import ValidationError

from taxilink.channels.domain import MISSING_LOCATIONS, OnlineDraft, Outcome, SessionStage
from taxilink.db.models import BookingMethod, Driver
from taxilink.services.booking_service import BookingService
from taxilink.state import AppState

logger = logging.getLogger(__name__)

NO_DRIVERS = "No drivers are available right now"
NO_DRIVER_SELECTED = "Please select a driver"
DRIVER_UNAVAILABLE = "The selected driver is no longer available, please choose another"
EDITABLE_FIELDS = {"pickup", "destination", "time", "passengers"}


class OnlineSession:
    """
    Booking-in-progress for the online channel.

        collecting --find_drivers--> selecting --confirm--> committed
                   <-----back-------

    A session lives as long as the booking screen. Opening the channel
    again means a new OnlineSession.
    """

    def __init__(self, state: AppState):
        self.state = state
        self.draft = OnlineDraft()
        self.stage = SessionStage.collecting

    def update(self, **fields: Any) -> Outcome:
        if self.stage is not SessionStage.collecting:
            return Outcome.refused(f"Booking details are locked while {self.stage.value}")
        unknown = set(fields) - EDITABLE_FIELDS
        if unknown:
            return Outcome.refused(f"Unknown booking field(s): {', '.join(sorted(unknown))}")
        try:
            # validate everything before touching the live draft
            merged = OnlineDraft.model_validate({**self.draft.model_dump(), **fields})
        except ValidationError as error:
            return Outcome.refused(str(error.errors()[0]["msg"]))
        self.draft = merged
        return Outcome.done()

    def candidates(self) -> Sequence[Driver]:
        return self.state.drivers.list_available()

    def find_drivers(self) -> Outcome:
        if self.stage is not SessionStage.collecting:
            return Outcome.refused(f"Cannot search for drivers while {self.stage.value}")
        if not self.draft.pickup or not self.draft.destination:
            return Outcome.refused(MISSING_LOCATIONS)

        driver = self.state.matcher.match(self.state.drivers.list_all())
        if driver is None:
            return Outcome.refused(NO_DRIVERS)

        self.draft.selected_driver = driver
        self.stage = SessionStage.selecting
        return Outcome.done(driver=driver)

    def select_driver(self, driver_id: int) -> Outcome:
        if self.stage is not SessionStage.selecting:
            return Outcome.refused("Find drivers before choosing one")
        driver = next((d for d in self.candidates() if d.id == driver_id), None)
        if driver is None:
            return Outcome.refused(f"Driver {driver_id} is not available")
        self.draft.selected_driver = driver
        return Outcome.done(driver=driver)

    def back(self) -> Outcome:
        if self.stage is not SessionStage.selecting:
            return Outcome.refused("Nothing to go back from")
        self.draft.selected_driver = None
        self.stage = SessionStage.collecting
        return Outcome.done()

    def confirm(self) -> Outcome:
        if self.stage is SessionStage.committed:
            return Outcome.refused("This booking is already confirmed")
        if self.draft.selected_driver is None:
            return Outcome.refused(NO_DRIVER_SELECTED)

        # availability may have changed since the driver was picked
        current = self.state.drivers.get_by_id(self.draft.selected_driver.id)
        if current is None or not current.available:
            return Outcome.refused(DRIVER_UNAVAILABLE)

        booking = BookingService(self.state).create_booking(self.draft, BookingMethod.online)
        self.stage = SessionStage.committed
        logger.info(f"Online booking {booking.id} committed with {booking.driver}")
        return Outcome.done("Booking confirmed", booking=booking)
