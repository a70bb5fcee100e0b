import logging

from taxilink.channels.domain import OnlineDraft
from taxilink.db.models import Booking, BookingMethod, BookingStatus
from taxilink.state import AppState

logger = logging.getLogger(__name__)

UNKNOWN_LOCATION = "Unknown"


class BookingService:

    def __init__(self, state: AppState):
        self.state = state

    def create_booking(self, draft: OnlineDraft, method: BookingMethod = BookingMethod.online) -> Booking:
        """
        Turn a draft with a selected driver into a ledger entry. Price and
        driver name are copied here, so later changes to the driver record
        never reach the booking.
        """
        driver = draft.selected_driver
        if driver is None:
            raise ValueError("Cannot create booking: no driver selected.")

        user = self.state.users.current()
        booking = Booking(
            id=self.state.ids.next_id(self.state.history.max_id()),
            from_=draft.pickup or UNKNOWN_LOCATION,
            to=draft.destination or UNKNOWN_LOCATION,
            status=BookingStatus.active,
            method=method,
            price=driver.price,
            driver=driver.name,
            user=user.name if user else None,
        )
        return self.state.history.record(booking)
