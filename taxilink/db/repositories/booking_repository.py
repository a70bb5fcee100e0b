# repositories/booking_repository.py
import logging
from typing import Optional, Sequence

from taxilink.db.init_db import DEFAULT_HISTORY
from taxilink.db.models import Booking, BookingStatus
from taxilink.db.repositories.base_repository import BaseRepository
from taxilink.db.store import Store

logger = logging.getLogger(__name__)


class BookingRepository(BaseRepository[Booking]):
    """
    The booking ledger, most recent first. Bookings are never removed;
    after commit only their status moves.
    """

    key = "history"

    def __init__(self, store: Store):
        super().__init__(store, Booking, DEFAULT_HISTORY)

    def record(self, booking: Booking) -> Booking:
        self.items.insert(0, booking)
        self.persist()
        logger.info(f"Recorded booking {booking.id} via {booking.method.value}")
        return booking

    def recent(self, n: int) -> Sequence[Booking]:
        return self.items[:max(n, 0)]

    def update_status(self, booking_id: int, new_status: BookingStatus) -> Optional[Booking]:
        booking = self._replace(booking_id, status=BookingStatus(new_status))
        if booking is not None:
            logger.info(f"Booking {booking_id} is now {booking.status.value}")
        return booking
