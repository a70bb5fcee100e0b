import logging
from typing import Optional, Sequence

from fastapi import HTTPException

from taxilink.db.models import Booking, BookingStatus, Driver, DriverDraft, User
from taxilink.services.driver_service import DriverService
from taxilink.state import AppState

logger = logging.getLogger(__name__)

RECENT_BOOKINGS = 2


class AccountController:
    """Rider login, driver portal and booking history."""

    def __init__(self, state: AppState):
        self.state = state
        self.driver_service = DriverService(state)

    # ---- Riders ----
    def login(self, name: str, phone: str) -> User:
        return self.state.users.login(name, phone)

    def login_as_guest(self) -> User:
        return self.state.users.login_as_guest()

    def current_user(self) -> Optional[User]:
        return self.state.users.current()

    def logout(self) -> None:
        self.state.users.logout()

    # ---- Drivers ----
    def list_drivers(self) -> Sequence[Driver]:
        return self.state.drivers.list_all()

    def list_available_drivers(self) -> Sequence[Driver]:
        return self.state.drivers.list_available()

    def register_driver(self, draft: DriverDraft) -> Driver:
        outcome = self.driver_service.register(draft)
        if not outcome.ok:
            raise HTTPException(status_code=422, detail=outcome.message)
        return outcome.driver

    def set_availability(self, driver_id: int, available: bool) -> Driver:
        driver = self.driver_service.set_availability(driver_id, available)
        if driver is None:
            raise HTTPException(status_code=404, detail=f"Driver {driver_id} not found")
        return driver

    # ---- History ----
    def home(self) -> dict:
        user = self.state.users.current()
        return {
            "welcome": f"Welcome, {user.name}" if user else "Welcome",
            "recent": [b.to_record() for b in self.state.history.recent(RECENT_BOOKINGS)],
        }

    def history(self, limit: Optional[int] = None) -> Sequence[Booking]:
        if limit is None:
            return self.state.history.list_all()
        return self.state.history.recent(limit)

    def update_status(self, booking_id: int, status: BookingStatus) -> Booking:
        booking = self.state.history.update_status(booking_id, status)
        if booking is None:
            raise HTTPException(status_code=404, detail=f"Booking {booking_id} not found")
        return booking
