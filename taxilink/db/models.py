from enum import Enum as PyEnum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


# ---- Enums ----
class BookingStatus(str, PyEnum):
    active = "active"
    completed = "completed"
    cancelled = "cancelled"


class BookingMethod(str, PyEnum):
    online = "Online"
    sms = "SMS"
    ussd = "USSD"


class PickupTime(str, PyEnum):
    now = "now"
    in_30_min = "30min"
    in_1_hour = "1hour"


# ---- Models ----
class DriverDraft(BaseModel):
    """Driver fields as collected by the driver portal, before an id exists."""

    name: str = ""
    phone: str = ""
    rating: float = 5
    distance: str = "0 km"
    eta: str = "0 min"
    price: str = "R0"
    car: Optional[str] = None
    available: Optional[bool] = None


class Driver(BaseModel):
    # Only `available` may change, and only through DriverRepository.set_availability
    model_config = ConfigDict(frozen=True)

    id: int
    name: str
    rating: float
    phone: str
    distance: str
    eta: str
    price: str
    car: Optional[str] = None
    available: bool = True


class Booking(BaseModel):
    # Only `status` may change after commit, see BookingRepository.update_status
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: int
    from_: str = Field(alias="from")
    to: str
    status: BookingStatus = BookingStatus.active
    method: BookingMethod
    price: str
    driver: str
    user: Optional[str] = None

    def to_record(self) -> dict:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class User(BaseModel):
    name: str
    phone: str = ""
