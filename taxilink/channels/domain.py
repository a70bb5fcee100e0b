from enum import Enum as PyEnum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field

from taxilink.db.models import Booking, Driver, PickupTime


MISSING_LOCATIONS = "Please fill in pickup and destination"


# 1. Session stages (online channel)
class SessionStage(str, PyEnum):
    collecting = "collecting"
    selecting = "selecting"
    committed = "committed"


# 2. Per-channel drafts. Empty pickup/destination means "not set yet".
class OnlineDraft(BaseModel):
    model_config = ConfigDict(validate_assignment=True)

    pickup: str = ""
    destination: str = ""
    time: PickupTime = PickupTime.now
    passengers: int = Field(default=1, ge=1)
    selected_driver: Optional[Driver] = None


class TextDraft(BaseModel):
    model_config = ConfigDict(validate_assignment=True)

    pickup: str = ""
    destination: str = ""
    time: PickupTime = PickupTime.now
    passengers: int = Field(default=1, ge=1)


class MenuState(BaseModel):
    model_config = ConfigDict(validate_assignment=True)

    step_index: int = Field(default=0, ge=0)


# 3. Result of a guarded operation. A refused step carries guidance text
# and leaves every piece of state untouched.
class Outcome(BaseModel):
    ok: bool
    message: str = ""
    booking: Optional[Booking] = None
    driver: Optional[Driver] = None

    @classmethod
    def refused(cls, message: str) -> "Outcome":
        return cls(ok=False, message=message)

    @classmethod
    def done(cls, message: str = "", **payload: Any) -> "Outcome":
        return cls(ok=True, message=message, **payload)
