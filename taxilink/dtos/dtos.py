from typing import List, Optional

from pydantic import BaseModel, Field

from taxilink.db.models import BookingStatus, PickupTime


class LoginRequest(BaseModel):
    name: str
    phone: str


class AvailabilityRequest(BaseModel):
    available: bool


class StatusRequest(BaseModel):
    status: BookingStatus


class OnlineUpdateRequest(BaseModel):
    pickup: Optional[str] = None
    destination: Optional[str] = None
    time: Optional[PickupTime] = None
    passengers: Optional[int] = Field(default=None, ge=1)


class SessionView(BaseModel):
    session_id: str
    stage: str
    pickup: str
    destination: str
    time: PickupTime
    passengers: int
    selected_driver_id: Optional[int] = None
    candidate_ids: List[int] = []


class CommandView(BaseModel):
    command: str
    ready: bool
    sms: str
    ussd: str


class MenuView(BaseModel):
    session_id: str
    step: int
    total: int
    text: str
    options: Optional[List[str]] = None
    input: bool = False
    final: bool = False
