import logging
from contextlib import asynccontextmanager
from typing import List, Optional

import uvicorn
from fastapi import APIRouter, Depends, FastAPI, Query, Request

from taxilink.channels.domain import TextDraft
from taxilink.config import conf
from taxilink.controllers.account_controller import AccountController
from taxilink.controllers.booking_controller import BookingController
from taxilink.db.models import DriverDraft
from taxilink.dtos.dtos import (
    AvailabilityRequest,
    CommandView,
    LoginRequest,
    MenuView,
    OnlineUpdateRequest,
    SessionView,
    StatusRequest,
)
from taxilink.state import AppState, create_app_state

logger = logging.getLogger(__name__)

router = APIRouter()


def accounts(request: Request) -> AccountController:
    return request.app.state.account_controller


def bookings(request: Request) -> BookingController:
    return request.app.state.booking_controller


@asynccontextmanager
async def lifespan(app: FastAPI):
    # The engine and its redis client are synchronous; a handler blocks the loop
    # for the duration of one store round trip.
    if conf.STORE_BACKEND == "redis":
        from taxilink.db.redis_db import check_redis_connection
        check_redis_connection()
    logger.info(f"TaxiLink started with {conf.STORE_BACKEND} store")
    yield


# Define a route for the root URL
@router.get("/")
async def read_root():
    return {"TaxiLink": "Your Ride, Your Way"}


@router.get("/health")
async def health():
    return {"Health": "OK"}


# ---- Riders ----
@router.post("/login")
async def login(body: LoginRequest, ctl: AccountController = Depends(accounts)):
    return ctl.login(body.name, body.phone)


@router.post("/login/guest")
async def login_as_guest(ctl: AccountController = Depends(accounts)):
    return ctl.login_as_guest()


@router.get("/user")
async def current_user(ctl: AccountController = Depends(accounts)):
    return {"user": ctl.current_user()}


@router.post("/logout")
async def logout(ctl: AccountController = Depends(accounts)):
    ctl.logout()
    return {"status": "ok"}


@router.get("/home")
async def home(ctl: AccountController = Depends(accounts)):
    return ctl.home()


# ---- Drivers ----
@router.get("/drivers")
async def list_drivers(ctl: AccountController = Depends(accounts)):
    return ctl.list_drivers()


@router.get("/drivers/available")
async def list_available_drivers(ctl: AccountController = Depends(accounts)):
    return ctl.list_available_drivers()


@router.post("/drivers", status_code=201)
async def register_driver(draft: DriverDraft, ctl: AccountController = Depends(accounts)):
    return ctl.register_driver(draft)


@router.patch("/drivers/{driver_id}/availability")
async def set_availability(driver_id: int, body: AvailabilityRequest,
                           ctl: AccountController = Depends(accounts)):
    return ctl.set_availability(driver_id, body.available)


# ---- History ----
@router.get("/history")
async def history(limit: Optional[int] = Query(default=None, ge=0),
                  ctl: AccountController = Depends(accounts)) -> List[dict]:
    return [b.to_record() for b in ctl.history(limit)]


@router.patch("/history/{booking_id}/status")
async def update_status(booking_id: int, body: StatusRequest,
                        ctl: AccountController = Depends(accounts)):
    return ctl.update_status(booking_id, body.status).to_record()


# ---- Online channel ----
@router.post("/online/{session_id}", response_model=SessionView)
async def start_online(session_id: str, ctl: BookingController = Depends(bookings)):
    return ctl.start_online(session_id)


@router.patch("/online/{session_id}", response_model=SessionView)
async def update_online(session_id: str, body: OnlineUpdateRequest,
                        ctl: BookingController = Depends(bookings)):
    return ctl.update_online(session_id, body)


@router.post("/online/{session_id}/find", response_model=SessionView)
async def find_drivers(session_id: str, ctl: BookingController = Depends(bookings)):
    return ctl.find_drivers(session_id)


@router.post("/online/{session_id}/select/{driver_id}", response_model=SessionView)
async def select_driver(session_id: str, driver_id: int, ctl: BookingController = Depends(bookings)):
    return ctl.select_driver(session_id, driver_id)


@router.post("/online/{session_id}/back", response_model=SessionView)
async def back(session_id: str, ctl: BookingController = Depends(bookings)):
    return ctl.back(session_id)


@router.post("/online/{session_id}/confirm")
async def confirm(session_id: str, ctl: BookingController = Depends(bookings)):
    return ctl.confirm(session_id).to_record()


# ---- SMS channel ----
@router.post("/sms/command", response_model=CommandView)
async def sms_command(draft: TextDraft, ctl: BookingController = Depends(bookings)):
    return ctl.sms_command(draft)


# ---- USSD channel ----
@router.post("/ussd/{session_id}", response_model=MenuView)
async def start_ussd(session_id: str, ctl: BookingController = Depends(bookings)):
    return ctl.start_ussd(session_id)


# "#" is a URL fragment marker, clients send it as %23
@router.post("/ussd/{session_id}/key/{key}", response_model=MenuView)
async def press_key(session_id: str, key: str, ctl: BookingController = Depends(bookings)):
    return ctl.press_key(session_id, key)


def create_app(state: Optional[AppState] = None) -> FastAPI:
    state = state or create_app_state()
    app = FastAPI(title="TaxiLink", lifespan=lifespan)
    app.state.taxilink = state
    app.state.account_controller = AccountController(state)
    app.state.booking_controller = BookingController(state)
    app.include_router(router)
    return app


app = create_app()


# define main
if __name__ == "__main__":
    logging.basicConfig(level=conf.LOG_LEVEL)
    uvicorn.run(app, host="0.0.0.0", port=conf.PORT)
