import logging
from typing import Dict

from fastapi import HTTPException

from taxilink.channels.domain import Outcome, TextDraft
from taxilink.channels.online import OnlineSession
from taxilink.channels.sms import generate_command, send_targets
from taxilink.channels.ussd import UssdSession
from taxilink.db.models import Booking
from taxilink.dtos.dtos import CommandView, MenuView, OnlineUpdateRequest, SessionView
from taxilink.state import AppState

logger = logging.getLogger(__name__)


class BookingController:
    """
    Online, SMS and USSD channels behind HTTP. Sessions are kept per
    client session id in memory only and are dropped once committed.
    """

    def __init__(self, state: AppState):
        self.state = state
        self.online_sessions: Dict[str, OnlineSession] = {}
        self.ussd_sessions: Dict[str, UssdSession] = {}

    # ---- Online ----
    def start_online(self, session_id: str) -> SessionView:
        # entering the channel always starts from a blank draft
        self.online_sessions[session_id] = OnlineSession(self.state)
        return self._view(session_id)

    def update_online(self, session_id: str, request: OnlineUpdateRequest) -> SessionView:
        self._check(self._online(session_id).update(**request.model_dump(exclude_none=True)))
        return self._view(session_id)

    def find_drivers(self, session_id: str) -> SessionView:
        self._check(self._online(session_id).find_drivers())
        return self._view(session_id)

    def select_driver(self, session_id: str, driver_id: int) -> SessionView:
        self._check(self._online(session_id).select_driver(driver_id))
        return self._view(session_id)

    def back(self, session_id: str) -> SessionView:
        self._check(self._online(session_id).back())
        return self._view(session_id)

    def confirm(self, session_id: str) -> Booking:
        outcome = self._check(self._online(session_id).confirm())
        del self.online_sessions[session_id]
        return outcome.booking

    # ---- SMS ----
    def sms_command(self, draft: TextDraft) -> CommandView:
        command = generate_command(draft)
        return CommandView(
            command=command,
            ready=command.startswith("BOOK "),
            **send_targets(),
        )

    # ---- USSD ----
    def start_ussd(self, session_id: str) -> MenuView:
        self.ussd_sessions[session_id] = UssdSession()
        return self._menu(session_id)

    def press_key(self, session_id: str, key: str) -> MenuView:
        session = self.ussd_sessions.get(session_id)
        if session is None:
            raise HTTPException(status_code=404, detail="Dial in first")
        session.press(key)
        return self._menu(session_id)

    # ---- helpers ----
    def _online(self, session_id: str) -> OnlineSession:
        session = self.online_sessions.get(session_id)
        if session is None:
            raise HTTPException(status_code=404, detail="No booking in progress for this session")
        return session

    def _check(self, outcome: Outcome) -> Outcome:
        if not outcome.ok:
            raise HTTPException(status_code=422, detail=outcome.message)
        return outcome

    def _view(self, session_id: str) -> SessionView:
        session = self.online_sessions[session_id]
        draft = session.draft
        return SessionView(
            session_id=session_id,
            stage=session.stage.value,
            pickup=draft.pickup,
            destination=draft.destination,
            time=draft.time,
            passengers=draft.passengers,
            selected_driver_id=draft.selected_driver.id if draft.selected_driver else None,
            candidate_ids=[d.id for d in session.candidates()] if draft.selected_driver else [],
        )

    def _menu(self, session_id: str) -> MenuView:
        session = self.ussd_sessions[session_id]
        step = session.current
        return MenuView(
            session_id=session_id,
            step=session.step_index,
            total=len(session.steps),
            text=step.text,
            options=step.options,
            input=step.input,
            final=step.final,
        )
