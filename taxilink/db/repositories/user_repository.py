import logging
from typing import Optional

from pydantic import ValidationError

from taxilink.db.models import User
from taxilink.db.store import Store

logger = logging.getLogger(__name__)

GUEST_NAME = "Guest"


class UserRepository:
    KEY = "user"

    def __init__(self, store: Store):
        self.store = store
        self._user: Optional[User] = self._load()

    def _load(self) -> Optional[User]:
        raw = self.store.load(self.KEY, None)
        if raw is None:
            return None
        try:
            return User.model_validate(raw)
        except ValidationError as error:
            logger.error(f"Stored user is unreadable, continuing without one: {error}")
            return None

    def current(self) -> Optional[User]:
        return self._user

    def login(self, name: str, phone: str) -> User:
        self._user = User(name=name, phone=phone)
        self.store.save(self.KEY, self._user.model_dump())
        return self._user

    def login_as_guest(self) -> User:
        return self.login(GUEST_NAME, "")

    def logout(self) -> None:
        self._user = None
        self.store.delete(self.KEY)
