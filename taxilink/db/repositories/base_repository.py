# repositories/base_repository.py
import logging
from typing import Any, Dict, Generic, List, Optional, Sequence, Type, TypeVar

from pydantic import BaseModel, ValidationError

from taxilink.db.store import Store

logger = logging.getLogger(__name__)


T = TypeVar("T", bound=BaseModel)


class BaseRepository(Generic[T]):
    """
    A list of frozen pydantic records held in memory and mirrored to one
    store key. Every mutating method ends with `persist()`.
    """

    key: str = ""

    def __init__(self, store: Store, model: Type[T], defaults: Sequence[T] = ()):
        self.store = store
        self.model = model
        self.defaults = list(defaults)
        self.items: List[T] = self._load()

    def _load(self) -> List[T]:
        raw = self.store.load(self.key, None)
        if raw is None:
            return list(self.defaults)
        try:
            return [self.model.model_validate(item) for item in raw]
        except (ValidationError, TypeError) as error:
            logger.error(f"Stored {self.key} are unreadable, falling back to defaults: {error}")
            return list(self.defaults)

    def serialize(self, obj: T) -> Dict[str, Any]:
        return obj.model_dump(mode="json", by_alias=True, exclude_none=True)

    def persist(self) -> bool:
        return self.store.save(self.key, [self.serialize(obj) for obj in self.items])

    def get_by_id(self, obj_id: int) -> Optional[T]:
        return next((obj for obj in self.items if obj.id == obj_id), None)

    def list_all(self) -> Sequence[T]:
        return list(self.items)

    def max_id(self) -> int:
        return max((obj.id for obj in self.items), default=0)

    def _replace(self, obj_id: int, **changes: Any) -> Optional[T]:
        for index, obj in enumerate(self.items):
            if obj.id == obj_id:
                updated = obj.model_copy(update=changes)
                self.items[index] = updated
                self.persist()
                return updated
        return None
