import logging
import threading
from typing import Callable, Generic, List, Type, TypeVar

from pydantic import BaseModel

from src.core.exceptions import ConflictError, NotFoundError

T = TypeVar('T', bound=BaseModel)

logger = logging.getLogger(__name__)


class BaseRepository(Generic[T]):
    """In-memory keyed collection shared by every request.

    All reads and writes happen under one lock, and records are copied on the
    way in and out so no caller holds a reference into the store.
    """

    def __init__(self, model: Type[T], key: str = "id"):
        self.model = model
        self.key = key
        self._items: dict[str, T] = {}
        self._lock = threading.RLock()

    def _not_found(self, entity_id: str) -> NotFoundError:
        logger.warning(f"{self.model.__name__} with id {entity_id} not found")
        return NotFoundError(details={"id": entity_id})

    def _get(self, entity_id: str) -> T:
        entity = self._items.get(entity_id)
        if entity is None:
            raise self._not_found(entity_id)
        return entity

    def get_by_id(self, entity_id: str) -> T:
        with self._lock:
            return self._get(entity_id).model_copy()

    def get_all(self) -> List[T]:
        with self._lock:
            return [entity.model_copy() for entity in self._items.values()]

    def filter(self, predicate: Callable[[T], bool]) -> List[T]:
        with self._lock:
            return [entity.model_copy() for entity in self._items.values() if predicate(entity)]

    def save(self, entity: T) -> T:
        entity_id = getattr(entity, self.key)
        with self._lock:
            if entity_id in self._items:
                logger.warning(f"{self.model.__name__} with id {entity_id} already exists")
                raise ConflictError(details={"id": entity_id})
            self._items[entity_id] = entity.model_copy()

        logger.info(f"Created {self.model.__name__} with id {entity_id}")
        return entity.model_copy()

    def patch(self, entity_id: str, changes: dict) -> T:
        with self._lock:
            updated = self._get(entity_id).model_copy(update=changes)
            self._items[entity_id] = updated

        logger.info(f"Updated {self.model.__name__} with id {entity_id}: {sorted(changes)}")
        return updated.model_copy()

    def delete(self, entity_id: str) -> None:
        with self._lock:
            self._get(entity_id)
            del self._items[entity_id]

        logger.info(f"Deleted {self.model.__name__} with id {entity_id}")

    def count(self) -> int:
        with self._lock:
            return len(self._items)

    def clear(self) -> None:
        with self._lock:
            self._items.clear()
