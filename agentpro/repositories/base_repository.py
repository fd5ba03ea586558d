from typing import Dict, Generic, List, Optional, TypeVar
from uuid import UUID

from pydantic import BaseModel

ModelType = TypeVar("ModelType", bound=BaseModel)


class BaseRepository(Generic[ModelType]):
    """Generic in-memory repository keyed by the model's ``id``.

    Insertion order is kept; ``insert_front`` places a record ahead of the
    existing ones.
    """

    def __init__(self) -> None:
        self._items: Dict[UUID, ModelType] = {}
        self._order: List[UUID] = []

    def get_by_id(self, id: UUID) -> Optional[ModelType]:
        """Get a single record by ID."""
        return self._items.get(id)

    def create(self, model: ModelType) -> ModelType:
        """Append a new record."""
        self._store(model, front=False)
        return model

    def insert_front(self, model: ModelType) -> ModelType:
        """Add a new record ahead of all existing ones."""
        self._store(model, front=True)
        return model

    def update(self, model: ModelType) -> Optional[ModelType]:
        """Replace an existing record, keeping its position."""
        key = self._key(model)
        if key not in self._items:
            return None
        self._items[key] = model
        return model

    def delete(self, id: UUID) -> bool:
        """Delete a record by ID."""
        if id not in self._items:
            return False
        del self._items[id]
        self._order.remove(id)
        return True

    def get_all(self, limit: Optional[int] = None, offset: int = 0) -> List[ModelType]:
        """Get all records in order with optional pagination."""
        ids = self._order[offset:]
        if limit is not None:
            ids = ids[:limit]
        return [self._items[id] for id in ids]

    def _store(self, model: ModelType, front: bool) -> None:
        key = self._key(model)
        if key in self._items:
            raise ValueError(f"Record with ID {key} already exists")
        self._items[key] = model
        if front:
            self._order.insert(0, key)
        else:
            self._order.append(key)

    def _key(self, model: ModelType) -> UUID:
        return getattr(model, "id")
