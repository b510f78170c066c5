"""
Entity Store - a keyed in-memory collection with create/read/update/delete.

Entities go in and come out as deep copies, so a caller mutating an object
it passed in or got back never changes what the store holds.
"""
import copy
from typing import Callable, Generic, Iterator, Optional, TypeVar

import structlog

T = TypeVar('T')

logger = structlog.get_logger(__name__)


class EntityStore(Generic[T]):
    """
    Holds entities by identity in insertion order.

    Writing an existing id overwrites it in place (upsert), keeping its
    original position in iteration order.
    """

    def __init__(self, key: Callable[[T], str], name: str = "entity"):
        self._key = key
        self._name = name
        self._items: dict[str, T] = {}

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, entity_id: str) -> bool:
        return entity_id in self._items

    def ids(self) -> list[str]:
        return list(self._items)

    def values(self) -> list[T]:
        """Snapshot of all entities in iteration order."""
        return [copy.deepcopy(item) for item in self._items.values()]

    def iter_stored(self) -> Iterator[T]:
        """Iterate over the stored entities themselves. Callers must not mutate them."""
        return iter(self._items.values())

    def get(self, entity_id: str) -> Optional[T]:
        item = self._items.get(entity_id)
        return copy.deepcopy(item) if item is not None else None

    def put(self, entity: T) -> T:
        entity_id = self._key(entity)
        replaced = entity_id in self._items
        self._items[entity_id] = copy.deepcopy(entity)
        logger.debug("entity_stored", entity=self._name, entity_id=entity_id, replaced=replaced)
        return copy.deepcopy(entity)

    def modify(self, entity_id: str, change: Callable[[T], None]) -> Optional[T]:
        """
        Apply ``change`` to a copy of the stored entity and store the result.

        Returns the updated entity, or None when the id is absent. The key
        is restored after ``change`` runs, so an entity can never move.
        """
        current = self._items.get(entity_id)
        if current is None:
            return None
        updated = copy.deepcopy(current)
        change(updated)
        if self._key(updated) != entity_id:
            raise ValueError(f"{self._name} id cannot change ({entity_id} -> {self._key(updated)})")
        self._items[entity_id] = updated
        logger.debug("entity_updated", entity=self._name, entity_id=entity_id)
        return copy.deepcopy(updated)

    def remove(self, entity_id: str) -> bool:
        removed = self._items.pop(entity_id, None) is not None
        logger.debug("entity_removed", entity=self._name, entity_id=entity_id, removed=removed)
        return removed

    def clear(self) -> None:
        self._items.clear()
