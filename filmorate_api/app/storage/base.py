"""
Generic in-memory entity store.

Entities are kept in a dict keyed by integer id and guarded by one
re-entrant lock per store.  Public reads return deep copies, so a
caller holding a returned entity can never change the store behind
its back; services that must check and then mutate several records
atomically do so inside ``transaction()``.

Invariants:
    - Ids are positive and unique within a store
    - A new id is ``max(existing ids) + 1``, recomputed on every create
    - ``update`` never touches ``id`` or fields outside
      ``mutable_fields`` (relation sets are owned by the services)
"""

import copy
import threading
from contextlib import contextmanager
from typing import Dict, Generic, Iterator, List, Mapping, Optional, Tuple, TypeVar

from ..core.exceptions import NotFoundError


T = TypeVar("T")


def next_id(items: Mapping[int, object]) -> int:
    """Return the id for the next entity of ``items``.

    This is ``1 + max(keys)`` (``1`` for an empty store), not a running
    counter: if the highest id ever disappeared from the mapping the
    next entity would receive it again.
    """
    return max(items, default=0) + 1


class InMemoryStorage(Generic[T]):
    """Thread-safe dict of entities with create/read/update/list/exists."""

    #: Human readable entity name used in error messages.
    entity_name = "Entity"
    #: Fields copied from the incoming entity by ``update``.
    mutable_fields: Tuple[str, ...] = ()

    def __init__(self) -> None:
        self._items: Dict[int, T] = {}
        self._lock = threading.RLock()

    @contextmanager
    def transaction(self) -> Iterator[Dict[int, T]]:
        """Hold the store lock and yield the live id → entity mapping.

        Everything done with the mapping inside the ``with`` block is
        atomic with respect to other users of this store.  Entities
        must not escape the block without being copied.
        """
        with self._lock:
            yield self._items

    def list(self) -> List[T]:
        with self._lock:
            return [copy.deepcopy(item) for item in self._items.values()]

    def get(self, entity_id: int) -> Optional[T]:
        with self._lock:
            item = self._items.get(entity_id)
            return copy.deepcopy(item) if item is not None else None

    def exists(self, entity_id: int) -> bool:
        with self._lock:
            return entity_id in self._items

    def create(self, entity: T) -> T:
        """Store a copy of ``entity`` under a fresh id and return it.

        The caller's object is left untouched; any ``id`` it carries is
        ignored.
        """
        with self._lock:
            stored = copy.deepcopy(entity)
            stored.id = next_id(self._items)
            self._items[stored.id] = stored
            return copy.deepcopy(stored)

    def update(self, entity: T) -> T:
        """Overwrite the mutable fields of the stored entity in place.

        Raises ``NotFoundError`` if ``entity.id`` is unset or unknown.
        """
        entity_id = getattr(entity, "id", None)
        if entity_id is None:
            raise NotFoundError(f"{self.entity_name} id must be provided")
        with self._lock:
            stored = self._items.get(entity_id)
            if stored is None:
                raise NotFoundError(f"{self.entity_name} with id={entity_id} not found")
            for name in self.mutable_fields:
                setattr(stored, name, copy.deepcopy(getattr(entity, name)))
            return copy.deepcopy(stored)

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)
