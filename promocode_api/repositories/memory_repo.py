"""In-memory repository: linear scans over a list, no locking and no persistence."""
from __future__ import annotations

from typing import Iterable
from uuid import UUID

from promocode_api.repositories.interfaces import Predicate, Repository, T


class InMemoryRepository(Repository[T]):
    def __init__(self, data: Iterable[T] = ()) -> None:
        self._data: list[T] = list(data)

    def get_all(self) -> list[T]:
        return list(self._data)

    def get_by_id(self, entity_id: UUID) -> T | None:
        return next((x for x in self._data if x.id == entity_id), None)

    def get_range_by_ids(self, ids: Iterable[UUID]) -> list[T]:
        wanted = set(ids)
        return [x for x in self._data if x.id in wanted]

    def get_first_where(self, predicate: Predicate) -> T | None:
        return next((x for x in self._data if predicate(x)), None)

    def get_where(self, predicate: Predicate) -> list[T]:
        return [x for x in self._data if predicate(x)]

    def add(self, entity: T) -> None:
        # Duplicate ids are not rejected
        self._data.append(entity)

    def update(self, entity: T) -> None:
        for i, x in enumerate(self._data):
            if x.id == entity.id:
                self._data[i] = entity
                return

    def delete(self, entity: T) -> None:
        for i, x in enumerate(self._data):
            if x.id == entity.id:
                del self._data[i]
                return

    def remove_range(self, entities: Iterable[T]) -> None:
        ids = {e.id for e in entities}
        self._data = [x for x in self._data if x.id not in ids]
