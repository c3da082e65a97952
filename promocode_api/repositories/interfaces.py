"""Repository interface (repository pattern).

Repositories must be swappable and hold entities that expose a unique ``id``.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable, Generic, Iterable, TypeVar
from uuid import UUID

from promocode_api.models import UUIDPrimaryKeyMixin

T = TypeVar("T", bound=UUIDPrimaryKeyMixin)

Predicate = Callable[[T], bool]


class Repository(ABC, Generic[T]):
    """CRUD and query access to a collection of one entity type."""

    @abstractmethod
    def get_all(self) -> list[T]:
        """Return all entities in insertion order."""
        ...

    @abstractmethod
    def get_by_id(self, entity_id: UUID) -> T | None:
        """Return the entity with the given id, or None if not found."""
        ...

    @abstractmethod
    def get_range_by_ids(self, ids: Iterable[UUID]) -> list[T]:
        """Return every entity whose id is in ``ids``."""
        ...

    @abstractmethod
    def get_first_where(self, predicate: Predicate) -> T | None:
        """Return the first entity matching ``predicate``, or None."""
        ...

    @abstractmethod
    def get_where(self, predicate: Predicate) -> list[T]:
        """Return all entities matching ``predicate``; empty list when none match."""
        ...

    @abstractmethod
    def add(self, entity: T) -> None:
        ...

    @abstractmethod
    def update(self, entity: T) -> None:
        """Replace the stored entity with the same id; no-op if absent."""
        ...

    @abstractmethod
    def delete(self, entity: T) -> None:
        """Remove the stored entity with the same id; no-op if absent."""
        ...

    @abstractmethod
    def remove_range(self, entities: Iterable[T]) -> None:
        """Remove every stored entity whose id matches one of ``entities``."""
        ...
