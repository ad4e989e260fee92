"""Generic repository interface (Dependency Inversion Principle).

Provides ``IRepository[T, ID]``, the base abstract class that all
domain-specific repository interfaces extend.  Service-layer code
depends on this abstraction, never on Django ORM directly, and never
on a specific query language.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, List, Optional, TypeVar

T = TypeVar("T")
ID = TypeVar("ID")


class IRepository(ABC, Generic[T, ID]):
    """Base generic repository contract.

    Type parameter ``T`` represents the entity managed by the repository
    (e.g. ``Produto``) and ``ID`` its primary key type.  Absence is
    reported with ``None`` / ``False``, never with an exception.
    """

    @abstractmethod
    def save(self, entity: T) -> T:
        """Persist (create or overwrite) an entity and return it with its id."""

    @abstractmethod
    def find_by_id(self, id: ID) -> Optional[T]:
        """Retrieve an entity by its primary key, or ``None``."""

    @abstractmethod
    def find_all(self) -> List[T]:
        """Return every stored entity."""

    @abstractmethod
    def exists_by_id(self, id: ID) -> bool:
        """Tell whether an entity with this primary key is stored."""

    @abstractmethod
    def delete_by_id(self, id: ID) -> None:
        """Permanently remove the entity with this primary key."""
