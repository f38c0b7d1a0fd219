"""Generic repository interface (Dependency Inversion Principle).

Provides ``IRepository[T]``, the base abstract class that domain
repository interfaces extend.  Service-layer code depends on this
abstraction and receives a concrete implementation by injection.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, List, Optional, TypeVar

T = TypeVar("T")


class IRepository(ABC, Generic[T]):
    """Base generic repository contract.

    Type parameter ``T`` is the entity managed by the repository
    (e.g. ``Product``).
    """

    @abstractmethod
    def get_by_id(self, id: int | str) -> Optional[T]:
        """Retrieve an entity by its primary key, or ``None``."""

    @abstractmethod
    def list(self) -> List[T]:
        """List all entities."""
