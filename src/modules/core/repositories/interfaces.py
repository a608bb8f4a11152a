"""Generic entity store interface (Dependency Inversion Principle).

Provides ``IEntityStore[T]``, the unit-of-work contract every
domain-specific store extends.  Handlers depend on this abstraction,
never on Django ORM directly.

Writes are two-step: ``add`` / ``update`` / ``remove`` only stage a
change; ``commit`` persists the whole staged batch atomically.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Generic, Iterable, Protocol, Tuple, TypeVar

from modules.core.persistence import StagedChange
from shared.domain.cancellation import CancellationToken

T = TypeVar("T")
T_co = TypeVar("T_co", covariant=True)


class Queryable(Protocol[T_co]):
    def filter(self, **kwargs: Any) -> Iterable[T_co]: ...

    def __iter__(self) -> Any: ...


class IEntityStore(ABC, Generic[T]):
    """Base generic store contract.

    Type parameter ``T`` represents the entity managed by the store
    (e.g. ``Product``).
    """

    @abstractmethod
    def query(self) -> Queryable[T]:
        """Queryable view over every committed entity."""

    @abstractmethod
    def add(self, entity: T) -> None:
        """Stage a new entity for insertion."""

    @abstractmethod
    def update(self, entity: T) -> None:
        """Stage an existing entity as modified."""

    @abstractmethod
    def remove(self, entity: T) -> None:
        """Stage an existing entity for deletion."""

    @property
    @abstractmethod
    def staged(self) -> Tuple[StagedChange, ...]:
        """Changes recorded since the last successful commit."""

    @abstractmethod
    def commit(self, cancellation: CancellationToken) -> int:
        """Persist every staged change atomically.

        Returns the number of affected rows.
        """
