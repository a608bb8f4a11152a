"""Staged-change bookkeeping shared by entity stores.

Provides:
- ``EntityState``: what a commit must do with a staged entity.
- ``StagedChange``: an entity paired with its explicit state.
- ``TimestampInterceptor``: stamps ``created_at`` / ``updated_at`` on the
  staged batch right before it is written.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Callable, Iterable, Tuple, Type

from django.db import models
from django.utils import timezone


class EntityState(models.TextChoices):
    ADDED = "added", "Added"
    MODIFIED = "modified", "Modified"
    DELETED = "deleted", "Deleted"


@dataclass
class StagedChange:
    entity: Any
    state: EntityState

    @property
    def is_new(self) -> bool:
        return self.state == EntityState.ADDED


class TimestampInterceptor:
    """Applies timestamp rules to a staged batch.

    - ``ADDED`` entities get ``created_at = now``; any value set by the
      caller is overwritten.
    - ``MODIFIED`` entities get ``updated_at = now``.
    - ``DELETED`` entities and entities of other types are left alone.

    The clock is read once per call so the whole batch shares one instant.
    """

    def __init__(
        self,
        entity_types: Iterable[Type[Any]],
        clock: Callable[[], datetime] = timezone.now,
    ) -> None:
        self._entity_types: Tuple[Type[Any], ...] = tuple(entity_types)
        self._clock = clock

    def __call__(self, changes: Iterable[StagedChange]) -> datetime:
        now = self._clock()
        for change in changes:
            if not isinstance(change.entity, self._entity_types):
                continue
            if change.state == EntityState.ADDED:
                change.entity.created_at = now
            elif change.state == EntityState.MODIFIED:
                change.entity.updated_at = now
        return now
