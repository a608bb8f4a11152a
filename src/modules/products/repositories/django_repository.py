"""Django ORM implementation of the Product store.

Satisfies ``IProductStore`` using Django's QuerySet API.  Reads return
``None`` for missing rows (Null Object pattern); handlers decide what a
missing product means for their operation.

The store is a unit of work: it is created per request, collects staged
changes and writes them in a single ``transaction.atomic()`` block.
"""

from __future__ import annotations

from typing import Dict, List, Optional, Tuple

import structlog

from django.db import DatabaseError, models, transaction

from modules.core.persistence import EntityState, StagedChange, TimestampInterceptor
from modules.products.models import Product
from modules.products.repositories.interfaces import IProductStore
from shared.domain.cancellation import CancellationToken
from shared.domain.errors import StoreFailure

logger = structlog.get_logger(__name__)


class ProductDjangoStore(IProductStore):
    """Concrete Product store backed by Django ORM."""

    def __init__(self, interceptor: Optional[TimestampInterceptor] = None) -> None:
        self._interceptor = interceptor or TimestampInterceptor(entity_types=(Product,))
        self._changes: List[StagedChange] = []

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def query(self) -> "models.QuerySet[Product]":
        return Product.objects.all()

    def get_by_id(self, id: int) -> Optional[Product]:
        return Product.objects.filter(id=id).first()

    # ------------------------------------------------------------------
    # Staging
    # ------------------------------------------------------------------

    def _find(self, entity: Product) -> Optional[StagedChange]:
        for change in self._changes:
            if change.entity is entity:
                return change
        return None

    def add(self, entity: Product) -> None:
        if self._find(entity) is None:
            self._changes.append(StagedChange(entity, EntityState.ADDED))

    def update(self, entity: Product) -> None:
        # An entity staged as added or deleted keeps that state.
        if self._find(entity) is None:
            self._changes.append(StagedChange(entity, EntityState.MODIFIED))

    def remove(self, entity: Product) -> None:
        change = self._find(entity)
        if change is None:
            self._changes.append(StagedChange(entity, EntityState.DELETED))
        elif change.state == EntityState.ADDED:
            self._changes.remove(change)
        else:
            change.state = EntityState.DELETED

    @property
    def staged(self) -> Tuple[StagedChange, ...]:
        return tuple(self._changes)

    # ------------------------------------------------------------------
    # Commit
    # ------------------------------------------------------------------

    def commit(self, cancellation: CancellationToken) -> int:
        """Stamp timestamps and write every staged change atomically.

        Raises:
            OperationCancelled: if cancelled before the write started.
            StoreFailure: if the database rejected the batch.
        """
        cancellation.raise_if_cancelled()
        if not self._changes:
            return 0

        counts: Dict[str, int] = {state: 0 for state in EntityState.values}
        try:
            with transaction.atomic():
                self._interceptor(self._changes)
                for change in self._changes:
                    if change.state == EntityState.DELETED:
                        deleted, _ = change.entity.delete()
                        counts[change.state] += deleted
                    else:
                        # force_update: a row deleted meanwhile fails the batch
                        # instead of being re-inserted.
                        change.entity.save(
                            force_insert=change.is_new,
                            force_update=not change.is_new,
                        )
                        counts[change.state] += 1
        except DatabaseError as exc:
            logger.error(
                "store.commit_failed",
                staged=len(self._changes),
                error=str(exc),
            )
            raise StoreFailure(f"Commit of {len(self._changes)} change(s) failed.") from exc

        self._changes.clear()
        affected = sum(counts.values())
        logger.info(
            "store.committed",
            affected=affected,
            added=counts[EntityState.ADDED],
            modified=counts[EntityState.MODIFIED],
            deleted=counts[EntityState.DELETED],
        )
        return affected
