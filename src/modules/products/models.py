"""Product model.

Timestamps are not managed by the model itself: ``created_at`` and
``updated_at`` are stamped by ``TimestampInterceptor`` when the store
commits.  Saving a new Product outside a store commit fails on the
NOT NULL ``created_at`` column.
"""

from __future__ import annotations

from django.db import models

from modules.products.constants import (
    NAME_MAX_LENGTH,
    PRICE_DECIMAL_PLACES,
    PRICE_MAX_DIGITS,
)


class Product(models.Model):
    """Catalog entry, the only entity in the system."""

    id = models.BigAutoField(primary_key=True)
    name = models.CharField(max_length=NAME_MAX_LENGTH)
    price = models.DecimalField(
        max_digits=PRICE_MAX_DIGITS,
        decimal_places=PRICE_DECIMAL_PLACES,
    )
    created_at = models.DateTimeField()
    updated_at = models.DateTimeField(null=True, blank=True, default=None)

    class Meta:
        db_table = "products"
        indexes = [
            models.Index(fields=["name"], name="products_name_idx"),
        ]

    def __str__(self) -> str:
        return f"{self.id} - {self.name}"
