"""Product DTOs returned by queries.

Framework-agnostic, immutable (``frozen=True``) Pydantic v2 models that
decouple the Django model from what callers see.
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import TYPE_CHECKING, Optional

from pydantic import BaseModel, ConfigDict

if TYPE_CHECKING:
    from modules.products.models import Product


class ProductDto(BaseModel):
    """Read-only projection of a Product."""

    model_config = ConfigDict(frozen=True)

    id: int
    name: str
    price: Decimal
    created_at: datetime
    updated_at: Optional[datetime] = None

    @classmethod
    def from_entity(cls, product: Product) -> ProductDto:
        """Build a DTO from a Product model instance."""
        return cls(
            id=product.id,
            name=product.name,
            price=product.price,
            created_at=product.created_at,
            updated_at=product.updated_at,
        )
