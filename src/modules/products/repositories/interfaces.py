"""Product store interface.

Extends ``IEntityStore[Product]`` with the primary-key lookup every
write handler needs before mutating.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Optional

from modules.core.repositories.interfaces import IEntityStore

if TYPE_CHECKING:
    from modules.products.models import Product


class IProductStore(IEntityStore["Product"]):
    """Store contract for the Product entity."""

    @abstractmethod
    def get_by_id(self, id: int) -> Optional[Product]:
        """Retrieve a committed product by primary key, or ``None``."""
