"""Product commands (requests that mutate state).

Commands only carry data.  Field rules live in ``validators.py`` and
run in the mediator pipeline, so constructing an invalid command (empty
name, zero price) is allowed and is reported as ``ValidationFailed``.

The one exception is price precision: the ``products`` column keeps two
decimal places, so a price with more digits than that cannot form a
command at all (pydantic raises ``ValidationError``) instead of being
rounded on save.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Annotated, ClassVar

from pydantic import BaseModel, ConfigDict, Field

from modules.products.constants import PRICE_DECIMAL_PLACES, ProductRequestKind

Price = Annotated[Decimal, Field(decimal_places=PRICE_DECIMAL_PLACES)]


class CreateProductCommand(BaseModel):
    """Create a product; succeeds with the new product id."""

    model_config = ConfigDict(frozen=True)

    kind: ClassVar[ProductRequestKind] = ProductRequestKind.CREATE

    name: str
    price: Price


class UpdateProductCommand(BaseModel):
    """Overwrite name and price of an existing product."""

    model_config = ConfigDict(frozen=True)

    kind: ClassVar[ProductRequestKind] = ProductRequestKind.UPDATE

    id: int
    name: str
    price: Price


class DeleteProductCommand(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: ClassVar[ProductRequestKind] = ProductRequestKind.DELETE

    id: int
