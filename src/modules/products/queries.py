"""Product queries (read-only requests)."""

from __future__ import annotations

from typing import ClassVar

from pydantic import BaseModel, ConfigDict

from modules.products.constants import ProductRequestKind


class GetAllProductsQuery(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: ClassVar[ProductRequestKind] = ProductRequestKind.GET_ALL


class GetProductByIdQuery(BaseModel):
    """Look up one product; an unknown id yields ``Ok(None)``."""

    model_config = ConfigDict(frozen=True)

    kind: ClassVar[ProductRequestKind] = ProductRequestKind.GET_BY_ID

    id: int
