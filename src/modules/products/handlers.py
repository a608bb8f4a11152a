"""Request handlers for the Product entity.

One handler per request kind.  Each receives the unit-of-work store via
constructor injection (DIP) and returns a ``Result``:

- Create: ``Ok(new_id)``.
- GetAll: ``Ok(list[ProductDto])``.
- GetById: ``Ok(ProductDto)`` or ``Ok(None)`` when the id is unknown.
- Update / Delete: ``Ok(None)`` or ``Err(NotFound(id))``.

Field rules are not checked here; the validation behavior has already
rejected bad requests before a handler runs.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional

import structlog

from modules.products.dtos import ProductDto
from modules.products.models import Product
from shared.domain.errors import NotFound, ValidationFailed
from shared.domain.results import Err, Ok, Result

if TYPE_CHECKING:
    from modules.products.commands import (
        CreateProductCommand,
        DeleteProductCommand,
        UpdateProductCommand,
    )
    from modules.products.queries import GetAllProductsQuery, GetProductByIdQuery
    from modules.products.repositories.interfaces import IProductStore
    from shared.domain.cancellation import CancellationToken

logger = structlog.get_logger(__name__)


class _StoreHandler:
    def __init__(self, store: IProductStore) -> None:
        self._store = store


# ------------------------------------------------------------------
# Commands
# ------------------------------------------------------------------


class CreateProductHandler(_StoreHandler):
    def handle(
        self, request: CreateProductCommand, cancellation: CancellationToken
    ) -> Result[int, ValidationFailed]:
        product = Product(name=request.name, price=request.price)
        self._store.add(product)
        self._store.commit(cancellation)
        logger.info("product.created", product_id=product.id, name=product.name)
        return Ok(product.id)


class UpdateProductHandler(_StoreHandler):
    def handle(
        self, request: UpdateProductCommand, cancellation: CancellationToken
    ) -> Result[None, NotFound]:
        cancellation.raise_if_cancelled()
        product = self._store.get_by_id(request.id)
        if product is None:
            logger.warning("product.not_found", product_id=request.id, operation="update")
            return Err(NotFound(request.id))

        product.name = request.name
        product.price = request.price
        self._store.update(product)
        self._store.commit(cancellation)
        logger.info("product.updated", product_id=product.id)
        return Ok(None)


class DeleteProductHandler(_StoreHandler):
    def handle(
        self, request: DeleteProductCommand, cancellation: CancellationToken
    ) -> Result[None, NotFound]:
        cancellation.raise_if_cancelled()
        product = self._store.get_by_id(request.id)
        if product is None:
            logger.warning("product.not_found", product_id=request.id, operation="delete")
            return Err(NotFound(request.id))

        self._store.remove(product)
        self._store.commit(cancellation)
        logger.info("product.deleted", product_id=request.id)
        return Ok(None)


# ------------------------------------------------------------------
# Queries
# ------------------------------------------------------------------


class GetAllProductsHandler(_StoreHandler):
    def handle(
        self, request: GetAllProductsQuery, cancellation: CancellationToken
    ) -> Ok[List[ProductDto]]:
        cancellation.raise_if_cancelled()
        return Ok([ProductDto.from_entity(p) for p in self._store.query()])


class GetProductByIdHandler(_StoreHandler):
    def handle(
        self, request: GetProductByIdQuery, cancellation: CancellationToken
    ) -> Ok[Optional[ProductDto]]:
        cancellation.raise_if_cancelled()
        product = self._store.get_by_id(request.id)
        if product is None:
            return Ok(None)
        return Ok(ProductDto.from_entity(product))
