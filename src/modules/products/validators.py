"""Field rules for product commands.

Each validator is a pure function returning every violated rule's
message, in rule order (id, then name, then price).  An empty list
means the request is valid.

``PRODUCT_VALIDATORS`` is the table the ``ValidationBehavior`` uses.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Dict, List, Sequence

from modules.products.commands import (
    CreateProductCommand,
    DeleteProductCommand,
    UpdateProductCommand,
)
from modules.products.constants import NAME_MAX_LENGTH, PRICE_MAX, ProductRequestKind
from shared.infrastructure.behaviors import Validator

ID_MUST_BE_POSITIVE = "Product ID must be greater than zero."
NAME_REQUIRED = "Product name is required."
NAME_TOO_LONG = f"Product name must not exceed {NAME_MAX_LENGTH} characters."
PRICE_MUST_BE_POSITIVE = "Product price must be greater than zero."
PRICE_TOO_HIGH = "Product price must not exceed 999,999.99."


def _check_id(id: int) -> List[str]:
    return [] if id > 0 else [ID_MUST_BE_POSITIVE]


def _check_name(name: str) -> List[str]:
    errors = []
    if not name or not name.strip():
        errors.append(NAME_REQUIRED)
    if name and len(name) > NAME_MAX_LENGTH:
        errors.append(NAME_TOO_LONG)
    return errors


def _check_price(price: Decimal) -> List[str]:
    errors = []
    if price <= 0:
        errors.append(PRICE_MUST_BE_POSITIVE)
    if price > PRICE_MAX:
        errors.append(PRICE_TOO_HIGH)
    return errors


def validate_create_product(command: CreateProductCommand) -> List[str]:
    return _check_name(command.name) + _check_price(command.price)


def validate_update_product(command: UpdateProductCommand) -> List[str]:
    return (
        _check_id(command.id)
        + _check_name(command.name)
        + _check_price(command.price)
    )


def validate_delete_product(command: DeleteProductCommand) -> List[str]:
    return _check_id(command.id)


PRODUCT_VALIDATORS: Dict[ProductRequestKind, Sequence[Validator]] = {
    ProductRequestKind.CREATE: (validate_create_product,),
    ProductRequestKind.UPDATE: (validate_update_product,),
    ProductRequestKind.DELETE: (validate_delete_product,),
}
