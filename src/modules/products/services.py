"""Product mediator wiring.

``create_mediator`` is the single entry point callers (views, management
commands) use to obtain a mediator for one unit of work.  Handlers come
from the global ``handler_registry`` filled in ``ProductsConfig.ready``.
"""

from __future__ import annotations

from typing import Optional

from modules.products.repositories.django_repository import ProductDjangoStore
from modules.products.repositories.interfaces import IProductStore
from modules.products.validators import PRODUCT_VALIDATORS
from shared.infrastructure.behaviors import ValidationBehavior
from shared.infrastructure.bus import HandlerRegistry, Mediator, handler_registry


def create_mediator(
    store: Optional[IProductStore] = None,
    registry: Optional[HandlerRegistry] = None,
) -> Mediator:
    """Build a mediator bound to ``store`` (a fresh Django store by default)."""
    return Mediator(
        registry=registry or handler_registry,
        store=store if store is not None else ProductDjangoStore(),
        behaviors=[ValidationBehavior(PRODUCT_VALIDATORS)],
    )
