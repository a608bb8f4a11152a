"""Product repositories package."""

from modules.products.repositories.django_repository import ProductDjangoStore
from modules.products.repositories.interfaces import IProductStore

__all__ = ["IProductStore", "ProductDjangoStore"]
