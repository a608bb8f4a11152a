"""Product domain constants.

Field limits shared by the model, the validators and the migration,
plus the discriminator used to route product requests.
"""

from decimal import Decimal

from django.db import models

NAME_MAX_LENGTH = 200
PRICE_MAX = Decimal("999999.99")
PRICE_MAX_DIGITS = 18
PRICE_DECIMAL_PLACES = 2


class ProductRequestKind(models.TextChoices):
    CREATE = "product.create", "Create product"
    GET_ALL = "product.get_all", "Get all products"
    GET_BY_ID = "product.get_by_id", "Get product by ID"
    UPDATE = "product.update", "Update product"
    DELETE = "product.delete", "Delete product"
