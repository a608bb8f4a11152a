"""Routes for the product catalog.

``SimpleRouter`` exposes only the collection and detail routes; the
catalog has no browsable API root.
"""

from __future__ import annotations

from rest_framework.routers import SimpleRouter

from modules.products.views import ProductViewSet

PRODUCTS_PREFIX = "products"

router = SimpleRouter()
router.register(PRODUCTS_PREFIX, ProductViewSet, basename="product")

urlpatterns = router.urls
