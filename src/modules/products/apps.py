from django.apps import AppConfig


class ProductsConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "modules.products"
    label = "products"

    def ready(self) -> None:
        from modules.products.constants import ProductRequestKind
        from modules.products.handlers import (
            CreateProductHandler,
            DeleteProductHandler,
            GetAllProductsHandler,
            GetProductByIdHandler,
            UpdateProductHandler,
        )
        from shared.infrastructure.bus import handler_registry

        handler_registry.register(ProductRequestKind.CREATE, CreateProductHandler)
        handler_registry.register(ProductRequestKind.GET_ALL, GetAllProductsHandler)
        handler_registry.register(ProductRequestKind.GET_BY_ID, GetProductByIdHandler)
        handler_registry.register(ProductRequestKind.UPDATE, UpdateProductHandler)
        handler_registry.register(ProductRequestKind.DELETE, DeleteProductHandler)
