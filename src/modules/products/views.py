"""Product API views.

Thin transport over the mediator: the view builds a command or query,
sends it, and translates the ``Result`` into an HTTP response.

- ``ValidationFailed`` -> 400 with every violated rule.
- ``NotFound`` (and an absent GetById result) -> 404.
- A payload that cannot even form a request object -> 400.

System errors (``StoreFailure``, ``NoHandlerRegistered``) are not
caught here.
"""

from __future__ import annotations

from typing import Any, Mapping

from pydantic import ValidationError as PydanticValidationError
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import ViewSet

from modules.products.commands import (
    CreateProductCommand,
    DeleteProductCommand,
    UpdateProductCommand,
)
from modules.products.queries import GetAllProductsQuery, GetProductByIdQuery
from modules.products.services import create_mediator
from shared.domain.errors import NotFound, ValidationFailed
from shared.domain.results import Result

NOT_FOUND_DETAIL = "Product not found."
BODY_NOT_OBJECT_DETAIL = "Request body must be a JSON object."


def _body_not_object() -> Response:
    return Response({"detail": BODY_NOT_OBJECT_DETAIL}, status=status.HTTP_400_BAD_REQUEST)


def _error_response(result: Result) -> Response:
    error = result.error
    if isinstance(error, ValidationFailed):
        return Response(
            {"errors": list(error.errors)},
            status=status.HTTP_400_BAD_REQUEST,
        )
    if isinstance(error, NotFound):
        return Response({"detail": str(error)}, status=status.HTTP_404_NOT_FOUND)
    raise TypeError(f"Unexpected error value: {error!r}")


class ProductViewSet(ViewSet):
    """ViewSet for Product CRUD operations.

    A fresh mediator (and with it a fresh store) is built for every
    request; DRF instantiates the view once per request.
    """

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._mediator = create_mediator()

    # ------------------------------------------------------------------
    # List / Retrieve
    # ------------------------------------------------------------------

    def list(self, request: Request) -> Response:
        """GET /api/v1/products/"""
        result = self._mediator.send(GetAllProductsQuery())
        return Response([dto.model_dump(mode="json") for dto in result.value])

    def retrieve(self, request: Request, pk: str | None = None) -> Response:
        """GET /api/v1/products/{pk}/"""
        try:
            query = GetProductByIdQuery(id=pk)
        except PydanticValidationError:
            return Response({"detail": NOT_FOUND_DETAIL}, status=status.HTTP_404_NOT_FOUND)

        result = self._mediator.send(query)
        if result.value is None:
            return Response({"detail": NOT_FOUND_DETAIL}, status=status.HTTP_404_NOT_FOUND)
        return Response(result.value.model_dump(mode="json"))

    # ------------------------------------------------------------------
    # Create / Update / Destroy
    # ------------------------------------------------------------------

    def create(self, request: Request) -> Response:
        """POST /api/v1/products/"""
        if not isinstance(request.data, Mapping):
            return _body_not_object()
        data: Mapping[str, Any] = request.data
        try:
            command = CreateProductCommand(
                name=data.get("name", ""),
                price=data.get("price", 0),
            )
        except PydanticValidationError as exc:
            return Response({"detail": str(exc)}, status=status.HTTP_400_BAD_REQUEST)

        result = self._mediator.send(command)
        if result.is_err:
            return _error_response(result)
        return Response({"id": result.value}, status=status.HTTP_201_CREATED)

    def update(self, request: Request, pk: str | None = None) -> Response:
        """PUT /api/v1/products/{pk}/"""
        if not isinstance(request.data, Mapping):
            return _body_not_object()
        data: Mapping[str, Any] = request.data
        try:
            command = UpdateProductCommand(
                id=pk,
                name=data.get("name", ""),
                price=data.get("price", 0),
            )
        except PydanticValidationError as exc:
            return Response({"detail": str(exc)}, status=status.HTTP_400_BAD_REQUEST)

        result = self._mediator.send(command)
        if result.is_err:
            return _error_response(result)
        return Response(status=status.HTTP_204_NO_CONTENT)

    def destroy(self, request: Request, pk: str | None = None) -> Response:
        """DELETE /api/v1/products/{pk}/"""
        try:
            command = DeleteProductCommand(id=pk)
        except PydanticValidationError as exc:
            return Response({"detail": str(exc)}, status=status.HTTP_400_BAD_REQUEST)

        result = self._mediator.send(command)
        if result.is_err:
            return _error_response(result)
        return Response(status=status.HTTP_204_NO_CONTENT)
