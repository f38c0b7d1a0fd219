"""Product API views.

Exposes the ``ProductService`` via HTTP using a DRF ViewSet.
Domain exceptions are caught and translated into HTTP status codes;
anything else (e.g. a database outage) propagates as a server error.
"""

from __future__ import annotations

from typing import Optional

from pydantic import ValidationError as PydanticValidationError
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import GenericViewSet

from modules.products.dtos import CreateProductDTO, errors_from_pydantic
from modules.products.exceptions import InvalidProduct, ProductNotFound
from modules.products.models import Product
from modules.products.repositories.django_repository import ProductDjangoRepository
from modules.products.serializers import ProductSerializer
from modules.products.services import ProductService


class ProductViewSet(GenericViewSet):
    """List, retrieve and create catalog products.

    Uses ``ProductService`` with ``ProductDjangoRepository`` (DIP).
    All ORM access goes through the service/repository layer.
    """

    queryset = Product.objects.all()
    serializer_class = ProductSerializer

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = ProductService(repository=ProductDjangoRepository())

    def list(self, request: Request) -> Response:
        """GET /api/products?tags=a,b"""
        products = self._service.list_products(request.query_params.get("tags"))
        return Response(ProductSerializer(products, many=True).data)

    def retrieve(self, request: Request, pk: Optional[str] = None) -> Response:
        """GET /api/products/{pk}"""
        try:
            product = self._service.get_product(pk)
        except ProductNotFound:
            return Response(status=status.HTTP_404_NOT_FOUND)
        return Response(ProductSerializer(product).data)

    def create(self, request: Request) -> Response:
        """POST /api/products"""
        try:
            dto = CreateProductDTO.model_validate(request.data)
        except PydanticValidationError as exc:
            return Response(
                errors_from_pydantic(exc),
                status=status.HTTP_400_BAD_REQUEST,
            )

        try:
            product = self._service.create_product(dto)
        except InvalidProduct as exc:
            return Response(exc.errors, status=status.HTTP_400_BAD_REQUEST)

        return Response(
            ProductSerializer(product).data,
            status=status.HTTP_201_CREATED,
            headers={"Location": f"/api/products/{product.pk}"},
        )
