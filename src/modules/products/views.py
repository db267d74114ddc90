"""Product API views.

Exposes the ``ProductService`` via HTTP using a DRF ViewSet.
Domain exceptions and DTO validation errors propagate to the project
exception handler (``modules.core.exception_handler``), which renders
them with the matching HTTP status.
"""

from __future__ import annotations

from rest_framework import status
from rest_framework.decorators import action
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import ViewSet

from modules.core.fields import request_body
from modules.products.dtos import CreateProductDTO, ProductSearchDTO, UpdateProductDTO
from modules.products.repositories.django_repository import ProductDjangoRepository
from modules.products.services import ProductService
from modules.users.repositories.django_repository import UserDjangoRepository


class ProductViewSet(ViewSet):
    """ViewSet for Product CRUD and search.

    Uses ``ProductService`` with the Django repositories (DIP); no ORM
    access happens in the view.
    """

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = ProductService(
            product_repository=ProductDjangoRepository(),
            user_repository=UserDjangoRepository(),
        )

    # ------------------------------------------------------------------
    # List / Retrieve / Search
    # ------------------------------------------------------------------

    def list(self, request: Request) -> Response:
        """GET /api/v1/products/"""
        products = self._service.list_products()
        return Response([p.model_dump(mode="json") for p in products])

    def retrieve(self, request: Request, pk: str | None = None) -> Response:
        """GET /api/v1/products/{pk}/"""
        product = self._service.get_product(pk)
        return Response(product.model_dump(mode="json"))

    @action(detail=False, methods=["get"], url_path="search")
    def search(self, request: Request) -> Response:
        """GET /api/v1/products/search/?entry_date=&user_id=&name="""
        params = request.query_params
        dto = ProductSearchDTO(
            entry_date=params.get("entry_date"),
            user_id=params.get("user_id"),
            name=params.get("name"),
        )
        products = self._service.search_products(dto)
        return Response([p.model_dump(mode="json") for p in products])

    # ------------------------------------------------------------------
    # Create / Update / Destroy
    # ------------------------------------------------------------------

    def create(self, request: Request) -> Response:
        """POST /api/v1/products/"""
        data = request_body(request)
        dto = CreateProductDTO(
            name=data.get("name"),
            quantity=data.get("quantity"),
            entry_date=data.get("entry_date"),
            registered_by_user_id=data.get("registered_by_user_id"),
        )
        product = self._service.create_product(dto)
        return Response(product.model_dump(mode="json"), status=status.HTTP_201_CREATED)

    def update(self, request: Request, pk: str | None = None) -> Response:
        """PUT /api/v1/products/{pk}/"""
        data = request_body(request)
        dto = UpdateProductDTO(
            name=data.get("name"),
            quantity=data.get("quantity"),
            entry_date=data.get("entry_date"),
            last_modified_by_user_id=data.get("last_modified_by_user_id"),
        )
        product = self._service.update_product(pk, dto)
        return Response(product.model_dump(mode="json"))

    def partial_update(self, request: Request, pk: str | None = None) -> Response:
        """PATCH /api/v1/products/{pk}/"""
        return self.update(request, pk)

    def destroy(self, request: Request, pk: str | None = None) -> Response:
        """DELETE /api/v1/products/{pk}/?requesting_user_id="""
        self._service.delete_product(pk, request.query_params.get("requesting_user_id"))
        return Response(status=status.HTTP_204_NO_CONTENT)
