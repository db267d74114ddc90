"""User API views.

Exposes the ``UserService`` via HTTP using a DRF ViewSet.
Domain exceptions and DTO validation errors propagate to the project
exception handler (``modules.core.exception_handler``), which renders
them with the matching HTTP status.
"""

from __future__ import annotations

from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import ViewSet

from modules.core.fields import request_body
from modules.users.dtos import UpdateUserDTO, UserInputDTO
from modules.users.repositories.django_repository import UserDjangoRepository
from modules.users.services import UserService


class UserViewSet(ViewSet):
    """ViewSet for User CRUD operations.

    Uses ``UserService`` with ``UserDjangoRepository`` (DIP); no ORM
    access happens in the view.
    """

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = UserService(repository=UserDjangoRepository())

    # ------------------------------------------------------------------
    # List / Retrieve
    # ------------------------------------------------------------------

    def list(self, request: Request) -> Response:
        """GET /api/v1/users/"""
        users = self._service.list_users()
        return Response([user.model_dump(mode="json") for user in users])

    def retrieve(self, request: Request, pk: str | None = None) -> Response:
        """GET /api/v1/users/{pk}/"""
        user = self._service.get_user(pk)
        return Response(user.model_dump(mode="json"))

    # ------------------------------------------------------------------
    # Create / Update / Destroy
    # ------------------------------------------------------------------

    def create(self, request: Request) -> Response:
        """POST /api/v1/users/"""
        data = request_body(request)
        dto = UserInputDTO(
            id=data.get("id"),
            name=data.get("name"),
            age=data.get("age"),
            position=data.get("position"),
            hire_date=data.get("hire_date"),
        )
        user = self._service.create_user(dto)
        return Response(user.model_dump(mode="json"), status=status.HTTP_201_CREATED)

    def update(self, request: Request, pk: str | None = None) -> Response:
        """PUT /api/v1/users/{pk}/"""
        data = request_body(request)
        dto = UpdateUserDTO(
            name=data.get("name"),
            age=data.get("age"),
            position=data.get("position"),
            hire_date=data.get("hire_date"),
        )
        user = self._service.update_user(pk, dto)
        return Response(user.model_dump(mode="json"))

    def partial_update(self, request: Request, pk: str | None = None) -> Response:
        """PATCH /api/v1/users/{pk}/"""
        return self.update(request, pk)

    def destroy(self, request: Request, pk: str | None = None) -> Response:
        """DELETE /api/v1/users/{pk}/"""
        self._service.delete_user(pk)
        return Response(status=status.HTTP_204_NO_CONTENT)
