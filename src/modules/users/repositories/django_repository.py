"""Django ORM implementation of the User repository.

Satisfies ``IUserRepository`` using Django's QuerySet API.
Error handling follows the Null Object pattern: look-ups return ``None``
instead of raising, and the Service Layer decides how to translate a
missing entity into a domain error.
"""

from __future__ import annotations

from typing import List, Optional

import structlog
from django.core.exceptions import ValidationError
from django.db import transaction

from modules.users.models import User
from modules.users.repositories.interfaces import IUserRepository

logger = structlog.get_logger(__name__)


class UserDjangoRepository(IUserRepository):
    """Concrete User repository backed by Django ORM."""

    def get_by_id(self, id: str) -> Optional[User]:
        """Retrieve a user by primary key.

        Returns ``None`` for non-existent or invalid IDs (e.g. malformed UUID).
        """
        try:
            return User.objects.filter(id=id).first()
        except (ValueError, ValidationError):
            return None

    def exists(self, id: str) -> bool:
        try:
            return User.objects.filter(id=id).exists()
        except (ValueError, ValidationError):
            return False

    def list(self) -> List[User]:
        return list(User.objects.all())

    def get_by_name(self, name: str) -> Optional[User]:
        return User.objects.filter(name=name).first()

    @transaction.atomic
    def save(self, entity: User) -> User:
        """Persist (create or update) a user."""
        is_new = entity._state.adding
        entity.save()
        logger.info("user.saved", user_id=str(entity.id), is_new=is_new)
        return entity

    @transaction.atomic
    def delete(self, id: str) -> bool:
        """Delete a user by ID.

        Returns ``False`` if no user exists with the given ID.
        """
        user = self.get_by_id(id)
        if not user:
            return False
        self.delete_entity(user)
        return True

    @transaction.atomic
    def delete_entity(self, entity: User) -> None:
        user_id = str(entity.id)
        entity.delete()
        logger.info("user.deleted", user_id=user_id)
