"""User service layer (Use Cases).

Orchestrates business logic for the User aggregate, delegating
persistence to the injected ``IUserRepository``.

Business rules enforced here:
- Name, position must be non-blank; age must be positive; hire date
  cannot be in the future (checked in that order on creation).
- User name must be unique.
- Updates are applied field by field: a missing or invalid value
  leaves the stored field unchanged.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, List

import structlog
from django.db import IntegrityError, transaction

from modules.core.validators import is_blank, is_not_future, is_positive, require
from modules.users import constants
from modules.users.dtos import UserOutputDTO
from modules.users.exceptions import InvalidUserData, UserAlreadyExists, UserNotFound
from modules.users.models import User

if TYPE_CHECKING:
    from modules.users.dtos import UpdateUserDTO, UserInputDTO
    from modules.users.repositories.interfaces import IUserRepository

logger = structlog.get_logger(__name__)


def _has_text(value: str | None) -> bool:
    return not is_blank(value)


# Per-field rules shared by create (mandatory) and update (optional).
_FIELD_RULES: dict[str, Callable[[Any], bool]] = {
    "name": _has_text,
    "age": is_positive,
    "position": _has_text,
    "hire_date": is_not_future,
}


class UserService:
    """Application service for User use-cases.

    Receives an ``IUserRepository`` via constructor injection (DIP).
    """

    def __init__(self, repository: IUserRepository) -> None:
        self._repo = repository

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    @transaction.atomic
    def create_user(self, dto: UserInputDTO) -> UserOutputDTO:
        """Create a new user after validating every field.

        Raises:
            InvalidUserData: naming the first violated field rule.
            UserAlreadyExists: if the name is already taken.
        """
        self._validate(dto)
        log = logger.bind(name=dto.name)

        if self._repo.get_by_name(dto.name):
            log.warning("user.duplicate_name")
            raise UserAlreadyExists(constants.USER_NAME_EXISTS + dto.name)

        user = User(
            name=dto.name,
            age=dto.age,
            position=dto.position,
            hire_date=dto.hire_date,
        )
        user = self._save(user)
        log.info("user.created", user_id=str(user.id))
        return UserOutputDTO.from_entity(user)

    @transaction.atomic
    def update_user(self, id: str, dto: UpdateUserDTO) -> UserOutputDTO:
        """Apply every present and valid field of ``dto`` to the user.

        Raises:
            UserNotFound: if the user does not exist.
            UserAlreadyExists: if the new name belongs to another user.
        """
        user = self._get_or_raise(id)
        log = logger.bind(user_id=str(id))

        if _has_text(dto.name) and dto.name != user.name:
            if self._repo.get_by_name(dto.name):
                log.warning("user.duplicate_name", name=dto.name)
                raise UserAlreadyExists(constants.USER_NAME_EXISTS + dto.name)

        for field, is_valid in _FIELD_RULES.items():
            value = getattr(dto, field)
            if value is None:
                continue
            if is_valid(value):
                setattr(user, field, value)
            else:
                log.warning("user.update_field_ignored", field=field)

        user = self._save(user)
        log.info("user.updated")
        return UserOutputDTO.from_entity(self._get_or_raise(str(user.id)))

    @transaction.atomic
    def delete_user(self, id: str) -> None:
        """Delete a user.

        Raises:
            UserNotFound: if the user does not exist.
        """
        if not self._repo.exists(id):
            raise UserNotFound(constants.USER_NOT_FOUND_ID + str(id))
        self._repo.delete(id)
        logger.info("user.deleted", user_id=str(id))

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def list_users(self) -> List[UserOutputDTO]:
        """Return every user."""
        return [UserOutputDTO.from_entity(user) for user in self._repo.list()]

    def get_user(self, id: str) -> UserOutputDTO:
        """Retrieve a single user by ID.

        Raises:
            UserNotFound: if the user does not exist.
        """
        user = self._get_or_raise(id)
        logger.info("user.retrieved", user_id=str(id))
        return UserOutputDTO.from_entity(user)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _get_or_raise(self, id: str) -> User:
        user = self._repo.get_by_id(id)
        if not user:
            raise UserNotFound(constants.USER_NOT_FOUND_ID + str(id))
        return user

    def _save(self, user: User) -> User:
        # The unique index on ``name`` wins races the pre-check cannot see.
        try:
            return self._repo.save(user)
        except IntegrityError as exc:
            logger.warning("user.save_conflict", name=user.name)
            raise UserAlreadyExists(constants.USER_NAME_EXISTS + user.name) from exc

    @staticmethod
    def _validate(dto: UserInputDTO) -> None:
        require(
            _has_text(dto.name), constants.USER_NAME_REQUIRED, InvalidUserData
        )
        require(
            is_positive(dto.age), constants.USER_AGE_MUST_BE_POSITIVE, InvalidUserData
        )
        require(
            _has_text(dto.position), constants.USER_POSITION_REQUIRED, InvalidUserData
        )
        require(
            is_not_future(dto.hire_date),
            constants.USER_HIRE_DATE_NOT_FUTURE,
            InvalidUserData,
        )
