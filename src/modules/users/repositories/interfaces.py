"""User repository interface.

Extends ``IRepository[User]`` with the look-up required by the
unique-name rule.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Optional

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.users.models import User


class IUserRepository(IRepository["User"]):
    """Repository contract for the User aggregate."""

    @abstractmethod
    def get_by_name(self, name: str) -> Optional[User]:
        """Retrieve a user by exact name."""
