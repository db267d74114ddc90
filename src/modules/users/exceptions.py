"""User domain exceptions.

Raised by the Service Layer when business rules are violated.
The DRF exception handler translates them into HTTP responses.
"""

from __future__ import annotations

from modules.core.exceptions import Conflict, InvalidInput, NotFound


class InvalidUserData(InvalidInput):
    """A required user field is missing or violates its rule."""


class UserAlreadyExists(Conflict):
    """A user with the same name already exists."""


class UserNotFound(NotFound):
    """The requested user does not exist."""
