"""User DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.
DTOs only coerce types (ISO dates, numeric strings); business
rules are checked by ``UserService`` so that the first violated rule
decides the reported error.  DTOs are immutable (``frozen=True``).

- ``UserInputDTO``: input for user creation.
- ``UpdateUserDTO``: input for per-field user updates.
- ``UserOutputDTO``: public projection of a user.
"""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING, Any
from uuid import UUID

from pydantic import BaseModel, ConfigDict, field_validator

from modules.core.fields import StoredCount

if TYPE_CHECKING:
    from modules.users.models import User


# ---------------------------------------------------------------------------
# Input DTOs
# ---------------------------------------------------------------------------


class UserInputDTO(BaseModel):
    """Immutable DTO for user creation requests.

    ``id`` is accepted in any shape for symmetry with the output but is
    always ignored: identifiers are assigned by the store.
    """

    model_config = ConfigDict(frozen=True)

    id: str | None = None
    name: str | None = None
    age: StoredCount | None = None
    position: str | None = None
    hire_date: date | None = None

    @field_validator("id", mode="before")
    @classmethod
    def any_id_as_text(cls, v: Any) -> Any:
        return None if v is None else str(v)


class UpdateUserDTO(BaseModel):
    """Immutable DTO for user update requests.

    Every field is independently optional.  A field that is absent or
    fails its own rule is left unchanged on the stored user.
    """

    model_config = ConfigDict(frozen=True)

    name: str | None = None
    age: StoredCount | None = None
    position: str | None = None
    hire_date: date | None = None


# ---------------------------------------------------------------------------
# Output DTO
# ---------------------------------------------------------------------------


class UserOutputDTO(BaseModel):
    """Immutable DTO for user API responses."""

    model_config = ConfigDict(frozen=True)

    id: UUID
    name: str
    age: int
    position: str
    hire_date: date

    @classmethod
    def from_entity(cls, user: User) -> UserOutputDTO:
        """Build an output DTO from a User model instance."""
        return cls(
            id=user.id,
            name=user.name,
            age=user.age,
            position=user.position,
            hire_date=user.hire_date,
        )
