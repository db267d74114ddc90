"""Product DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.
DTOs only coerce types; the rules themselves (non-empty name, positive
quantity, no future entry date, required user) are checked by
``ProductService`` in a fixed order.  DTOs are immutable (``frozen=True``).

- ``CreateProductDTO``: input for product creation.
- ``UpdateProductDTO``: input for full product replacement.
- ``ProductSearchDTO``: optional search filters.
- ``ProductOutputDTO``: projection with user references resolved to names.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import TYPE_CHECKING, Any
from uuid import UUID

from pydantic import BaseModel, ConfigDict, field_validator

from modules.core.fields import StoredCount

if TYPE_CHECKING:
    from modules.products.models import Product


def _user_id_or_none(v: Any) -> Any:
    """Accept UUIDs, numbers or strings; blank means *not supplied*."""
    if v is None:
        return None
    v = str(v).strip()
    return v or None


# ---------------------------------------------------------------------------
# Input DTOs
# ---------------------------------------------------------------------------


class CreateProductDTO(BaseModel):
    """Immutable DTO for product creation requests."""

    model_config = ConfigDict(frozen=True)

    name: str | None = None
    quantity: StoredCount | None = None
    entry_date: date | None = None
    registered_by_user_id: str | None = None

    @field_validator("registered_by_user_id", mode="before")
    @classmethod
    def normalise_user_id(cls, v: Any) -> Any:
        return _user_id_or_none(v)


class UpdateProductDTO(BaseModel):
    """Immutable DTO for product update requests.

    Unlike user updates, every field is mandatory: an update replaces
    name, quantity and entry date as a whole.
    """

    model_config = ConfigDict(frozen=True)

    name: str | None = None
    quantity: StoredCount | None = None
    entry_date: date | None = None
    last_modified_by_user_id: str | None = None

    @field_validator("last_modified_by_user_id", mode="before")
    @classmethod
    def normalise_user_id(cls, v: Any) -> Any:
        return _user_id_or_none(v)


class ProductSearchDTO(BaseModel):
    """Immutable DTO for the three independent search filters."""

    model_config = ConfigDict(frozen=True)

    entry_date: date | None = None
    user_id: str | None = None
    name: str | None = None

    @field_validator("entry_date", mode="before")
    @classmethod
    def blank_date_is_none(cls, v: Any) -> Any:
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator("user_id", mode="before")
    @classmethod
    def normalise_user_id(cls, v: Any) -> Any:
        return _user_id_or_none(v)


# ---------------------------------------------------------------------------
# Output DTO
# ---------------------------------------------------------------------------


class ProductOutputDTO(BaseModel):
    """Immutable DTO for product API responses."""

    model_config = ConfigDict(frozen=True)

    id: UUID
    name: str
    quantity: int
    entry_date: date
    registered_by_name: str | None = None
    last_modified_by_name: str | None = None
    last_modified_at: datetime | None = None

    @classmethod
    def from_entity(cls, product: Product) -> ProductOutputDTO:
        """Build an output DTO from a Product model instance."""
        registered_by = product.registered_by
        last_modified_by = product.last_modified_by
        return cls(
            id=product.id,
            name=product.name,
            quantity=product.quantity,
            entry_date=product.entry_date,
            registered_by_name=registered_by.name if registered_by else None,
            last_modified_by_name=last_modified_by.name if last_modified_by else None,
            last_modified_at=product.last_modified_at,
        )
