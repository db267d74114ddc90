"""Product domain exceptions.

Raised by the Service Layer when business rules are violated.
The DRF exception handler translates them into HTTP responses.
"""

from __future__ import annotations

from modules.core.exceptions import Conflict, InvalidInput, NotFound, Unauthorized


class InvalidProductData(InvalidInput):
    """A required product field is missing or violates its rule."""


class InvalidSearchFilter(InvalidInput):
    """A product search was requested without any filter."""


class ProductAlreadyExists(Conflict):
    """A product with the same name already exists."""


class ProductNotFound(NotFound):
    """The requested product does not exist."""


class ProductDeleteNotAllowed(Unauthorized):
    """Only the registering user may delete a product."""
