"""Domain error kinds shared by every inventory module.

Services raise subclasses of these; the DRF exception handler in
``modules.core.exception_handler`` maps each kind to an HTTP status.
Anything that is *not* a ``DomainError`` is treated as an unexpected
failure and rendered as a generic 500.
"""

from __future__ import annotations


class DomainError(Exception):
    """Base class for recoverable business-rule violations."""

    code = "domain_error"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InvalidInput(DomainError):
    """Malformed or missing required data; the caller can fix the request."""

    code = "invalid_input"


class NotFound(DomainError):
    """A referenced entity does not exist."""

    code = "not_found"


class Conflict(DomainError):
    """A uniqueness rule would be violated."""

    code = "conflict"


class Unauthorized(DomainError):
    """The caller is not allowed to perform the action on this entity."""

    code = "unauthorized"
