"""Input-boundary helpers shared by the user and product APIs.

- ``StoredCount``: DTO integer type that fits a ``PositiveIntegerField``
  column on every supported backend and refuses JSON booleans.
- ``request_body``: the parsed JSON body, which must be an object.
"""

from __future__ import annotations

from typing import Annotated, Any, Mapping

from pydantic import BeforeValidator, Field
from rest_framework.exceptions import ParseError
from rest_framework.request import Request

# Upper bound of ``PositiveIntegerField`` on PostgreSQL and MySQL.
MAX_STORED_INT = 2_147_483_647

BODY_NOT_AN_OBJECT = "Request body must be a JSON object."


def _reject_bool(value: Any) -> Any:
    # ``bool`` is an ``int`` subclass, lax mode would turn ``true`` into 1.
    if isinstance(value, bool):
        raise ValueError("Input should be a valid integer, not a boolean")
    return value


StoredCount = Annotated[int, BeforeValidator(_reject_bool), Field(le=MAX_STORED_INT)]


def request_body(request: Request) -> Mapping[str, Any]:
    data = request.data
    if not isinstance(data, Mapping):
        raise ParseError(BODY_NOT_AN_OBJECT)
    return data
