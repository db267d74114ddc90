"""Project-wide DRF exception handler.

Every error leaves the API in the same envelope::

    {
        "type": "client_error" | "validation_error" | "server_error",
        "errors": [{"code": ..., "detail": ..., "attr": ...}],
        "timestamp": "...",
        "path": "/api/v1/...",
    }

Domain errors are mapped by kind, Pydantic validation errors become a
400 with one entry per field, DRF's own exceptions keep their status.
Anything else is logged and answered with a generic 500 that exposes
only the exception class name as a diagnostic.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

import structlog
from django.utils import timezone
from pydantic import ValidationError as PydanticValidationError
from rest_framework import status
from rest_framework.exceptions import APIException, ErrorDetail
from rest_framework.exceptions import ValidationError as DRFValidationError
from rest_framework.response import Response
from rest_framework.views import exception_handler as drf_exception_handler
from rest_framework.views import set_rollback

from modules.core.exceptions import (
    Conflict,
    DomainError,
    InvalidInput,
    NotFound,
    Unauthorized,
)

logger = structlog.get_logger(__name__)

UNEXPECTED_ERROR_MESSAGE = "An unexpected error occurred. Please try again."

DOMAIN_STATUS: Dict[type, int] = {
    InvalidInput: status.HTTP_400_BAD_REQUEST,
    NotFound: status.HTTP_404_NOT_FOUND,
    Conflict: status.HTTP_409_CONFLICT,
    Unauthorized: status.HTTP_403_FORBIDDEN,
}


def status_for(exc: DomainError) -> int:
    for kind, status_code in DOMAIN_STATUS.items():
        if isinstance(exc, kind):
            return status_code
    return status.HTTP_400_BAD_REQUEST


def _error(code: str, detail: str, attr: Optional[str] = None) -> Dict[str, Any]:
    return {"code": code, "detail": detail, "attr": attr}


def _flatten(detail: Any, attr: Optional[str] = None) -> List[Dict[str, Any]]:
    """Turn DRF's nested ``detail`` structure into a flat error list."""
    if isinstance(detail, dict):
        errors = []
        for key, value in detail.items():
            child = key if attr is None else f"{attr}.{key}"
            errors.extend(_flatten(value, None if key == "detail" else child))
        return errors
    if isinstance(detail, list):
        errors = []
        for item in detail:
            errors.extend(_flatten(item, attr))
        return errors
    code = detail.code if isinstance(detail, ErrorDetail) else "error"
    return [_error(code, str(detail), attr)]


def _envelope(
    error_type: str, errors: List[Dict[str, Any]], context: Dict[str, Any]
) -> Dict[str, Any]:
    request = context.get("request")
    return {
        "type": error_type,
        "errors": errors,
        "timestamp": timezone.now().isoformat(),
        "path": request.get_full_path() if request is not None else "",
    }


def inventory_exception_handler(
    exc: Exception, context: Dict[str, Any]
) -> Optional[Response]:
    if isinstance(exc, DomainError):
        set_rollback()
        status_code = status_for(exc)
        logger.info(
            "request.domain_error",
            error=type(exc).__name__,
            status_code=status_code,
        )
        body = _envelope("client_error", [_error(exc.code, exc.message)], context)
        return Response(body, status=status_code)

    if isinstance(exc, PydanticValidationError):
        errors = [
            _error(
                "invalid",
                err["msg"],
                ".".join(str(part) for part in err["loc"]) or None,
            )
            for err in exc.errors()
        ]
        body = _envelope("validation_error", errors, context)
        return Response(body, status=status.HTTP_400_BAD_REQUEST)

    response = drf_exception_handler(exc, context)
    if response is not None:
        detail = exc.detail if isinstance(exc, APIException) else response.data
        error_type = (
            "validation_error"
            if isinstance(exc, DRFValidationError)
            else "client_error"
        )
        response.data = _envelope(error_type, _flatten(detail), context)
        return response

    logger.error("request.unhandled_error", error=type(exc).__name__, exc_info=exc)
    body = _envelope(
        "server_error",
        [_error("internal_error", UNEXPECTED_ERROR_MESSAGE)],
        context,
    )
    body["diagnostic"] = type(exc).__name__
    return Response(body, status=status.HTTP_500_INTERNAL_SERVER_ERROR)
