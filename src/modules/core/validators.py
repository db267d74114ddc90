"""Field-level checks reused by the user and product services.

Each ``is_*`` predicate answers a single rule; ``require`` turns a
failed predicate into the caller-supplied ``InvalidInput`` subclass.
"""

from __future__ import annotations

from datetime import date
from typing import Optional, Type

from django.utils import timezone

from modules.core.exceptions import InvalidInput


def is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


def is_positive(value: Optional[int]) -> bool:
    return value is not None and value > 0


def is_not_future(value: Optional[date]) -> bool:
    """``True`` when ``value`` is set and not strictly after today (local date)."""
    return value is not None and value <= timezone.localdate()


def require(
    condition: bool, message: str, error: Type[InvalidInput] = InvalidInput
) -> None:
    if not condition:
        raise error(message)
