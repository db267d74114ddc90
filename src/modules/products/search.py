"""Product search criteria.

A search request carries up to three independent filters (entry date,
owning user, name substring).  ``build_criteria`` turns the filters
that are actually present into exactly one of seven criteria types,
each holding only the fields it needs, so ``ProductService`` can pick
the matching repository query with a single ``match``.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import TYPE_CHECKING, Optional, Union

from modules.core.validators import is_blank
from modules.products import constants
from modules.products.exceptions import InvalidSearchFilter

if TYPE_CHECKING:
    from modules.products.dtos import ProductSearchDTO


@dataclass(frozen=True)
class ByEntryDate:
    entry_date: date


@dataclass(frozen=True)
class ByUser:
    user_id: str


@dataclass(frozen=True)
class ByName:
    name: str


@dataclass(frozen=True)
class ByEntryDateAndUser:
    entry_date: date
    user_id: str


@dataclass(frozen=True)
class ByEntryDateAndName:
    entry_date: date
    name: str


@dataclass(frozen=True)
class ByUserAndName:
    user_id: str
    name: str


@dataclass(frozen=True)
class ByEntryDateUserAndName:
    entry_date: date
    user_id: str
    name: str


SearchCriteria = Union[
    ByEntryDate,
    ByUser,
    ByName,
    ByEntryDateAndUser,
    ByEntryDateAndName,
    ByUserAndName,
    ByEntryDateUserAndName,
]


def build_criteria(
    entry_date: Optional[date],
    user_id: Optional[str],
    name: Optional[str],
) -> SearchCriteria:
    """Select the criteria type for the filters present.

    Blank strings count as absent.

    Raises:
        InvalidSearchFilter: if no filter is present.
    """
    if is_blank(user_id):
        user_id = None
    if is_blank(name):
        name = None

    match (entry_date is not None, user_id is not None, name is not None):
        case (True, True, True):
            return ByEntryDateUserAndName(entry_date, user_id, name)
        case (True, True, False):
            return ByEntryDateAndUser(entry_date, user_id)
        case (True, False, True):
            return ByEntryDateAndName(entry_date, name)
        case (False, True, True):
            return ByUserAndName(user_id, name)
        case (True, False, False):
            return ByEntryDate(entry_date)
        case (False, True, False):
            return ByUser(user_id)
        case (False, False, True):
            return ByName(name)
        case _:
            raise InvalidSearchFilter(constants.EMPTY_SEARCH_FILTER)


def criteria_from_dto(dto: ProductSearchDTO) -> SearchCriteria:
    return build_criteria(dto.entry_date, dto.user_id, dto.name)
