"""Product repository interface.

Extends ``IRepository[Product]`` with the unique-name look-up and one
dedicated query per combination of search filters, so that filtering
always happens in the store.
"""

from __future__ import annotations

from abc import abstractmethod
from datetime import date
from typing import TYPE_CHECKING, List, Optional

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.products.models import Product
    from modules.users.models import User


class IProductRepository(IRepository["Product"]):
    """Repository contract for the Product aggregate."""

    @abstractmethod
    def get_by_name(self, name: str) -> Optional[Product]:
        """Retrieve a product by exact (case-sensitive) name."""

    # ------------------------------------------------------------------
    # Search queries (name matches are case-insensitive substrings)
    # ------------------------------------------------------------------

    @abstractmethod
    def find_by_entry_date(self, entry_date: date) -> List[Product]:
        """Products entered on ``entry_date``."""

    @abstractmethod
    def find_by_registered_by(self, user: User) -> List[Product]:
        """Products registered by ``user``."""

    @abstractmethod
    def find_by_name_containing(self, name: str) -> List[Product]:
        """Products whose name contains ``name``."""

    @abstractmethod
    def find_by_entry_date_and_registered_by(
        self, entry_date: date, user: User
    ) -> List[Product]:
        """Products entered on ``entry_date`` and registered by ``user``."""

    @abstractmethod
    def find_by_entry_date_and_name_containing(
        self, entry_date: date, name: str
    ) -> List[Product]:
        """Products entered on ``entry_date`` whose name contains ``name``."""

    @abstractmethod
    def find_by_registered_by_and_name_containing(
        self, user: User, name: str
    ) -> List[Product]:
        """Products registered by ``user`` whose name contains ``name``."""

    @abstractmethod
    def find_by_entry_date_registered_by_and_name_containing(
        self, entry_date: date, user: User, name: str
    ) -> List[Product]:
        """Products matching all three filters."""
