"""Django ORM implementation of the Product repository.

Satisfies ``IProductRepository`` using Django's QuerySet API.
Error handling follows the Null Object pattern: look-ups return ``None``
instead of raising, and the Service Layer decides how to translate a
missing entity into a domain error.

Every query joins both user references (``select_related``) because
the product projection always renders the users' names.
"""

from __future__ import annotations

from datetime import date
from typing import List, Optional

import structlog
from django.core.exceptions import ValidationError
from django.db import models, transaction

from modules.products.models import Product
from modules.products.repositories.interfaces import IProductRepository
from modules.users.models import User

logger = structlog.get_logger(__name__)


class ProductDjangoRepository(IProductRepository):
    """Concrete Product repository backed by Django ORM."""

    @staticmethod
    def _queryset() -> models.QuerySet[Product]:
        return Product.objects.select_related("registered_by", "last_modified_by")

    def _filter(self, **lookups) -> List[Product]:
        return list(self._queryset().filter(**lookups))

    def get_by_id(self, id: str) -> Optional[Product]:
        """Retrieve a product by primary key.

        Returns ``None`` for non-existent or invalid IDs.
        """
        try:
            return self._queryset().filter(id=id).first()
        except (ValueError, ValidationError):
            return None

    def exists(self, id: str) -> bool:
        try:
            return Product.objects.filter(id=id).exists()
        except (ValueError, ValidationError):
            return False

    def list(self) -> List[Product]:
        return list(self._queryset())

    def get_by_name(self, name: str) -> Optional[Product]:
        return self._queryset().filter(name=name).first()

    @transaction.atomic
    def save(self, entity: Product) -> Product:
        """Persist (create or update) a product."""
        entity.save()
        logger.info("product.saved", product_id=str(entity.id), name=entity.name)
        return entity

    @transaction.atomic
    def delete(self, id: str) -> bool:
        """Delete a product by ID.

        Returns ``False`` if no product exists with the given ID.
        """
        product = self.get_by_id(id)
        if not product:
            return False
        self.delete_entity(product)
        return True

    @transaction.atomic
    def delete_entity(self, entity: Product) -> None:
        product_id = str(entity.id)
        entity.delete()
        logger.info("product.deleted", product_id=product_id)

    # ------------------------------------------------------------------
    # Search queries
    # ------------------------------------------------------------------

    def find_by_entry_date(self, entry_date: date) -> List[Product]:
        return self._filter(entry_date=entry_date)

    def find_by_registered_by(self, user: User) -> List[Product]:
        return self._filter(registered_by=user)

    def find_by_name_containing(self, name: str) -> List[Product]:
        return self._filter(name__icontains=name)

    def find_by_entry_date_and_registered_by(
        self, entry_date: date, user: User
    ) -> List[Product]:
        return self._filter(entry_date=entry_date, registered_by=user)

    def find_by_entry_date_and_name_containing(
        self, entry_date: date, name: str
    ) -> List[Product]:
        return self._filter(entry_date=entry_date, name__icontains=name)

    def find_by_registered_by_and_name_containing(
        self, user: User, name: str
    ) -> List[Product]:
        return self._filter(registered_by=user, name__icontains=name)

    def find_by_entry_date_registered_by_and_name_containing(
        self, entry_date: date, user: User, name: str
    ) -> List[Product]:
        return self._filter(
            entry_date=entry_date, registered_by=user, name__icontains=name
        )
