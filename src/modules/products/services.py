"""Product service layer (Use Cases).

Orchestrates business logic for the Product aggregate, delegating
persistence to the injected ``IProductRepository`` and resolving user
references through ``IUserRepository``.

Business rules enforced here:
- Name must be non-blank, quantity positive, entry date not in the
  future (checked in that order on create and update).
- Product name must be unique.
- The registering / modifying user must be given and must exist.
- Only the registering user may delete a product.
- Searches need at least one filter and issue exactly one store query.
"""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING, List, Optional, assert_never
from uuid import UUID

import structlog
from django.db import IntegrityError, transaction
from django.utils import timezone

from modules.core.validators import is_blank, is_not_future, is_positive, require
from modules.products import constants
from modules.products.dtos import ProductOutputDTO
from modules.products.exceptions import (
    InvalidProductData,
    ProductAlreadyExists,
    ProductDeleteNotAllowed,
    ProductNotFound,
)
from modules.products.models import Product
from modules.products.search import (
    ByEntryDate,
    ByEntryDateAndName,
    ByEntryDateAndUser,
    ByEntryDateUserAndName,
    ByName,
    ByUser,
    ByUserAndName,
    criteria_from_dto,
)
from modules.users.constants import USER_NOT_FOUND_ID
from modules.users.exceptions import UserNotFound

if TYPE_CHECKING:
    from modules.products.dtos import (
        CreateProductDTO,
        ProductSearchDTO,
        UpdateProductDTO,
    )
    from modules.products.repositories.interfaces import IProductRepository
    from modules.users.models import User
    from modules.users.repositories.interfaces import IUserRepository

logger = structlog.get_logger(__name__)


class ProductService:
    """Application service for Product use-cases.

    Receives repositories via constructor injection (DIP).
    """

    def __init__(
        self,
        product_repository: IProductRepository,
        user_repository: IUserRepository,
    ) -> None:
        self._product_repo = product_repository
        self._user_repo = user_repository

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    @transaction.atomic
    def create_product(self, dto: CreateProductDTO) -> ProductOutputDTO:
        """Create a new product registered by an existing user.

        Raises:
            InvalidProductData: on the first violated field rule, or if
                no registering user is given.
            ProductAlreadyExists: if the name is already taken.
            UserNotFound: if the registering user does not exist.
        """
        self._validate(dto.name, dto.quantity, dto.entry_date)
        require(
            dto.registered_by_user_id is not None,
            constants.REGISTERING_USER_REQUIRED,
            InvalidProductData,
        )
        log = logger.bind(name=dto.name)

        if self._product_repo.get_by_name(dto.name):
            log.warning("product.duplicate_name")
            raise ProductAlreadyExists(constants.PRODUCT_NAME_EXISTS + dto.name)

        registered_by = self._resolve_user(dto.registered_by_user_id)

        product = Product(
            name=dto.name,
            quantity=dto.quantity,
            entry_date=dto.entry_date,
            registered_by=registered_by,
        )
        product = self._save(product)
        log.info(
            "product.created",
            product_id=str(product.id),
            registered_by_id=str(registered_by.id),
        )
        return ProductOutputDTO.from_entity(product)

    @transaction.atomic
    def update_product(self, id: str, dto: UpdateProductDTO) -> ProductOutputDTO:
        """Replace name, quantity and entry date of an existing product.

        ``registered_by`` is never touched; ``last_modified_by`` and
        ``last_modified_at`` are stamped on every successful update.

        Raises:
            ProductNotFound: if the product does not exist.
            InvalidProductData: on the first violated field rule, or if
                no modifying user is given.
            ProductAlreadyExists: if the new name belongs to another product.
            UserNotFound: if the modifying user does not exist.
        """
        product = self._get_or_raise(id)
        self._validate(dto.name, dto.quantity, dto.entry_date)
        require(
            dto.last_modified_by_user_id is not None,
            constants.MODIFYING_USER_REQUIRED,
            InvalidProductData,
        )
        log = logger.bind(product_id=str(id))

        if dto.name != product.name and self._product_repo.get_by_name(dto.name):
            log.warning("product.duplicate_name", name=dto.name)
            raise ProductAlreadyExists(constants.PRODUCT_NAME_EXISTS + dto.name)

        modified_by = self._resolve_user(dto.last_modified_by_user_id)

        product.name = dto.name
        product.quantity = dto.quantity
        product.entry_date = dto.entry_date
        product.last_modified_by = modified_by
        product.last_modified_at = timezone.now()

        product = self._save(product)
        log.info("product.updated", modified_by_id=str(modified_by.id))
        return ProductOutputDTO.from_entity(product)

    @transaction.atomic
    def delete_product(self, id: str, requesting_user_id: Optional[str]) -> None:
        """Delete a product on behalf of its registering user.

        Raises:
            ProductNotFound: if the product does not exist.
            ProductDeleteNotAllowed: if ``requesting_user_id`` is not the
                user who registered the product.
        """
        product = self._get_or_raise(id)
        log = logger.bind(product_id=str(id), requesting_user_id=requesting_user_id)

        if not self._is_owner(product, requesting_user_id):
            log.warning("product.delete_denied")
            raise ProductDeleteNotAllowed(constants.ONLY_REGISTERING_USER_CAN_DELETE)

        self._product_repo.delete_entity(product)
        log.info("product.deleted")

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def list_products(self) -> List[ProductOutputDTO]:
        """Return every product."""
        return [ProductOutputDTO.from_entity(p) for p in self._product_repo.list()]

    def get_product(self, id: str) -> ProductOutputDTO:
        """Retrieve a single product by ID.

        Raises:
            ProductNotFound: if the product does not exist.
        """
        product = self._get_or_raise(id)
        logger.info("product.retrieved", product_id=str(id))
        return ProductOutputDTO.from_entity(product)

    def search_products(self, dto: ProductSearchDTO) -> List[ProductOutputDTO]:
        """Run the single store query matching the filters present.

        Raises:
            InvalidSearchFilter: if no filter is given.
            UserNotFound: if a user filter does not resolve to a user.
        """
        criteria = criteria_from_dto(dto)
        repo = self._product_repo

        match criteria:
            case ByEntryDateUserAndName(entry_date=entry_date, user_id=user_id, name=name):
                products = repo.find_by_entry_date_registered_by_and_name_containing(
                    entry_date, self._resolve_user(user_id), name
                )
            case ByEntryDateAndUser(entry_date=entry_date, user_id=user_id):
                products = repo.find_by_entry_date_and_registered_by(
                    entry_date, self._resolve_user(user_id)
                )
            case ByEntryDateAndName(entry_date=entry_date, name=name):
                products = repo.find_by_entry_date_and_name_containing(entry_date, name)
            case ByUserAndName(user_id=user_id, name=name):
                products = repo.find_by_registered_by_and_name_containing(
                    self._resolve_user(user_id), name
                )
            case ByEntryDate(entry_date=entry_date):
                products = repo.find_by_entry_date(entry_date)
            case ByUser(user_id=user_id):
                products = repo.find_by_registered_by(self._resolve_user(user_id))
            case ByName(name=name):
                products = repo.find_by_name_containing(name)
            case _:
                assert_never(criteria)

        logger.info(
            "product.searched",
            criteria=type(criteria).__name__,
            results=len(products),
        )
        return [ProductOutputDTO.from_entity(p) for p in products]

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _get_or_raise(self, id: str) -> Product:
        product = self._product_repo.get_by_id(id)
        if not product:
            raise ProductNotFound(constants.PRODUCT_NOT_FOUND_ID + str(id))
        return product

    def _resolve_user(self, user_id: str) -> User:
        user = self._user_repo.get_by_id(user_id)
        if not user:
            raise UserNotFound(USER_NOT_FOUND_ID + str(user_id))
        return user

    def _save(self, product: Product) -> Product:
        # The unique index on ``name`` wins races the pre-check cannot see.
        try:
            return self._product_repo.save(product)
        except IntegrityError as exc:
            logger.warning("product.save_conflict", name=product.name)
            raise ProductAlreadyExists(
                constants.PRODUCT_NAME_EXISTS + product.name
            ) from exc

    @staticmethod
    def _is_owner(product: Product, requesting_user_id: Optional[str]) -> bool:
        if requesting_user_id is None or product.registered_by_id is None:
            return False
        try:
            return UUID(str(requesting_user_id)) == UUID(str(product.registered_by_id))
        except ValueError:
            return False

    @staticmethod
    def _validate(
        name: Optional[str], quantity: Optional[int], entry_date: Optional[date]
    ) -> None:
        require(
            not is_blank(name), constants.PRODUCT_NAME_REQUIRED, InvalidProductData
        )
        require(
            is_positive(quantity),
            constants.PRODUCT_QUANTITY_MUST_BE_POSITIVE,
            InvalidProductData,
        )
        require(
            is_not_future(entry_date),
            constants.PRODUCT_ENTRY_DATE_NOT_FUTURE,
            InvalidProductData,
        )
