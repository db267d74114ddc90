"""Unit tests for Product DTOs.

Covers:
- CreateProductDTO / UpdateProductDTO: coercion, user id normalisation.
- ProductSearchDTO: blank filters.
- ProductOutputDTO: user references projected to names.
"""

from __future__ import annotations

from datetime import date
from uuid import UUID

import pytest
from django.utils import timezone
from pydantic import ValidationError

from modules.core.fields import MAX_STORED_INT
from modules.products.dtos import (
    CreateProductDTO,
    ProductOutputDTO,
    ProductSearchDTO,
    UpdateProductDTO,
)
from modules.products.models import Product
from modules.users.models import User

pytestmark = pytest.mark.unit


def _user(name: str = "Ana Souza") -> User:
    return User(name=name, age=34, position="Manager", hire_date=date(2020, 5, 1))


class TestCreateProductDTO:
    def test_coerces_json_values(self):
        dto = CreateProductDTO(
            name="Widget",
            quantity="5",
            entry_date="2024-03-01",
            registered_by_user_id="0190a1b2-0000-7000-8000-000000000001",
        )
        assert dto.quantity == 5
        assert dto.entry_date == date(2024, 3, 1)
        assert dto.registered_by_user_id == "0190a1b2-0000-7000-8000-000000000001"

    def test_uuid_user_id_becomes_string(self):
        user_id = UUID("0190a1b2-0000-7000-8000-000000000001")
        dto = CreateProductDTO(registered_by_user_id=user_id)
        assert dto.registered_by_user_id == str(user_id)

    @pytest.mark.parametrize("blank", ["", "   "])
    def test_blank_user_id_is_none(self, blank):
        assert CreateProductDTO(registered_by_user_id=blank).registered_by_user_id is None

    def test_non_numeric_quantity_raises(self):
        with pytest.raises(ValidationError):
            CreateProductDTO(quantity="many")

    def test_quantity_beyond_column_range_raises(self):
        with pytest.raises(ValidationError):
            CreateProductDTO(quantity=10**20)

    def test_largest_storable_quantity_is_accepted(self):
        assert CreateProductDTO(quantity=MAX_STORED_INT).quantity == MAX_STORED_INT

    @pytest.mark.parametrize("flag", [True, False])
    def test_boolean_quantity_raises(self, flag):
        with pytest.raises(ValidationError):
            UpdateProductDTO(quantity=flag)

    def test_is_immutable(self):
        dto = CreateProductDTO(name="Widget")
        with pytest.raises(ValidationError):
            dto.name = "Gadget"


class TestUpdateProductDTO:
    def test_modifier_id_is_normalised(self):
        dto = UpdateProductDTO(last_modified_by_user_id="  abc  ")
        assert dto.last_modified_by_user_id == "abc"

    def test_missing_fields_are_none(self):
        dto = UpdateProductDTO()
        assert dto.name is None
        assert dto.quantity is None
        assert dto.entry_date is None
        assert dto.last_modified_by_user_id is None


class TestProductSearchDTO:
    def test_all_filters_optional(self):
        dto = ProductSearchDTO()
        assert dto.entry_date is None
        assert dto.user_id is None
        assert dto.name is None

    def test_blank_date_is_none(self):
        assert ProductSearchDTO(entry_date="").entry_date is None

    def test_invalid_date_raises(self):
        with pytest.raises(ValidationError):
            ProductSearchDTO(entry_date="not-a-date")


class TestProductOutputDTO:
    def test_from_entity_without_modifier(self):
        product = Product(
            name="Widget",
            quantity=5,
            entry_date=date(2024, 3, 1),
            registered_by=_user(),
        )

        dto = ProductOutputDTO.from_entity(product)

        assert dto.id == product.id
        assert dto.registered_by_name == "Ana Souza"
        assert dto.last_modified_by_name is None
        assert dto.last_modified_at is None

    def test_from_entity_with_modifier(self):
        modified_at = timezone.now()
        product = Product(
            name="Widget",
            quantity=5,
            entry_date=date(2024, 3, 1),
            registered_by=_user(),
            last_modified_by=_user("Bruno Lima"),
            last_modified_at=modified_at,
        )

        dto = ProductOutputDTO.from_entity(product)

        assert dto.last_modified_by_name == "Bruno Lima"
        assert dto.last_modified_at == modified_at

    def test_from_entity_with_deleted_owner(self):
        product = Product(name="Widget", quantity=5, entry_date=date(2024, 3, 1))

        assert ProductOutputDTO.from_entity(product).registered_by_name is None

    def test_json_dump(self):
        product = Product(
            name="Widget",
            quantity=5,
            entry_date=date(2024, 3, 1),
            registered_by=_user(),
        )

        data = ProductOutputDTO.from_entity(product).model_dump(mode="json")

        assert data == {
            "id": str(product.id),
            "name": "Widget",
            "quantity": 5,
            "entry_date": "2024-03-01",
            "registered_by_name": "Ana Souza",
            "last_modified_by_name": None,
            "last_modified_at": None,
        }
