"""Unit tests for BaseModel.

Exercised through ``User``, the simplest concrete model built on it.
"""

from __future__ import annotations

import uuid
from datetime import date, timedelta

import pytest
from freezegun import freeze_time

from modules.users.models import User

pytestmark = pytest.mark.unit


def _create(name: str = "Ana Souza") -> User:
    return User.objects.create(
        name=name, age=34, position="Manager", hire_date=date(2020, 5, 1)
    )


class TestBaseModel:
    """Tests for UUIDv7 PK and timestamp behaviour."""

    def test_id_is_uuid_version_7(self):
        obj = _create()
        assert isinstance(obj.id, uuid.UUID)
        assert obj.id.version == 7

    def test_ids_are_time_ordered(self):
        """UUIDv7 encodes timestamp, so sequential creates yield ordered IDs."""
        a = _create("first")
        b = _create("second")
        assert str(a.id) < str(b.id)

    def test_id_is_not_editable(self):
        assert User._meta.get_field("id").editable is False

    def test_created_at_does_not_change_on_save(self):
        with freeze_time("2024-03-01 10:00:00"):
            obj = _create()
        original_created = obj.created_at

        with freeze_time("2024-03-02 10:00:00"):
            obj.age = 35
            obj.save()

        obj.refresh_from_db()
        assert obj.created_at == original_created
        assert obj.updated_at - original_created == timedelta(days=1)

    def test_save_with_update_fields_includes_updated_at(self):
        """The save() guard must inject updated_at into update_fields."""
        with freeze_time("2024-03-01 10:00:00"):
            obj = _create()
        original_updated = obj.updated_at

        with freeze_time("2024-03-01 11:00:00"):
            obj.position = "Director"
            obj.save(update_fields=["position"])

        obj.refresh_from_db()
        assert obj.updated_at > original_updated
