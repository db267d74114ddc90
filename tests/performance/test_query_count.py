"""Performance regression tests: constant query count (N+1 prevention).

Verifies that list, retrieve and search endpoints execute a bounded
number of SQL queries regardless of the number of records, proving
that ``select_related`` is applied to both user references.
"""

from __future__ import annotations

from datetime import date

import pytest
from django.utils import timezone

from modules.products.models import Product
from modules.users.models import User

ENTRY_DATE = date(2024, 3, 1)


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def users():
    return [
        User.objects.create(
            name=f"Employee {i}", age=30, position="Clerk", hire_date=date(2020, 1, 1)
        )
        for i in range(3)
    ]


def _make_products(users, count: int) -> None:
    for i in range(count):
        Product.objects.create(
            name=f"Widget {i:03d}",
            quantity=i + 1,
            entry_date=ENTRY_DATE,
            registered_by=users[i % len(users)],
            last_modified_by=users[(i + 1) % len(users)],
            last_modified_at=timezone.now(),
        )


# ---------------------------------------------------------------------------
# Tests
# ---------------------------------------------------------------------------


@pytest.mark.parametrize("count", [1, 10])
def test_product_list_query_count_is_constant(
    api_client, users, count, django_assert_max_num_queries
):
    _make_products(users, count)

    with django_assert_max_num_queries(1):
        response = api_client.get("/api/v1/products/")

    assert response.status_code == 200
    assert len(response.json()) == count
    assert all(p["last_modified_by_name"] for p in response.json())


@pytest.mark.parametrize("count", [1, 10])
def test_product_search_by_name_query_count_is_constant(
    api_client, users, count, django_assert_max_num_queries
):
    _make_products(users, count)

    with django_assert_max_num_queries(1):
        response = api_client.get(
            "/api/v1/products/search/",
            {"entry_date": ENTRY_DATE.isoformat(), "name": "widget"},
        )

    assert response.status_code == 200
    assert len(response.json()) == count


def test_product_search_by_user_resolves_user_once(
    api_client, users, django_assert_max_num_queries
):
    _make_products(users, 9)

    with django_assert_max_num_queries(2):
        response = api_client.get(
            "/api/v1/products/search/", {"user_id": str(users[0].id)}
        )

    assert response.status_code == 200
    assert len(response.json()) == 3


def test_product_retrieve_query_count(api_client, users, django_assert_max_num_queries):
    _make_products(users, 1)
    product = Product.objects.get()

    with django_assert_max_num_queries(1):
        response = api_client.get(f"/api/v1/products/{product.id}/")

    assert response.status_code == 200
