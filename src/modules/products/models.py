"""Product model with unique name and ownership tracking.

Business rules implemented:
- Product name must be unique in the system (DB unique constraint).
- Quantity must be strictly positive (DB check constraint).
- Entry date cannot be in the future (enforced at service layer).
- ``registered_by`` owns the record for deletion purposes and is set
  once at creation; ``last_modified_by`` / ``last_modified_at`` stay
  empty until the first update.
"""

from __future__ import annotations

from django.db import models

from modules.core.models import BaseModel


class Product(BaseModel):
    """Product aggregate root.

    User references are one-directional (Product -> User) and use
    ``SET_NULL`` so that deleting an employee never cascades into the
    inventory.
    """

    name = models.CharField(max_length=255, unique=True)
    quantity = models.PositiveIntegerField()
    entry_date = models.DateField()
    registered_by = models.ForeignKey(
        "users.User",
        on_delete=models.SET_NULL,
        null=True,
        related_name="registered_products",
    )
    last_modified_by = models.ForeignKey(
        "users.User",
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="modified_products",
    )
    last_modified_at = models.DateTimeField(null=True, blank=True, default=None)

    class Meta:
        db_table = "products"
        ordering = ["created_at"]
        indexes = [
            models.Index(fields=["entry_date"], name="products_entry_date_idx"),
        ]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(quantity__gt=0),
                name="products_quantity_positive",
            ),
        ]

    # ------------------------------------------------------------------
    # Display
    # ------------------------------------------------------------------

    def __str__(self) -> str:
        return f"{self.name} x{self.quantity}"
