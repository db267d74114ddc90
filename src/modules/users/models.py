"""Employee (User) model.

Business rules implemented:
- User name must be unique in the system (DB unique constraint).
- Age must be a positive integer.
- Hire date cannot be in the future (enforced at service layer).
"""

from __future__ import annotations

from django.db import models

from modules.core.models import BaseModel


class User(BaseModel):
    """Employee who registers and modifies inventory products.

    Not related to ``django.contrib.auth``: identity here is only used
    to attribute products and to check delete ownership.
    """

    name = models.CharField(max_length=255, unique=True)
    age = models.PositiveIntegerField()
    position = models.CharField(max_length=255)
    hire_date = models.DateField()

    class Meta:
        db_table = "users"
        ordering = ["created_at"]
        constraints = [
            models.CheckConstraint(
                condition=models.Q(age__gt=0),
                name="users_age_positive",
            ),
        ]

    def __str__(self) -> str:
        return f"{self.name} ({self.position})"
