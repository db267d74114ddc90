from __future__ import annotations

import random
from datetime import timedelta

from django.core.management.base import BaseCommand
from django.utils import timezone

from modules.products.models import Product
from modules.users.models import User


class Command(BaseCommand):
    help = "Seed database with realistic development data."

    def add_arguments(self, parser):
        parser.add_argument(
            "--products",
            type=int,
            default=20,
            help="Number of products to create (default: 20).",
        )

    def handle(self, *args, **options):
        random.seed(42)
        self.stdout.write("Seeding development data...")

        users = self._seed_users()
        products_created = self._seed_products(users, options["products"])

        self.stdout.write(
            self.style.SUCCESS(
                "Seed completed: "
                f"users={len(users)}, "
                f"products={products_created}"
            )
        )

    def _seed_users(self) -> list[User]:
        self.stdout.write("Creating users...")
        today = timezone.localdate()
        seed_users = [
            ("Ana Souza", 34, "Warehouse Manager", 2400),
            ("Bruno Lima", 27, "Stock Clerk", 800),
            ("Carla Mendes", 41, "Purchasing Lead", 3100),
            ("Daniel Costa", 23, "Stock Clerk", 150),
        ]
        users: list[User] = []
        for name, age, position, days_employed in seed_users:
            user, _ = User.objects.get_or_create(
                name=name,
                defaults={
                    "age": age,
                    "position": position,
                    "hire_date": today - timedelta(days=days_employed),
                },
            )
            users.append(user)
        return users

    def _seed_products(self, users: list[User], count: int) -> int:
        self.stdout.write("Creating products...")
        today = timezone.localdate()
        kinds = ["Widget", "Gadget", "Bolt", "Bracket", "Cable", "Sensor"]
        created = 0
        for index in range(1, count + 1):
            name = f"{random.choice(kinds)}-{index:03d}"
            _, was_created = Product.objects.get_or_create(
                name=name,
                defaults={
                    "quantity": random.randint(1, 500),
                    "entry_date": today - timedelta(days=random.randint(0, 90)),
                    "registered_by": random.choice(users),
                },
            )
            created += int(was_created)
        return created
