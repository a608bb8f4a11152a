from __future__ import annotations

from decimal import Decimal

from django.core.management.base import BaseCommand

from modules.products.commands import CreateProductCommand
from modules.products.services import create_mediator

CATALOG = [
    ('Monitor 27"', Decimal("1299.90")),
    ("Mechanical Keyboard", Decimal("399.90")),
    ("Gaming Mouse", Decimal("249.90")),
    ('Notebook 14"', Decimal("3999.00")),
    ("Headset", Decimal("299.90")),
    ("Office Desk", Decimal("899.00")),
    ("Ergonomic Chair", Decimal("1499.00")),
    ("Bookshelf", Decimal("699.00")),
    ("A4 Paper", Decimal("29.90")),
    ("Blue Pen", Decimal("4.90")),
    ("Notebook Stand", Decimal("149.90")),
    ("LED Lamp", Decimal("59.90")),
]


class Command(BaseCommand):
    help = "Seed the products table through the request pipeline."

    def add_arguments(self, parser):
        parser.add_argument(
            "--count",
            type=int,
            default=len(CATALOG),
            help="Number of catalog entries to create (default: all).",
        )

    def handle(self, *args, **options):
        count = max(0, min(options["count"], len(CATALOG)))
        self.stdout.write(f"Creating {count} products...")

        created = 0
        for name, price in CATALOG[:count]:
            # One unit of work per product, like one HTTP request each.
            result = create_mediator().send(CreateProductCommand(name=name, price=price))
            if result.is_err:
                self.stdout.write(self.style.WARNING(f"Skipped {name}: {result.error}"))
                continue
            created += 1

        self.stdout.write(self.style.SUCCESS(f"Seed completed: products={created}"))
