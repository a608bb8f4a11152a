from __future__ import annotations

from decimal import Decimal
from io import StringIO

import pytest
from django.core.management import call_command

from modules.products.management.commands.seed_products import CATALOG
from modules.products.models import Product

pytestmark = pytest.mark.integration


class TestSeedProductsCommand:
    def test_seeds_whole_catalog(self):
        out = StringIO()
        call_command("seed_products", stdout=out)

        assert Product.objects.count() == len(CATALOG)
        assert f"products={len(CATALOG)}" in out.getvalue()
        assert Product.objects.filter(updated_at__isnull=True).count() == len(CATALOG)

    def test_count_option(self):
        call_command("seed_products", count=3, stdout=StringIO())
        assert Product.objects.count() == 3

    def test_invalid_entries_are_reported(self, monkeypatch):
        monkeypatch.setattr(
            "modules.products.management.commands.seed_products.CATALOG",
            [("", Decimal("1.00")), ("Valid", Decimal("2.00"))],
        )
        out = StringIO()
        call_command("seed_products", stdout=out)

        assert Product.objects.count() == 1
        assert "Product name is required." in out.getvalue()
