from __future__ import annotations

from datetime import timedelta
from decimal import Decimal

from django.core.management.base import BaseCommand
from django.utils import timezone

from modules.products.dtos import CreateProductDTO
from modules.products.models import Product
from modules.products.repositories.django_repository import ProductDjangoRepository
from modules.products.services import ProductService

SEED_PRODUCTS = [
    # sku, name, price, stock, category, discount, shelf life (days), tags
    ("HNY00001", "Wildflower Honey", "12.50", 40, 1, "0", 540, ["sweet", "local"]),
    ("OIL00002", "Extra Virgin Olive Oil", "18.90", 25, 1, "10", 720, ["oil", "imported"]),
    ("CHS00003", "Aged Cheddar", "9.75", 12, 2, "0", 90, ["dairy", "local"]),
    ("YGT00004", "Greek Yogurt", "3.20", 60, 2, "5", 21, ["dairy", "fresh"]),
    ("BRD00005", "Sourdough Loaf", "4.80", 15, 3, "0", 5, ["bakery", "fresh"]),
    ("CFE00006", "Single Origin Coffee", "14.00", 30, 4, "15", 365, ["imported"]),
]


class Command(BaseCommand):
    help = "Seed the catalog with sample products and tags."

    def handle(self, *args, **options):
        self.stdout.write("Seeding catalog...")
        service = ProductService(repository=ProductDjangoRepository())
        now = timezone.now()
        created = 0

        for sku, name, price, stock, category, discount, days, tags in SEED_PRODUCTS:
            if Product.objects.filter(sku=sku).exists():
                continue
            service.create_product(
                CreateProductDTO(
                    sku=sku,
                    name=name,
                    price=Decimal(price),
                    stock=stock,
                    category_id=category,
                    discount=Decimal(discount),
                    manufacturing_date=now - timedelta(days=1),
                    expiry_date=now + timedelta(days=days),
                    tags=tags,
                ),
                now=now,
            )
            created += 1

        self.stdout.write(self.style.SUCCESS(f"Seed completed: products={created}"))
