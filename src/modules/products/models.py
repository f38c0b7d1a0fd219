"""Catalog models: ``Product`` and ``Tag`` joined many-to-many.

Field-level business rules (SKU format, name length, price precision,
date ordering, ...) are checked by ``modules.products.validators`` when a
product is created; the storage layer only enforces shape.  The one
storage-level rule is the UNIQUE constraint on ``Tag.name``, which makes
tag resolution an idempotent upsert.
"""

from __future__ import annotations

from django.db import models

from modules.core.models import TimestampedModel


class Tag(TimestampedModel):
    """Free-form label shared between products.

    ``name`` is stored normalised (trimmed, lower-case).
    """

    name = models.CharField(max_length=20, unique=True)

    class Meta:
        db_table = "tags"
        ordering = ["name"]

    def __str__(self) -> str:
        return self.name


class Product(TimestampedModel):
    """Catalog product.

    Products are created once and never updated or deleted through the
    API.  ``tags`` is a plain join table with no payload.
    """

    sku = models.CharField(max_length=8)
    name = models.CharField(max_length=50)
    price = models.DecimalField(max_digits=8, decimal_places=2)
    stock = models.PositiveIntegerField(default=0)
    category_id = models.PositiveIntegerField()
    description = models.CharField(max_length=500, null=True, blank=True)  # noqa: DJ001
    discount = models.DecimalField(max_digits=5, decimal_places=2, default=0)
    manufacturing_date = models.DateTimeField()
    expiry_date = models.DateTimeField()
    tags = models.ManyToManyField(
        Tag,
        related_name="products",
        blank=True,
        db_table="product_tags",
    )

    class Meta:
        db_table = "products"
        ordering = ["id"]
        indexes = [
            models.Index(fields=["sku"], name="products_sku_idx"),
        ]

    def __str__(self) -> str:
        return f"{self.sku} - {self.name}"
