"""Product DRF serializers for API output.

Input is parsed into ``CreateProductDTO`` and validated by the Service
Layer; these serializers only shape the response.
"""

from __future__ import annotations

from rest_framework import serializers

from modules.products.models import Product


class ProductSerializer(serializers.ModelSerializer):
    """Read serializer for the Product resource.

    Tags are exposed as a list of names; tag ids are never returned.
    """

    tags = serializers.SlugRelatedField(many=True, read_only=True, slug_field="name")

    class Meta:
        model = Product
        fields = [
            "id",
            "sku",
            "name",
            "price",
            "stock",
            "category_id",
            "description",
            "discount",
            "manufacturing_date",
            "expiry_date",
            "tags",
        ]
        read_only_fields = fields
