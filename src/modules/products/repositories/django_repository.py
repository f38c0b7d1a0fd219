"""Django ORM implementation of the Product repository.

Satisfies ``IProductRepository`` using Django's QuerySet API.
Look-ups follow the Null Object pattern: methods return ``None`` or an
empty list instead of raising, and the Service Layer decides how to
translate a missing entity into an API response.  Database errors are
not caught here.
"""

from __future__ import annotations

from typing import Iterable, List, Optional

import structlog
from django.core.exceptions import ValidationError
from django.db import transaction
from django.db.models.functions import Lower

from modules.products.models import Product, Tag
from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)


class ProductDjangoRepository(IProductRepository):
    """Concrete Product repository backed by Django ORM."""

    def _queryset(self):
        return Product.objects.prefetch_related("tags")

    def get_by_id(self, id: int | str) -> Optional[Product]:
        """Retrieve a product, with its tags, by primary key.

        Returns ``None`` for non-existent or malformed IDs.
        """
        try:
            return self._queryset().filter(pk=id).first()
        except (ValueError, TypeError, OverflowError, ValidationError):
            return None

    def list(self, tag_names: Optional[Iterable[str]] = None) -> List[Product]:
        queryset = self._queryset()
        if tag_names is not None:
            matching_tags = Tag.objects.annotate(lower_name=Lower("name")).filter(
                lower_name__in=list(tag_names)
            )
            queryset = queryset.filter(tags__in=matching_tags).distinct()
        return list(queryset)

    @transaction.atomic
    def add(self, product: Product, tags: Iterable[Tag] = ()) -> Product:
        product.save()
        tags = list(tags)
        if tags:
            product.tags.add(*tags)
        logger.info(
            "product.saved",
            product_id=product.pk,
            sku=product.sku,
            tag_count=len(tags),
        )
        return self.get_by_id(product.pk)

    def get_tag_by_name(self, name: str) -> Optional[Tag]:
        return Tag.objects.filter(name__iexact=name).first()

    @transaction.atomic
    def create_tag(self, name: str) -> Tag:
        """Upsert a tag.

        The UNIQUE constraint on ``Tag.name`` plus ``get_or_create`` means a
        concurrent request creating the same tag ends up reusing that row.
        """
        tag, created = Tag.objects.get_or_create(name=name)
        if created:
            logger.info("tag.created", tag_id=tag.pk, name=tag.name)
        return tag
