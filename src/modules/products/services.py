"""Product service layer (Use Cases).

Orchestrates validation, tag resolution and persistence for the Product
aggregate, delegating storage to the injected ``IProductRepository``.
"""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, Iterable, List, Optional

import structlog
from django.db import transaction

from modules.products.exceptions import InvalidProduct, ProductNotFound
from modules.products.models import Product, Tag
from modules.products.validators import validate_product

if TYPE_CHECKING:
    from modules.products.dtos import CreateProductDTO
    from modules.products.repositories.interfaces import IProductRepository

logger = structlog.get_logger(__name__)


def normalize_tag(name: str) -> str:
    return name.strip().lower()


def unique_tag_names(names: Iterable[str]) -> List[str]:
    """Normalise ``names`` and drop duplicates, keeping first-seen order."""
    seen: dict[str, None] = {}
    for name in names:
        seen.setdefault(normalize_tag(name), None)
    return list(seen)


def parse_tag_filter(raw: Optional[str]) -> Optional[List[str]]:
    """Turn a ``tags`` query string into normalised tag names.

    ``"Foo, bar"`` becomes ``["foo", "bar"]``.  ``None`` or an empty
    string means "no filter" and returns ``None``.
    """
    if not raw:
        return None
    return unique_tag_names(raw.split(","))


class ProductService:
    """Application service for Product use-cases.

    Receives an ``IProductRepository`` via constructor injection (DIP).
    """

    def __init__(self, repository: IProductRepository) -> None:
        self._repo = repository

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    @transaction.atomic
    def create_product(
        self, dto: CreateProductDTO, now: Optional[datetime] = None
    ) -> Product:
        """Validate ``dto``, resolve its tags and store a new product.

        Raises:
            InvalidProduct: if any validation rule fails.
        """
        log = logger.bind(sku=dto.sku)

        errors = validate_product(dto, now=now)
        if errors:
            log.warning("product.validation_failed", fields=sorted(errors))
            raise InvalidProduct(errors)

        product = Product(
            sku=dto.sku,
            name=dto.name,
            price=dto.price,
            stock=dto.stock,
            category_id=dto.category_id,
            description=dto.description,
            discount=dto.discount,
            manufacturing_date=dto.manufacturing_date,
            expiry_date=dto.expiry_date,
        )
        tags = self._resolve_tags(dto.tags or [])

        product = self._repo.add(product, tags)
        log.info("product.created", product_id=product.pk, tags=[t.name for t in tags])
        return product

    def _resolve_tags(self, names: Iterable[str]) -> List[Tag]:
        """Reuse an existing tag for each name, creating the missing ones."""
        return [
            self._repo.get_tag_by_name(name) or self._repo.create_tag(name)
            for name in unique_tag_names(names)
        ]

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def list_products(self, tags: Optional[str] = None) -> List[Product]:
        """Return every product, or those carrying any of the ``tags``."""
        tag_names = parse_tag_filter(tags)
        if tag_names is not None:
            logger.info("product.filtered_by_tags", tags=tag_names)
        return self._repo.list(tag_names)

    def get_product(self, id: int | str) -> Product:
        """Retrieve a single product by ID.

        Raises:
            ProductNotFound: if the product does not exist.
        """
        product = self._repo.get_by_id(id)
        if not product:
            raise ProductNotFound(f"Product {id} not found.")
        logger.info("product.retrieved", product_id=product.pk)
        return product
