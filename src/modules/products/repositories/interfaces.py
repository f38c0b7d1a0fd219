"""Product repository interface.

Extends ``IRepository[Product]`` with the tag look-ups needed to resolve
tag names on product creation and to filter the catalog by tag.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Iterable, List, Optional

from modules.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from modules.products.models import Product, Tag


class IProductRepository(IRepository["Product"]):
    """Repository contract for the Product aggregate and its tags."""

    @abstractmethod
    def list(self, tag_names: Optional[Iterable[str]] = None) -> List[Product]:
        """List products, keeping those with at least one of ``tag_names``.

        ``tag_names`` must already be normalised (trimmed, lower-case).
        ``None`` disables the filter.
        """

    @abstractmethod
    def add(self, product: Product, tags: Iterable[Tag] = ()) -> Product:
        """Insert a new product and attach ``tags`` to it.

        Returns the stored product as it reads back from the database.
        """

    @abstractmethod
    def get_tag_by_name(self, name: str) -> Optional[Tag]:
        """Retrieve a tag by case-insensitive name, or ``None``."""

    @abstractmethod
    def create_tag(self, name: str) -> Tag:
        """Create a tag named ``name``, reusing the row if it already exists."""
