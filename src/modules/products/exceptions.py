"""Product domain exceptions.

Raised by the Service Layer when business rules are violated.
The API layer (Views) catches these and translates them into
appropriate HTTP responses.
"""

from __future__ import annotations

from typing import Dict, List


class ProductNotFound(Exception):
    """The requested product does not exist."""


class InvalidProduct(Exception):
    """The creation input broke one or more validation rules.

    ``errors`` maps each failing field to its messages.
    """

    def __init__(self, errors: Dict[str, List[str]]) -> None:
        super().__init__(f"Invalid product: {', '.join(errors)}")
        self.errors = errors
