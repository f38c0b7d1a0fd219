"""Product DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.
These are the contracts between the API layer (DRF views) and the
Service layer.  DTOs are immutable (``frozen=True``).

The DTO only coerces types.  Business rules are checked by
``modules.products.validators`` so that every failing field is reported
at once.  Scalars default to an "unset" value so that a missing field is
reported by the matching rule instead of a bare "field required".
"""

from __future__ import annotations

from datetime import datetime, timezone
from decimal import Decimal
from typing import Annotated, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

# Range of the integer columns backing ``stock`` and ``category_id``.
INT32_MIN = -2_147_483_648
INT32_MAX = 2_147_483_647

Int32 = Annotated[int, Field(ge=INT32_MIN, le=INT32_MAX)]


class CreateProductDTO(BaseModel):
    """Immutable DTO for product creation requests."""

    model_config = ConfigDict(frozen=True)

    sku: str = ""
    name: str = ""
    price: Decimal = Decimal("0")
    stock: Int32 = 0
    category_id: Int32 = 0
    description: Optional[str] = None
    # Stored with two decimals; extra digits are rounded by the column.
    discount: Decimal = Decimal("0")
    manufacturing_date: Optional[datetime] = None
    expiry_date: Optional[datetime] = None
    tags: Optional[List[str]] = None

    @field_validator("manufacturing_date", "expiry_date")
    @classmethod
    def assume_utc_when_naive(cls, v: Optional[datetime]) -> Optional[datetime]:
        if v is not None and v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v


def _field_key(loc: tuple) -> str:
    """Render a pydantic error location the way rule errors are keyed.

    ``("tags", 1)`` becomes ``"tags[1]"``; an empty location (the body
    itself is malformed) becomes ``"non_field_errors"``.
    """
    if not loc:
        return "non_field_errors"
    key = str(loc[0])
    for part in loc[1:]:
        key += f"[{part}]" if isinstance(part, int) else f".{part}"
    return key


def errors_from_pydantic(exc: ValidationError) -> Dict[str, List[str]]:
    """Flatten a pydantic ``ValidationError`` into ``field -> [messages]``."""
    errors: Dict[str, List[str]] = {}
    for error in exc.errors():
        errors.setdefault(_field_key(error["loc"]), []).append(error["msg"])
    return errors
