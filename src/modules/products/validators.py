"""Creation-time validation rules for products.

Rules are an explicit ordered table of ``(field, check, message)``
entries.  Every rule is evaluated and failures are aggregated into a
``field -> [messages]`` mapping, in rule order.  No I/O happens here.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime, timezone
from decimal import Decimal
from typing import Callable, Dict, List, Optional, Sequence

from modules.products.dtos import CreateProductDTO

SKU_PATTERN = re.compile(r"[A-Z0-9]{8}")

NAME_MIN_LENGTH = 3
NAME_MAX_LENGTH = 50
PRICE_MAX_DIGITS = 8
PRICE_MAX_DECIMALS = 2
DESCRIPTION_MAX_LENGTH = 500
DISCOUNT_MIN = Decimal("0")
DISCOUNT_MAX = Decimal("100")
TAG_MAX_LENGTH = 20

ValidationErrors = Dict[str, List[str]]


@dataclass(frozen=True)
class Rule:
    """A single check: ``check(dto, now)`` returns ``True`` when valid."""

    field: str
    check: Callable[[CreateProductDTO, datetime], bool]
    message: str


def _present(value: Optional[str]) -> bool:
    return bool(value and value.strip())


def precision_and_scale(value: Decimal) -> tuple[int, int]:
    """Return ``(total digits, decimal digits)`` ignoring trailing zeros.

    Leading zeros of a purely fractional value are not counted, so
    ``0.05`` is ``(2, 2)`` and ``1200.50`` is ``(5, 1)``.
    """
    _, digits, exponent = value.normalize().as_tuple()
    if exponent >= 0:
        return len(digits) + exponent, 0
    scale = -exponent
    integral = max(len(digits) - scale, 0)
    return integral + scale, scale


def _price_fits(value: Decimal) -> bool:
    if not value.is_finite():
        return False
    precision, scale = precision_and_scale(value)
    return (
        precision <= PRICE_MAX_DIGITS
        and scale <= PRICE_MAX_DECIMALS
        and precision - scale <= PRICE_MAX_DIGITS - PRICE_MAX_DECIMALS
    )


def _manufactured_in_past(dto: CreateProductDTO, now: datetime) -> bool:
    return dto.manufacturing_date is None or dto.manufacturing_date <= now


def _expires_after_manufacture(dto: CreateProductDTO, now: datetime) -> bool:
    if dto.expiry_date is None or dto.manufacturing_date is None:
        return True
    return dto.expiry_date > dto.manufacturing_date


PRODUCT_RULES: Sequence[Rule] = (
    Rule("sku", lambda p, now: _present(p.sku), "SKU is required."),
    Rule(
        "sku",
        lambda p, now: SKU_PATTERN.fullmatch(p.sku) is not None,
        "SKU must be 8 characters long and contain only uppercase letters and digits.",
    ),
    Rule("name", lambda p, now: _present(p.name), "Product name is required."),
    Rule(
        "name",
        lambda p, now: NAME_MIN_LENGTH <= len(p.name) <= NAME_MAX_LENGTH,
        "Product name must be between 3 and 50 characters.",
    ),
    Rule("price", lambda p, now: p.price > 0, "Price must be greater than zero."),
    Rule(
        "price",
        lambda p, now: _price_fits(p.price),
        "Price must have at most 8 digits in total and 2 decimals.",
    ),
    Rule("stock", lambda p, now: p.stock >= 0, "Stock cannot be negative."),
    Rule(
        "category_id",
        lambda p, now: p.category_id > 0,
        "CategoryId must be greater than zero.",
    ),
    Rule(
        "description",
        lambda p, now: not p.description or len(p.description) <= DESCRIPTION_MAX_LENGTH,
        "Description cannot exceed 500 characters.",
    ),
    Rule(
        "discount",
        lambda p, now: DISCOUNT_MIN <= p.discount <= DISCOUNT_MAX,
        "Discount must be between 0 and 100 percent.",
    ),
    Rule(
        "manufacturing_date",
        lambda p, now: p.manufacturing_date is not None,
        "Manufacturing date is required.",
    ),
    Rule(
        "manufacturing_date",
        _manufactured_in_past,
        "Manufacturing date cannot be in the future.",
    ),
    Rule(
        "expiry_date",
        lambda p, now: p.expiry_date is not None,
        "Expiry date is required.",
    ),
    Rule(
        "expiry_date",
        lambda p, now: p.expiry_date is None or p.expiry_date >= now,
        "Expiry date must be in the future or today.",
    ),
    Rule(
        "expiry_date",
        _expires_after_manufacture,
        "Expiry date must be after manufacturing date.",
    ),
)

TAG_RULES: Sequence[tuple[Callable[[str], bool], str]] = (
    (_present, "Tag cannot be empty."),
    (lambda tag: len(tag) <= TAG_MAX_LENGTH, "Tag cannot exceed 20 characters."),
)


def validate_product(
    dto: CreateProductDTO, now: Optional[datetime] = None
) -> ValidationErrors:
    """Evaluate every rule against ``dto``.

    Returns an empty mapping when the input is valid.
    """
    now = now or datetime.now(timezone.utc)
    errors: ValidationErrors = {}

    for rule in PRODUCT_RULES:
        if not rule.check(dto, now):
            errors.setdefault(rule.field, []).append(rule.message)

    for index, tag in enumerate(dto.tags or ()):
        for check, message in TAG_RULES:
            if not check(tag):
                errors.setdefault(f"tags[{index}]", []).append(message)

    return errors
