"""Unit tests for the product validation rules.

Covers:
- A fully valid input produces no errors.
- Each field rule fails independently and names its field.
- Errors for several fields are aggregated in one pass.
- Per-tag rules keyed by index.
- Price precision/scale counting.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from decimal import Decimal

import pytest
from freezegun import freeze_time

from modules.products.dtos import CreateProductDTO
from modules.products.validators import precision_and_scale, validate_product

pytestmark = pytest.mark.unit

NOW = datetime(2026, 6, 1, 12, 0, tzinfo=timezone.utc)


def _dto(**overrides) -> CreateProductDTO:
    defaults = {
        "sku": "ABCD1234",
        "name": "Widget",
        "price": Decimal("19.99"),
        "stock": 10,
        "category_id": 1,
        "description": "A widget",
        "discount": Decimal("10"),
        "manufacturing_date": NOW - timedelta(days=10),
        "expiry_date": NOW + timedelta(days=100),
        "tags": ["tools"],
    }
    defaults.update(overrides)
    return CreateProductDTO(**defaults)


class TestValidInput:
    def test_valid_product_has_no_errors(self):
        assert validate_product(_dto(), now=NOW) == {}

    def test_optional_fields_may_be_missing(self):
        assert validate_product(_dto(description=None, tags=None), now=NOW) == {}

    def test_boundaries_are_inclusive(self):
        dto = _dto(
            name="abc",
            stock=0,
            discount=Decimal("100"),
            price=Decimal("999999.99"),
            description="x" * 500,
            manufacturing_date=NOW,
            expiry_date=NOW + timedelta(seconds=1),
            tags=["t" * 20],
        )
        assert validate_product(dto, now=NOW) == {}

    def test_empty_tag_list_is_valid(self):
        assert validate_product(_dto(tags=[]), now=NOW) == {}


class TestSingleFieldFailures:
    @pytest.mark.parametrize(
        "overrides, field, message",
        [
            ({"sku": ""}, "sku", "SKU is required."),
            ({"sku": "abcd1234"}, "sku", "SKU must be 8 characters long"),
            ({"sku": "ABC123"}, "sku", "SKU must be 8 characters long"),
            ({"sku": "ABCD12345"}, "sku", "SKU must be 8 characters long"),
            ({"sku": "ABCD-123"}, "sku", "SKU must be 8 characters long"),
            ({"name": ""}, "name", "Product name is required."),
            ({"name": "ab"}, "name", "between 3 and 50 characters"),
            ({"name": "n" * 51}, "name", "between 3 and 50 characters"),
            ({"price": Decimal("0")}, "price", "Price must be greater than zero."),
            ({"price": Decimal("-1.00")}, "price", "Price must be greater than zero."),
            ({"price": Decimal("1.999")}, "price", "at most 8 digits in total and 2 decimals"),
            ({"price": Decimal("1234567.89")}, "price", "at most 8 digits in total and 2 decimals"),
            ({"price": Decimal("12345678")}, "price", "at most 8 digits in total and 2 decimals"),
            ({"price": Decimal("1234567.5")}, "price", "at most 8 digits in total and 2 decimals"),
            ({"stock": -1}, "stock", "Stock cannot be negative."),
            ({"category_id": 0}, "category_id", "CategoryId must be greater than zero."),
            ({"description": "d" * 501}, "description", "cannot exceed 500 characters"),
            ({"discount": Decimal("-0.01")}, "discount", "between 0 and 100 percent"),
            ({"discount": Decimal("100.01")}, "discount", "between 0 and 100 percent"),
            (
                {"manufacturing_date": NOW + timedelta(days=1)},
                "manufacturing_date",
                "cannot be in the future",
            ),
            ({"manufacturing_date": None}, "manufacturing_date", "is required"),
            ({"expiry_date": None}, "expiry_date", "is required"),
        ],
    )
    def test_rule_names_its_field(self, overrides, field, message):
        errors = validate_product(_dto(**overrides), now=NOW)
        assert list(errors) == [field]
        assert any(message in m for m in errors[field])

    def test_expiry_in_the_past(self):
        dto = _dto(
            manufacturing_date=NOW - timedelta(days=30),
            expiry_date=NOW - timedelta(days=1),
        )
        errors = validate_product(dto, now=NOW)
        assert errors == {"expiry_date": ["Expiry date must be in the future or today."]}

    def test_expiry_equal_to_manufacturing_date(self):
        errors = validate_product(_dto(manufacturing_date=NOW, expiry_date=NOW), now=NOW)
        assert errors == {"expiry_date": ["Expiry date must be after manufacturing date."]}

    def test_whitespace_only_sku_is_missing(self):
        errors = validate_product(_dto(sku="        "), now=NOW)
        assert errors["sku"][0] == "SKU is required."


class TestAggregation:
    def test_all_messages_for_a_field_are_kept(self):
        errors = validate_product(_dto(sku=""), now=NOW)
        assert errors["sku"] == [
            "SKU is required.",
            "SKU must be 8 characters long and contain only uppercase letters and digits.",
        ]

    def test_several_fields_reported_together(self):
        dto = _dto(name="x", stock=-5, category_id=-1, discount=Decimal("150"))
        errors = validate_product(dto, now=NOW)
        assert set(errors) == {"name", "stock", "category_id", "discount"}

    def test_default_dto_reports_every_required_field(self):
        errors = validate_product(CreateProductDTO(), now=NOW)
        assert set(errors) == {
            "sku",
            "name",
            "price",
            "category_id",
            "manufacturing_date",
            "expiry_date",
        }


class TestTagRules:
    def test_empty_tag(self):
        errors = validate_product(_dto(tags=["ok", "  "]), now=NOW)
        assert errors == {"tags[1]": ["Tag cannot be empty."]}

    def test_long_tag(self):
        errors = validate_product(_dto(tags=["x" * 21]), now=NOW)
        assert errors == {"tags[0]": ["Tag cannot exceed 20 characters."]}


class TestDefaultClock:
    @freeze_time("2026-06-01 12:00:00")
    def test_uses_current_time_when_now_not_given(self):
        dto = _dto(
            manufacturing_date=datetime(2026, 6, 2, tzinfo=timezone.utc),
            expiry_date=datetime(2027, 1, 1, tzinfo=timezone.utc),
        )
        errors = validate_product(dto)
        assert list(errors) == ["manufacturing_date"]


class TestPrecisionAndScale:
    @pytest.mark.parametrize(
        "value, expected",
        [
            ("123456.78", (8, 2)),
            ("10.50", (3, 1)),
            ("0.05", (2, 2)),
            ("100", (3, 0)),
            ("1200.00", (4, 0)),
            ("12345678", (8, 0)),
            ("1234567.5", (8, 1)),
        ],
    )
    def test_counts_digits_ignoring_trailing_zeros(self, value, expected):
        assert precision_and_scale(Decimal(value)) == expected
