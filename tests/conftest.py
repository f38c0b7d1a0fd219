from datetime import datetime, timedelta, timezone

import pytest

from rest_framework.test import APIClient


@pytest.fixture(autouse=True)
def _use_db(db):
    """Automatically use the test database for all tests."""


@pytest.fixture()
def api_client():
    """DRF APIClient for testing API endpoints."""
    return APIClient()


@pytest.fixture()
def api_client_with_correlation(api_client):
    """APIClient pre-configured with a known correlation ID header."""
    cid = "test-correlation-id-fixture"
    api_client.defaults["HTTP_X_REQUEST_ID"] = cid
    return api_client, cid


@pytest.fixture()
def product_payload():
    """A valid JSON body for POST /api/products (no tags)."""
    now = datetime.now(timezone.utc)
    return {
        "sku": "ABCD1234",
        "name": "Organic Honey",
        "price": "12.50",
        "stock": 40,
        "category_id": 3,
        "description": "Raw wildflower honey",
        "discount": "5.00",
        "manufacturing_date": (now - timedelta(days=30)).isoformat(),
        "expiry_date": (now + timedelta(days=365)).isoformat(),
    }
