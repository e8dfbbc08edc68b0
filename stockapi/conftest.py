# stockapi/conftest.py
"""
Pytest configuration and shared fixtures.

Tests are co-located with implementation files using the *_test.py suffix.
pytest-django wraps every test marked with django_db in a transaction that is
rolled back afterwards, so tests never see each other's rows.
"""

from decimal import Decimal

import pytest
from rest_framework.test import APIClient

# =============================================================================
# Client Fixtures
# =============================================================================


@pytest.fixture
def api_client():
    """Provide a DRF test client."""
    return APIClient()


# =============================================================================
# Context Fixtures
# =============================================================================


@pytest.fixture
def stock_context(db):
    """Provide a StockContext bound to the default database."""
    from stocks.context import StockContext

    return StockContext()


# =============================================================================
# Seed Data Fixtures
# =============================================================================


@pytest.fixture
def make_stock(db):
    """Factory for stocks with sensible defaults."""
    from stocks.models import Stock

    def _make_stock(**overrides):
        data = {
            "symbol": "TEST",
            "company_name": "Test Company",
            "purchase": Decimal("10.00"),
            "last_div": Decimal("0.10"),
            "industry": "Testing",
            "market_cap": 1_000,
        }
        data.update(overrides)
        return Stock.objects.create(**data)

    return _make_stock


@pytest.fixture
def make_comment(db):
    """Factory for comments, optionally attached to a stock."""
    from comments.models import Comment

    def _make_comment(stock=None):
        return Comment.objects.create(stock=stock)

    return _make_comment


@pytest.fixture
def sample_stock(make_stock):
    """A single ABC stock with id 1."""
    return make_stock(
        id=1,
        symbol="ABC",
        company_name="Acme",
        purchase=Decimal("12.50"),
        last_div=Decimal("0.30"),
        industry="Tech",
        market_cap=1_000_000,
    )


@pytest.fixture
def sample_stocks(make_stock) -> list:
    """Create multiple test stocks."""
    stocks = [
        {"symbol": "TEST1", "company_name": "Test Stock 1", "industry": "Tech"},
        {"symbol": "TEST2", "company_name": "Test Stock 2", "industry": "Energy"},
        {"symbol": "TEST3", "company_name": "Test Stock 3", "industry": "Healthcare"},
    ]

    return [make_stock(**s) for s in stocks]
