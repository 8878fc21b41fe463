"""Shared fixtures: a two-product store (A=100, B=50) with N=3 and 10% off."""

import pytest

from storefront import create_app
from storefront.services.catalog import Catalog
from storefront.services.store import Store

CATALOG = [
    {"id": "A", "name": "Alpha", "price": 100, "quantity": 5, "image": "https://img.test/a.png"},
    {"id": "B", "name": "Beta", "price": 50, "quantity": 0, "image": "https://img.test/b.png"},
]


@pytest.fixture
def catalog() -> Catalog:
    return Catalog.from_records(CATALOG)


@pytest.fixture
def store(catalog) -> Store:
    return Store(catalog, nth_order=3, discount_percent=10)


@pytest.fixture
def app(store):
    app = create_app(config={"TESTING": True}, store=store)
    yield app


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def place_order(store):
    """Check out one A for a throwaway session."""
    counter = {"n": 0}

    def _place(discount_code=None, session_id=None):
        counter["n"] += 1
        sid = session_id or f"filler-{counter['n']}"
        store.add_to_cart(sid, "A", 1)
        return store.checkout(sid, discount_code=discount_code)

    return _place
