import json
from decimal import Decimal

import pytest

from storefront import create_app
from storefront.config import DEFAULT_CATALOG
from storefront.errors import CatalogError
from storefront.services.catalog import Catalog


def test_lookup_and_order(catalog):
    assert [p.id for p in catalog.list_products()] == ["A", "B"]
    assert catalog.get_product("A").price == Decimal("100")
    assert catalog.get_product("nope") is None


def test_bundled_catalog_loads():
    catalog = Catalog.from_file(DEFAULT_CATALOG)
    assert len(catalog) > 0
    assert all(p.price >= 0 for p in catalog.list_products())


@pytest.mark.parametrize("records", [
    [],
    {"id": "A"},
    [{"id": "A", "name": "x", "price": 1, "quantity": 1}],
    [{"id": "A", "name": "x", "price": -1, "quantity": 1, "image": ""}],
    [{"id": "A", "name": "x", "price": "abc", "quantity": 1, "image": ""}],
    [{"id": "A", "name": "x", "price": 1, "quantity": 1.5, "image": ""}],
    [{"id": "A", "name": "x", "price": 9.999, "quantity": 1, "image": ""}],
    [{"id": "", "name": "x", "price": 1, "quantity": 1, "image": ""}],
    [{"id": "A", "name": "x", "price": 1, "quantity": 1, "image": ""},
     {"id": "A", "name": "y", "price": 2, "quantity": 1, "image": ""}],
])
def test_malformed_catalog_rejected(records):
    with pytest.raises(CatalogError):
        Catalog.from_records(records)


def test_malformed_catalog_aborts_startup(tmp_path):
    bad = tmp_path / "products.json"
    bad.write_text(json.dumps([{"id": "A"}]))
    with pytest.raises(CatalogError):
        create_app(config={"CATALOG_PATH": str(bad)})


def test_unreadable_catalog_aborts_startup(tmp_path):
    with pytest.raises(CatalogError):
        create_app(config={"CATALOG_PATH": str(tmp_path / "missing.json")})


def test_invalid_discount_settings_abort_startup():
    with pytest.raises(ValueError):
        create_app(config={"NTH_ORDER": 0})
    with pytest.raises(ValueError):
        create_app(config={"DISCOUNT_PERCENT": "150"})
