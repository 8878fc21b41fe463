# storefront/services/catalog.py
import json
import logging
from decimal import InvalidOperation
from typing import Iterable, Optional, Tuple

from ..errors import CatalogError
from ..model import Product
from ..utils.money import D, round_money

logger = logging.getLogger(__name__)

_REQUIRED = ("id", "name", "price", "quantity", "image")


def _product_from_record(idx: int, row) -> Product:
    if not isinstance(row, dict):
        raise CatalogError(f"catalog entry #{idx} is not an object")
    missing = [k for k in _REQUIRED if k not in row]
    if missing:
        raise CatalogError(f"catalog entry #{idx} missing: {', '.join(missing)}")

    pid = row["id"]
    if not isinstance(pid, str) or not pid.strip():
        raise CatalogError(f"catalog entry #{idx} has an invalid id")

    if row["price"] is None or isinstance(row["price"], bool):
        raise CatalogError(f"product {pid}: price must be a number")
    try:
        price = D(row["price"])
    except (InvalidOperation, ValueError):
        raise CatalogError(f"product {pid}: price must be a number")
    if not price.is_finite() or price < 0:
        raise CatalogError(f"product {pid}: price must be >= 0")
    if round_money(price) != price:
        raise CatalogError(f"product {pid}: price has more than 2 decimal places")

    qty = row["quantity"]
    if isinstance(qty, bool) or not isinstance(qty, int) or qty < 0:
        raise CatalogError(f"product {pid}: quantity must be an integer >= 0")

    return Product(
        id=pid,
        name=str(row["name"]),
        price=price,
        quantity=qty,
        image=str(row["image"]),
    )


class Catalog:
    """Read-only product list, loaded once at startup."""

    def __init__(self, products: Iterable[Product]):
        self._products: Tuple[Product, ...] = tuple(products)
        self._by_id = {p.id: p for p in self._products}
        if len(self._by_id) != len(self._products):
            raise CatalogError("catalog contains duplicate product ids")

    @classmethod
    def from_records(cls, records) -> "Catalog":
        if not isinstance(records, list) or not records:
            raise CatalogError("catalog must be a non-empty list of products")
        return cls(_product_from_record(i, r) for i, r in enumerate(records))

    @classmethod
    def from_file(cls, path: str) -> "Catalog":
        try:
            with open(path, encoding="utf-8") as fh:
                records = json.load(fh)
        except (OSError, json.JSONDecodeError) as e:
            raise CatalogError(f"cannot read catalog {path}: {e}") from e
        catalog = cls.from_records(records)
        logger.info("loaded %d products from %s", len(catalog), path)
        return catalog

    def __len__(self):
        return len(self._products)

    def list_products(self) -> Tuple[Product, ...]:
        return self._products

    def get_product(self, product_id: str) -> Optional[Product]:
        return self._by_id.get(product_id)
