# storefront/services/store.py
from __future__ import annotations

import logging
import threading
import uuid
from datetime import datetime, timezone
from decimal import Decimal
from typing import List, Optional, Sequence

from ..errors import BusinessRuleViolation, InvalidInput, NotFound
from ..model import CartLine, DiscountCheck, Order, OrderDiscount, OrderLine, Product
from .cart_service import CartLedger
from .catalog import Catalog
from .discount_service import DiscountEngine
from .order_journal import JournalTotals, OrderJournal
from .storage import MemoryBackend, StorageBackend

logger = logging.getLogger(__name__)


def _gen_order_id(slot: int) -> str:
    return f"ORD-{slot:06d}-{uuid.uuid4().hex[:8]}"


class Store:
    """
    The one object the HTTP layer talks to.

    Owns the catalog, cart ledger, discount engine and order journal for a
    single app. All mutating calls and every discount decision run under
    one lock, so a discount slot can be redeemed at most once even when
    requests are served from several threads.
    """

    def __init__(self, catalog: Catalog, backend: Optional[StorageBackend] = None,
                 nth_order: int = 3, discount_percent=10):
        self.catalog = catalog
        self.backend = backend if backend is not None else MemoryBackend()
        self.carts = CartLedger(self.backend)
        self.orders = OrderJournal(self.backend)
        self.discounts = DiscountEngine(self.backend, self.orders,
                                        nth_order=nth_order, percent=discount_percent)
        self._lock = threading.RLock()

    @classmethod
    def from_config(cls, config) -> "Store":
        return cls(
            Catalog.from_file(config["CATALOG_PATH"]),
            nth_order=config["NTH_ORDER"],
            discount_percent=config["DISCOUNT_PERCENT"],
        )

    @property
    def discount_percentage(self) -> float:
        return float(self.discounts.percent)

    # ---- catalog ----
    def list_products(self) -> Sequence[Product]:
        return self.catalog.list_products()

    def get_product(self, product_id: str) -> Product:
        product = self.catalog.get_product(product_id)
        if product is None:
            raise NotFound("Product not found")
        return product

    # ---- cart ----
    def get_cart(self, session_id: str) -> List[CartLine]:
        with self._lock:
            return list(self.carts.get_lines(session_id))

    def add_to_cart(self, session_id: str, product_id: str, quantity: int) -> List[CartLine]:
        if not product_id:
            raise InvalidInput("productId is required")
        if quantity < 1:
            raise InvalidInput("quantity must be a positive integer")
        self.get_product(product_id)
        with self._lock:
            return list(self.carts.add_line(session_id, product_id, quantity))

    # ---- discounts ----
    def generate_discount_code(self) -> Optional[str]:
        with self._lock:
            return self.discounts.generate()

    def validate_discount_code(self, code: str) -> DiscountCheck:
        with self._lock:
            check = self.discounts.validate(code)
        if not check.valid:
            logger.info("discount code %s rejected: %s", code, check.reason)
        return check

    # ---- checkout ----
    def _price_lines(self, lines: Sequence[CartLine]):
        priced = []
        for line in lines:
            product = self.catalog.get_product(line.product_id)
            if product is None:
                raise NotFound(f"Product {line.product_id} is no longer available")
            priced.append(OrderLine(product_id=product.id, price=product.price,
                                    quantity=line.quantity))
        subtotal = sum((ln.line_total for ln in priced), Decimal("0"))
        return tuple(priced), subtotal

    def checkout(self, session_id: str, discount_code: Optional[str] = None) -> Order:
        """
        All-or-nothing: any rejection leaves cart, journal and codes untouched.
        The code is burned only after the order is in the journal.
        """
        with self._lock:
            lines = self.carts.get_lines(session_id)
            if not lines:
                raise BusinessRuleViolation("Cart is empty")

            items, subtotal = self._price_lines(lines)

            discount = None
            if discount_code:
                check = self.discounts.validate(discount_code)
                if not check.valid:
                    logger.info("checkout rejected for %s: %s", session_id, check.reason)
                    raise BusinessRuleViolation(check.reason)
                discount = OrderDiscount(code=discount_code,
                                         amount=self.discounts.discount_for(subtotal))

            total = subtotal - discount.amount if discount else subtotal
            slot = self.orders.count() + 1
            order = Order(
                id=_gen_order_id(slot),
                session_id=session_id,
                items=items,
                subtotal_amount=subtotal,
                total_amount=total,
                created_at=datetime.now(timezone.utc),
                discount=discount,
            )
            self.orders.append(order)
            if discount:
                self.discounts.mark_used(discount.code)
            self.carts.clear(session_id)
            return order

    # ---- admin ----
    def list_orders(self) -> Sequence[Order]:
        with self._lock:
            return self.orders.list()

    def stats(self):
        with self._lock:
            totals: JournalTotals = self.orders.aggregate()
            return {
                "totals": totals,
                "discount_codes": self.discounts.list_codes(),
                "next_order_index": self.discounts.next_order_index(),
                "nth_order": self.discounts.nth_order,
            }
