# storefront/services/order_journal.py
import logging
from decimal import Decimal
from typing import NamedTuple, Sequence

from ..model import Order
from .storage import StorageBackend

logger = logging.getLogger(__name__)


class JournalTotals(NamedTuple):
    total_orders: int
    total_purchase_amount: Decimal
    total_discount_amount: Decimal


class OrderJournal:
    """Append-only record of completed orders."""

    def __init__(self, backend: StorageBackend):
        self.backend = backend

    def append(self, order: Order) -> None:
        self.backend.append_order(order)
        logger.info("order %s appended (total=%s)", order.id, order.total_amount)

    def count(self) -> int:
        # always read through; discount eligibility depends on the live value
        return self.backend.count_orders()

    def list(self) -> Sequence[Order]:
        return self.backend.list_orders()

    def aggregate(self) -> JournalTotals:
        orders = self.backend.list_orders()
        return JournalTotals(
            total_orders=len(orders),
            total_purchase_amount=sum((o.total_amount for o in orders), Decimal("0")),
            total_discount_amount=sum((o.discount_amount for o in orders), Decimal("0")),
        )
