# storefront/services/discount_service.py
"""
Every-Nth-order discount codes.

A code is bound to an order *slot*: the 1-based position the next order
will take in the journal. It can be minted only when that slot is a
multiple of N, and redeemed only while the slot is still the next one.
Once any order lands in the slot the code is dead, used or not.
"""
import logging
import secrets
import string
from decimal import Decimal
from typing import Optional, Sequence

from ..model import DiscountCode, DiscountCheck
from ..utils.money import D, round_money, Money
from .order_journal import OrderJournal
from .storage import StorageBackend

logger = logging.getLogger(__name__)

CODE_ALPHABET = string.ascii_uppercase + string.digits
CODE_SUFFIX_LEN = 7

REASON_NOT_FOUND = "Discount code not found"
REASON_USED = "Discount code already used"
REASON_SLOT_PASSED = "Discount code expired: its order slot has passed"


class DiscountEngine:

    def __init__(self, backend: StorageBackend, journal: OrderJournal,
                 nth_order: int = 3, percent=10):
        nth_order = int(nth_order)
        percent = D(percent)
        if nth_order < 1:
            raise ValueError("nth_order must be >= 1")
        if percent <= 0 or percent > 100:
            raise ValueError("discount percent must be > 0 and <= 100")
        self.backend = backend
        self.journal = journal
        self.nth_order = nth_order
        self.percent = percent

    @property
    def rate(self) -> Decimal:
        return self.percent / Decimal("100")

    def next_order_index(self) -> int:
        return self.journal.count() + 1

    def is_eligible(self, order_index: int) -> bool:
        return order_index % self.nth_order == 0

    def _new_code_string(self, slot: int) -> str:
        while True:
            suffix = "".join(secrets.choice(CODE_ALPHABET) for _ in range(CODE_SUFFIX_LEN))
            code = f"DISCOUNT_{slot}_{suffix}"
            if self.backend.find_code(code) is None:
                return code

    def generate(self) -> Optional[str]:
        """Code for the pending slot, or None when the next order is not an Nth one."""
        slot = self.next_order_index()
        if not self.is_eligible(slot):
            return None

        pending = next(
            (c for c in self.backend.list_codes()
             if c.order_index_condition == slot and not c.is_used),
            None,
        )
        if pending:
            logger.debug("re-issuing %s for slot %d", pending.code, slot)
            return pending.code

        code = DiscountCode(code=self._new_code_string(slot), order_index_condition=slot)
        self.backend.append_code(code)
        logger.info("minted discount code %s for slot %d", code.code, slot)
        return code.code

    def validate(self, code: str) -> DiscountCheck:
        found = self.backend.find_code(code)
        if found is None:
            return DiscountCheck(False, REASON_NOT_FOUND)
        if found.is_used:
            return DiscountCheck(False, REASON_USED, found)
        if found.order_index_condition != self.next_order_index():
            return DiscountCheck(False, REASON_SLOT_PASSED, found)
        return DiscountCheck(True, None, found)

    def mark_used(self, code: str) -> None:
        # no-op for unknown or already used codes so retries stay harmless
        found = self.backend.find_code(code)
        if found is None or found.is_used:
            return
        self.backend.save_code(found.used())
        logger.info("discount code %s redeemed", code)

    def discount_for(self, subtotal: Money) -> Money:
        return round_money(D(subtotal) * self.rate)

    def list_codes(self) -> Sequence[DiscountCode]:
        return self.backend.list_codes()
