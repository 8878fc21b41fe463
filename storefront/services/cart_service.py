# storefront/services/cart_service.py
import logging
from typing import List

from ..model import CartLine
from .storage import StorageBackend

logger = logging.getLogger(__name__)


class CartLedger:
    """
    Per-session product -> quantity lines.

    Product existence and quantity > 0 are checked by the caller; the
    ledger only merges and stores. No stock check is done.
    """

    def __init__(self, backend: StorageBackend):
        self.backend = backend

    def get_lines(self, session_id: str) -> List[CartLine]:
        lines = self.backend.get_cart_lines(session_id)
        if lines is None:
            # unseen session -> fresh empty cart
            lines = []
            self.backend.set_cart_lines(session_id, lines)
        return lines

    def add_line(self, session_id: str, product_id: str, quantity: int) -> List[CartLine]:
        lines = self.get_lines(session_id)
        idx = next((i for i, ln in enumerate(lines) if ln.product_id == product_id), None)
        if idx is None:
            lines.append(CartLine(product_id=product_id, quantity=quantity))
        else:
            lines[idx] = lines[idx].merged(quantity)
        self.backend.set_cart_lines(session_id, lines)
        return lines

    def clear(self, session_id: str) -> None:
        self.backend.set_cart_lines(session_id, [])
        logger.debug("cart cleared for session %s", session_id)
