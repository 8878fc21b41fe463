# storefront/services/storage.py
"""
Storage seam for the store.

Every piece of mutable state (orders, discount codes, cart lines) goes
through a ``StorageBackend``; the decision logic above it never touches a
container directly, so a durable backend can replace ``MemoryBackend``
without changes to the discount rules.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Dict, List, Optional, Sequence

from ..model import CartLine, DiscountCode, Order


class StorageBackend(ABC):

    # ---- orders (append-only) ----
    @abstractmethod
    def append_order(self, order: Order) -> None: ...

    @abstractmethod
    def list_orders(self) -> Sequence[Order]: ...

    @abstractmethod
    def count_orders(self) -> int: ...

    # ---- discount codes (never deleted) ----
    @abstractmethod
    def append_code(self, code: DiscountCode) -> None: ...

    @abstractmethod
    def list_codes(self) -> Sequence[DiscountCode]: ...

    @abstractmethod
    def find_code(self, code: str) -> Optional[DiscountCode]: ...

    @abstractmethod
    def save_code(self, code: DiscountCode) -> None: ...

    # ---- carts ----
    @abstractmethod
    def get_cart_lines(self, session_id: str) -> Optional[List[CartLine]]: ...

    @abstractmethod
    def set_cart_lines(self, session_id: str, lines: Sequence[CartLine]) -> None: ...


class MemoryBackend(StorageBackend):
    """Single-process, in-memory state. Lost on restart."""

    def __init__(self):
        self._orders: List[Order] = []
        self._codes: List[DiscountCode] = []
        self._carts: Dict[str, List[CartLine]] = {}

    def append_order(self, order):
        self._orders.append(order)

    def list_orders(self):
        return tuple(self._orders)

    def count_orders(self):
        return len(self._orders)

    def append_code(self, code):
        self._codes.append(code)

    def list_codes(self):
        return tuple(self._codes)

    def find_code(self, code):
        return next((c for c in self._codes if c.code == code), None)

    def save_code(self, code):
        for i, existing in enumerate(self._codes):
            if existing.code == code.code:
                self._codes[i] = code
                return
        raise KeyError(code.code)

    def get_cart_lines(self, session_id):
        lines = self._carts.get(session_id)
        return list(lines) if lines is not None else None

    def set_cart_lines(self, session_id, lines):
        self._carts[session_id] = list(lines)
