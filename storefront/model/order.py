# storefront/model/order.py
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Optional, Tuple

from ..utils.money import to_float_money


@dataclass(frozen=True)
class OrderLine:
    product_id: str
    price: Decimal
    quantity: int

    @property
    def line_total(self) -> Decimal:
        return self.price * self.quantity

    def as_api(self):
        return {
            "productId": self.product_id,
            "price": to_float_money(self.price),
            "quantity": self.quantity,
        }


@dataclass(frozen=True)
class OrderDiscount:
    code: str
    amount: Decimal

    def as_api(self):
        return {"code": self.code, "amount": to_float_money(self.amount)}


@dataclass(frozen=True)
class Order:
    id: str
    session_id: str
    items: Tuple[OrderLine, ...]
    subtotal_amount: Decimal
    total_amount: Decimal
    created_at: datetime
    discount: Optional[OrderDiscount] = None

    @property
    def discount_amount(self) -> Decimal:
        return self.discount.amount if self.discount else Decimal("0")

    def as_api(self):
        return {
            "id": self.id,
            "sessionId": self.session_id,
            "items": [i.as_api() for i in self.items],
            "subtotalAmount": to_float_money(self.subtotal_amount),
            "discount": self.discount.as_api() if self.discount else None,
            "totalAmount": to_float_money(self.total_amount),
            "createdAt": self.created_at.isoformat(),
        }
