# storefront/model/cart.py
from dataclasses import dataclass


@dataclass(frozen=True)
class CartLine:
    product_id: str
    quantity: int

    def merged(self, quantity: int) -> "CartLine":
        return CartLine(product_id=self.product_id, quantity=self.quantity + quantity)

    def as_api(self):
        return {
            "productId": self.product_id,
            "quantity": self.quantity,
        }
