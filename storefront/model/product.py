# storefront/model/product.py
from dataclasses import dataclass
from decimal import Decimal

from ..utils.money import to_float_money


@dataclass(frozen=True)
class Product:
    id: str
    name: str
    price: Decimal
    quantity: int
    image: str

    def as_api(self):
        return {
            "id": self.id,
            "name": self.name,
            "price": to_float_money(self.price),
            "quantity": self.quantity,
            "image": self.image,
        }
