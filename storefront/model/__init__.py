# ------ storefront/model/__init__.py ------

from .product import Product
from .cart import CartLine
from .discount import DiscountCode, DiscountCheck
from .order import Order, OrderLine, OrderDiscount

__all__ = [
    "Product",
    "CartLine",
    "DiscountCode",
    "DiscountCheck",
    "Order",
    "OrderLine",
    "OrderDiscount",
]
