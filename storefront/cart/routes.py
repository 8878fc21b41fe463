# storefront/cart/routes.py
from flask import jsonify

from ..errors import InvalidInput
from ..extensions import get_store
from ..utils.api import api_ok
from ..utils.session import get_session_id, json_body, parse_quantity
from . import bp

@bp.get("")
def get_cart():
    lines = get_store().get_cart(get_session_id())
    return jsonify([ln.as_api() for ln in lines])

@bp.post("")
def add_item():
    """
    Body: { "productId": str, "quantity": int }
    Header: x-session-id
    Adding a product already in the cart bumps its quantity.
    """
    sid = get_session_id()
    data = json_body()

    product_id = data.get("productId")
    if not isinstance(product_id, str) or not product_id.strip():
        raise InvalidInput("productId is required")
    qty = parse_quantity(data.get("quantity"))

    lines = get_store().add_to_cart(sid, product_id.strip(), qty)
    return jsonify(api_ok("Item added to cart", {"cart": [ln.as_api() for ln in lines]}))
