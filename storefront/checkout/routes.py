# storefront/checkout/routes.py
from flask import jsonify

from ..errors import InvalidInput
from ..extensions import get_store
from ..utils.api import api_ok
from ..utils.session import get_session_id, json_body
from . import bp

@bp.post("")
def checkout():
    """
    Body: { "discountCode"?: str }
    Header: x-session-id
    Turns the session cart into an order and empties the cart.
    """
    sid = get_session_id()
    data = json_body()

    code = data.get("discountCode")
    if code is not None and not isinstance(code, str):
        raise InvalidInput("discountCode must be a string")
    code = (code or "").strip() or None

    order = get_store().checkout(sid, discount_code=code)
    r = jsonify(api_ok("Order placed", {"order": order.as_api()}))
    r.status_code = 201
    r.headers["X-Order-Id"] = order.id
    return r
