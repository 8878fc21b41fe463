# storefront/discount/routes.py
from flask import jsonify

from ..errors import InvalidInput
from ..extensions import get_store
from ..utils.session import json_body
from . import bp

@bp.post("/validate")
def validate_code():
    """
    Body: { "code": str }
    discountPercentage is a percent (10 means 10% off), not a fraction.
    """
    data = json_body()
    code = data.get("code")
    if not isinstance(code, str) or not code.strip():
        raise InvalidInput("Discount code is required")

    store = get_store()
    check = store.validate_discount_code(code.strip())
    if not check.valid:
        return jsonify({"valid": False, "message": check.reason})
    return jsonify({"valid": True, "discountPercentage": store.discount_percentage})
