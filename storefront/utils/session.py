# storefront/utils/session.py
from flask import request

from ..errors import InvalidInput

SESSION_HEADER = "x-session-id"

def get_session_id() -> str:
    # client-generated opaque id, kept in localStorage on the browser side
    sid = (request.headers.get(SESSION_HEADER) or "").strip()
    if not sid:
        raise InvalidInput("Missing x-session-id header")
    return sid

def json_body() -> dict:
    # an empty body is an empty payload; anything unparseable is rejected
    if not request.get_data():
        return {}
    data = request.get_json(silent=True)
    if data is None:
        raise InvalidInput("Malformed JSON body")
    if not isinstance(data, dict):
        raise InvalidInput("JSON body must be an object")
    return data

def parse_quantity(value) -> int:
    # bools are ints in Python; reject them along with floats like 2.5
    if isinstance(value, bool):
        raise InvalidInput("quantity must be a positive integer")
    if isinstance(value, float) and not value.is_integer():
        raise InvalidInput("quantity must be a positive integer")
    try:
        qty = int(value)
    except (TypeError, ValueError):
        raise InvalidInput("quantity must be a positive integer")
    if qty < 1:
        raise InvalidInput("quantity must be a positive integer")
    return qty
