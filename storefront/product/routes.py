# storefront/product/routes.py
from flask import jsonify

from ..extensions import get_store
from . import bp

@bp.get("")
def list_products():
    return jsonify([p.as_api() for p in get_store().list_products()])

@bp.get("/<product_id>")
def get_product(product_id: str):
    return jsonify(get_store().get_product(product_id).as_api())
