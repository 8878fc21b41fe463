# storefront/admin/routes.py
import logging
from io import BytesIO

import pandas as pd
from flask import jsonify, send_file

from ..extensions import get_store
from ..utils.money import to_float_money
from . import bp

logger = logging.getLogger(__name__)

@bp.post("/discount/generate")
def generate_discount():
    """
    Code for the next order when it is an Nth one, else code=null.
    discountPercentage is a percent (10 means 10% off), not a fraction.
    """
    store = get_store()
    code = store.generate_discount_code()
    if code:
        message = "Discount code generated"
    else:
        nth = store.discounts.nth_order
        message = f"Code not available. Next order is not a multiple of {nth}."
    return jsonify({
        "code": code,
        "discountPercentage": store.discount_percentage,
        "message": message,
    })

@bp.get("/stats")
def stats():
    s = get_store().stats()
    totals = s["totals"]
    return jsonify({
        "totalOrders": totals.total_orders,
        "totalPurchaseAmount": to_float_money(totals.total_purchase_amount),
        "discountCodes": [c.as_api() for c in s["discount_codes"]],
        "totalDiscountAmount": to_float_money(totals.total_discount_amount),
        "nextOrderIndex": s["next_order_index"],
        "nthOrder": s["nth_order"],
    })

@bp.get("/orders")
def list_orders():
    return jsonify([o.as_api() for o in get_store().list_orders()])

@bp.get("/orders/export")
def export_orders():
    """
    Export the order journal as an Excel file, one row per order.
    """
    orders = get_store().list_orders()
    rows = [{
        "Order ID": o.id,
        "Session ID": o.session_id,
        "Items": sum(i.quantity for i in o.items),
        "Subtotal": to_float_money(o.subtotal_amount),
        "Discount Code": o.discount.code if o.discount else None,
        "Discount": to_float_money(o.discount_amount),
        "Total": to_float_money(o.total_amount),
        "Created At": o.created_at.strftime("%Y-%m-%d %H:%M:%S"),
    } for o in orders]
    df = pd.DataFrame(rows, columns=[
        "Order ID", "Session ID", "Items", "Subtotal",
        "Discount Code", "Discount", "Total", "Created At",
    ])

    output = BytesIO()
    df.to_excel(output, index=False)
    output.seek(0)
    logger.info("exported %d orders", len(rows))

    return send_file(
        output,
        as_attachment=True,
        download_name="orders_export.xlsx",
        mimetype="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
    )
