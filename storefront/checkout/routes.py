# storefront/checkout/routes.py
from flask import jsonify

from . import bp
from ..services import pricing
from ..utils.api import api_ok
from ..utils.parse import json_body, opt_str


@bp.post("/quote")
def quote():
    """
    Body: { "items": [{"price": 4999, "quantity": 1}, ...], "couponCode": "SAVE10"? }
    Returns subtotal / shipping / tax / discount / total for the payment modal.
    """
    data = json_body()
    summary = pricing.quote(data.get("items") or [], coupon_code=opt_str(data, "couponCode"))
    return jsonify(api_ok("quote", summary)), 200
