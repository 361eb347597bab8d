# storefront/coupon/routes.py
from flask import jsonify

from . import bp
from ..errors import ValidationFailure
from ..services.coupon_service import evaluate_coupon
from ..utils.api import api_ok
from ..utils.parse import json_body, opt_str, require_amount


@bp.post("")
@bp.post("/validate")
def validate_coupon():
    """
    Body: { "code": "SAVE10", "cartTotal": 1000 }
    Read-only: applying a coupon here never consumes it.
    """
    data = json_body()
    code = opt_str(data, "code", default="")
    if not code:
        raise ValidationFailure("Coupon code required")
    cart_total = require_amount(data, "cartTotal")

    quote = evaluate_coupon(code, cart_total)
    return jsonify(api_ok("Coupon applied successfully!", quote.as_api())), 200
