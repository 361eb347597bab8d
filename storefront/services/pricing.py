# storefront/services/pricing.py
from flask import current_app

from ..errors import ValidationFailure
from ..utils.money import D, round_money, to_float
from ..utils.parse import require_amount, require_quantity
from .coupon_service import evaluate_coupon


def cart_subtotal(items) -> float:
    if not isinstance(items, list):
        raise ValidationFailure("items must be a list")
    subtotal = D(0)
    for i, it in enumerate(items):
        if not isinstance(it, dict):
            raise ValidationFailure(f"items[{i}] must be an object")
        qty = require_quantity(it, f"items[{i}]")
        subtotal += D(require_amount(it, "price")) * D(qty)
    return to_float(subtotal)


def quote(items, coupon_code=None, now=None) -> dict:
    """
    Checkout summary the storefront shows before payment:
      1) subtotal = sum(price * quantity)
      2) shipping is free above FREE_SHIPPING_THRESHOLD, flat fee otherwise
      3) tax = subtotal * TAX_RATE
      4) optional coupon, priced on the subtotal, comes off the total
    """
    cfg = current_app.config
    subtotal = D(cart_subtotal(items))
    shipping = D(0) if subtotal > D(cfg["FREE_SHIPPING_THRESHOLD"]) else D(cfg["FLAT_SHIPPING_FEE"])
    tax = round_money(subtotal * D(cfg["TAX_RATE"]))

    discount = D(0)
    coupon = None
    if coupon_code:
        q = evaluate_coupon(coupon_code, to_float(subtotal), now=now)
        discount = D(q.discount_amount)
        coupon = q.code

    total = subtotal + shipping + tax - discount
    return {
        "subtotal": to_float(subtotal),
        "shipping": to_float(shipping),
        "tax": to_float(tax),
        "discount": to_float(discount),
        "coupon": coupon,
        "total": to_float(total),
    }
