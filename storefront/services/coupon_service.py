# storefront/services/coupon_service.py
from dataclasses import dataclass
from datetime import datetime

from flask import current_app

from ..errors import (
    Conflict, CouponNotFound, CouponInactive, CouponExpired, MinimumOrderNotMet, StoreError, ValidationFailure,
)
from ..extensions import db
from ..model import Coupon
from ..model.coupon import COUPON_TYPES
from ..utils import clock
from ..utils.money import D, floor_money, round_money, to_float


@dataclass(frozen=True)
class CouponQuote:
    code: str
    discount_amount: float
    final_total: float

    def as_api(self):
        return {
            "code": self.code,
            "discountAmount": self.discount_amount,
            "finalTotal": self.final_total,
        }


def normalize_code(code) -> str:
    return (code or "").strip().upper()


def find_coupon_by_code(code):
    code = normalize_code(code)
    if not code:
        return None
    return Coupon.query.filter_by(code=code).first()


def compute_discount(coupon: Coupon, cart_total) -> tuple[float, float]:
    """(discount, final total); discount never exceeds the cart total."""
    total = D(cart_total)
    if coupon.discount_type == "percent":
        discount = total * D(coupon.value) / D(100)
    else:
        discount = D(coupon.value)
    discount = max(D(0), round_money(discount))
    # rounding may push past a sub-cent total; fall back to whole cents below it
    if discount > total:
        discount = floor_money(total)
    return float(discount), to_float(total - discount)


def check_usable(coupon: Coupon, cart_total, now: datetime):
    if not coupon.is_active:
        raise CouponInactive()
    if coupon.expiry_date and now > coupon.expiry_date:
        raise CouponExpired()
    if D(cart_total) < D(coupon.min_order_value or 0):
        raise MinimumOrderNotMet(float(coupon.min_order_value or 0))


def evaluate_coupon(code, cart_total, now: datetime | None = None) -> CouponQuote:
    """
    Validate `code` against `cart_total` and price it.
    Read-only: the coupon record is never touched, so reuse is unlimited.
    """
    now = now or clock.utcnow()
    coupon = find_coupon_by_code(code)
    if coupon is None:
        current_app.logger.info("coupon %s rejected: not found", normalize_code(code))
        raise CouponNotFound()
    try:
        check_usable(coupon, cart_total, now)
    except StoreError as e:
        current_app.logger.info("coupon %s rejected: %s", coupon.code, e.message)
        raise
    discount, final_total = compute_discount(coupon, cart_total)
    return CouponQuote(code=coupon.code, discount_amount=discount, final_total=final_total)


def create_coupon(code, discount_type, value, *, min_order_value=0.0, is_active=True, expiry_date=None) -> Coupon:
    code = normalize_code(code)
    discount_type = (discount_type or "").lower().strip()
    if not code:
        raise ValidationFailure("code is required")
    if discount_type not in COUPON_TYPES:
        raise ValidationFailure("discountType must be 'percent' or 'flat'")
    value = float(value)
    if value <= 0:
        raise ValidationFailure("value must be > 0")
    if discount_type == "percent" and value > 100:
        raise ValidationFailure("percent coupon must be <= 100")
    if find_coupon_by_code(code):
        raise Conflict("Coupon code already exists")

    c = Coupon(
        code=code, discount_type=discount_type, value=value,
        min_order_value=float(min_order_value or 0), is_active=is_active,
        expiry_date=expiry_date,
    )
    db.session.add(c)
    db.session.commit()
    return c
