# --- storefront/model/coupon.py ---

from ..extensions import db
from sqlalchemy.orm import validates
from sqlalchemy.sql import func

COUPON_TYPES = ("percent", "flat")

class Coupon(db.Model):
    __tablename__ = "coupon"

    id = db.Column(db.Integer, primary_key=True)
    # always stored upper-case
    code = db.Column(db.String(64), unique=True, nullable=False, index=True)

    # "percent" or "flat"
    discount_type = db.Column(db.String(16), nullable=False, default="percent")
    value = db.Column(db.Float, nullable=False, default=0.0)

    min_order_value = db.Column(db.Float, nullable=False, default=0.0)
    is_active = db.Column(db.Boolean, nullable=False, default=True, index=True)
    expiry_date = db.Column(db.DateTime, nullable=True)

    created_at = db.Column(db.DateTime, server_default=func.now())

    @validates("code")
    def _normalize_code(self, key, value):
        return (value or "").strip().upper()

    def as_api(self):
        return {
            "id": self.id,
            "code": self.code,
            "discountType": self.discount_type,
            "value": self.value,
            "minOrderValue": self.min_order_value,
            "isActive": self.is_active,
            "expiryDate": self.expiry_date.isoformat() if self.expiry_date else None,
        }
