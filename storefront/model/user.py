# --- storefront/model/user.py ---
from ..utils.clock import utcnow

from ..extensions import db


class User(db.Model):
    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(180), nullable=False)
    email = db.Column(db.String(255), unique=True, nullable=False, index=True)
    password_hash = db.Column(db.String(255), nullable=False, default="")
    role = db.Column(db.String(50), nullable=False, default="user", index=True)  # roles: user, admin

    reset_password_token = db.Column(db.String(64), nullable=True, index=True)
    reset_password_expires = db.Column(db.DateTime, nullable=True)

    # [{street, city, state, zip, country, isDefault}]
    addresses = db.Column(db.JSON, nullable=False, default=list)
    # [{title, price, image}]
    wishlist = db.Column(db.JSON, nullable=False, default=list)
    # [product id, ...]
    recently_viewed = db.Column(db.JSON, nullable=False, default=list)
    # [{productId, quantity, selectedSize, selectedColor, price, title, image}]
    cart = db.Column(db.JSON, nullable=False, default=list)
    # [{productId, addedAt}]
    saved_for_later = db.Column(db.JSON, nullable=False, default=list)

    created_at = db.Column(db.DateTime, default=utcnow)

    def as_dict(self):
        return {
            "id": self.id,
            "email": self.email,
            "name": self.name,
            "role": self.role,
            }

    def as_profile(self):
        return {
            **self.as_dict(),
            "addresses": self.addresses or [],
            "wishlist": self.wishlist or [],
            "recentlyViewed": self.recently_viewed or [],
            "cart": self.cart or [],
            "savedForLater": self.saved_for_later or [],
            "createdAt": self.created_at.isoformat() if self.created_at else None,
        }
