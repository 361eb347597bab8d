# storefront/model/product.py
from ..extensions import db
from sqlalchemy.sql import func

class Product(db.Model):
    __tablename__ = "product"
    id = db.Column(db.Integer, primary_key=True)
    title = db.Column(db.String(255), nullable=False, index=True)

    price = db.Column(db.Float, nullable=False, default=0.0)
    original_price = db.Column(db.Float, nullable=True)

    category = db.Column(db.String(64), nullable=False, index=True)   # e.g. "bats", "kits"
    brand = db.Column(db.String(64), nullable=False, index=True)
    image = db.Column(db.String(512), nullable=False)                 # relative path or URL

    rating = db.Column(db.Float, default=4.5)
    reviews = db.Column(db.Integer, default=0)
    description = db.Column(db.Text)

    is_new_arrival = db.Column(db.Boolean, default=False)
    is_best_seller = db.Column(db.Boolean, default=False)

    created_at = db.Column(db.DateTime, server_default=func.now())

    def as_api(self):
        return {
            "id": self.id,
            "title": self.title,
            "price": self.price,
            "originalPrice": self.original_price,
            "category": self.category,
            "brand": self.brand,
            "image": self.image,
            "rating": self.rating,
            "reviews": self.reviews,
            "description": self.description,
            "isNewArrival": bool(self.is_new_arrival),
            "isBestSeller": bool(self.is_best_seller),
            "createdAt": self.created_at.isoformat() if self.created_at else None,
        }
