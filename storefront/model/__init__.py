# ------ storefront/model/__init__.py ------

from .user import User
from .product import Product
from .coupon import Coupon
from .order import Order

__all__ = [
    "User",
    "Product",
    "Coupon",
    "Order",
]
