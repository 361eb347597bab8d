import uuid as _uuid

from ..extensions import db
from ..utils.clock import utcnow, isoformat

PROCESSING = "Processing"
SHIPPED = "Shipped"
OUT_FOR_DELIVERY = "Out for Delivery"
DELIVERED = "Delivered"
CANCELLED = "Cancelled"
RETURN_REQUESTED = "Return Requested"
RETURNED = "Returned"

ORDER_STATUSES = (
    PROCESSING, SHIPPED, OUT_FOR_DELIVERY, DELIVERED,
    CANCELLED, RETURN_REQUESTED, RETURNED,
)
TERMINAL_STATUSES = frozenset({DELIVERED, CANCELLED, RETURNED})


class Order(db.Model):
    __tablename__ = "orders"

    id = db.Column(db.String(36), primary_key=True, default=lambda: str(_uuid.uuid4()))
    owner_id = db.Column(db.String(64), nullable=False, index=True)
    user_email = db.Column(db.String(255))  # display snapshot, never used for lookups

    # [{title, price, quantity, image, discount}]
    items = db.Column(db.JSON, nullable=False, default=list)

    # Money snapshot
    subtotal = db.Column(db.Float, nullable=False, default=0.0)
    shipping = db.Column(db.Float, nullable=False, default=0.0)
    tax = db.Column(db.Float, nullable=False, default=0.0)
    total = db.Column(db.Float, nullable=False, default=0.0)

    # Checkout context, recorded as sent
    payment_method = db.Column(db.String(32))
    gift_option = db.Column(db.JSON)
    insurance = db.Column(db.Boolean, default=False)
    delivery_slot = db.Column(db.String(64))
    shipping_address = db.Column(db.JSON)

    status = db.Column(db.String(32), nullable=False, default=PROCESSING, index=True)
    tracking_id = db.Column(db.String(16), nullable=False, unique=True)
    order_date = db.Column(db.DateTime, nullable=False, default=utcnow, index=True)
    scheduled_date = db.Column(db.DateTime, nullable=True)

    # {reason, cancelledAt}
    cancellation = db.Column(db.JSON, nullable=True)
    # {reason, status, requestedAt}
    return_request = db.Column(db.JSON, nullable=True)

    @property
    def is_terminal(self) -> bool:
        return self.status in TERMINAL_STATUSES

    def as_api(self):
        return {
            "id": self.id,
            "userEmail": self.user_email,
            "items": self.items or [],
            "subtotal": self.subtotal,
            "shipping": self.shipping,
            "tax": self.tax,
            "total": self.total,
            "paymentMethod": self.payment_method,
            "giftOption": self.gift_option,
            "insurance": bool(self.insurance),
            "deliverySlot": self.delivery_slot,
            "shippingAddress": self.shipping_address,
            "status": self.status,
            "trackingId": self.tracking_id,
            "orderDate": isoformat(self.order_date),
            "scheduledDate": isoformat(self.scheduled_date),
            "cancellation": self.cancellation,
            "returnRequest": self.return_request,
        }
