# storefront/services/order_service.py
from datetime import datetime

from flask import current_app
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from ..errors import NotFound, PersistenceFailure, StoreError, ValidationFailure
from ..extensions import db
from ..model import Order
from ..utils.parse import opt_str, require_amount, require_quantity
from ..utils.money import to_float, D
from . import order_lifecycle


# ---- persistence ------------------------------------------------------------

def find_orders(owner_id: str) -> list[Order]:
    """All orders of one account, most recent first."""
    return (Order.query.filter_by(owner_id=str(owner_id))
                       .order_by(Order.order_date.desc())
                       .all())


def find_order(order_id: str, owner_id: str) -> Order | None:
    # scoped by owner: someone else's order looks exactly like a missing one
    return Order.query.filter_by(id=str(order_id), owner_id=str(owner_id)).first()


def get_order_or_404(order_id, owner_id) -> Order:
    order = find_order(order_id, owner_id) if order_id else None
    if order is None:
        raise NotFound("Order not found")
    return order


def save(order: Order | None = None) -> None:
    if order is not None:
        db.session.add(order)
    try:
        db.session.commit()
    except SQLAlchemyError:
        db.session.rollback()
        current_app.logger.exception("order save failed")
        raise PersistenceFailure()


# ---- lazy status refresh ----------------------------------------------------

def refresh_statuses(orders, now: datetime) -> int:
    """Advance each order whose thresholds have passed; one commit per order."""
    advanced = 0
    for order in orders:
        before = order.status
        if order_lifecycle.advance_status(order, now):
            save(order)
            advanced += 1
            current_app.logger.info("order %s advanced %s -> %s", order.id, before, order.status)
    return advanced


def list_orders(owner_id: str, now: datetime) -> list[Order]:
    orders = find_orders(owner_id)
    if refresh_statuses(orders, now):
        db.session.expire_all()
        orders = find_orders(owner_id)
    return orders


def sweep_open_orders(now: datetime) -> int:
    """Same rule as list_orders, over every account. Used by `flask advance-orders`."""
    q = Order.query.filter(Order.status.not_in(list(order_lifecycle.TERMINAL_STATUSES)))
    return refresh_statuses(q.all(), now)


# ---- create / mutate --------------------------------------------------------

def _clean_items(raw_items) -> list[dict]:
    if not isinstance(raw_items, list) or not raw_items:
        raise ValidationFailure("items must be a non-empty list")
    items = []
    for i, it in enumerate(raw_items):
        if not isinstance(it, dict):
            raise ValidationFailure(f"items[{i}] must be an object")
        items.append({
            "title": it.get("title"),
            "price": require_amount(it, "price"),
            "quantity": require_quantity(it, f"items[{i}]"),
            "image": it.get("image"),
            "discount": require_amount(it, "discount", default=0),
        })
    return items


def _is_tracking_collision(err: IntegrityError) -> bool:
    # sqlite: "UNIQUE constraint failed: orders.tracking_id"; postgres names the index
    return "tracking_id" in str(err.orig)


def create_order(account: dict, payload: dict, now: datetime) -> Order:
    items = _clean_items(payload.get("items"))
    subtotal = require_amount(payload, "subtotal")
    shipping = require_amount(payload, "shipping", default=0)
    tax = require_amount(payload, "tax", default=0)
    if payload.get("total") is not None:
        total = require_amount(payload, "total")
    else:
        total = to_float(D(subtotal) + D(shipping) + D(tax))

    days = current_app.config.get("DEFAULT_DELIVERY_DAYS", 5)
    order = Order(
        owner_id=str(account["accountId"]),
        user_email=account.get("email"),
        items=items,
        subtotal=subtotal,
        shipping=shipping,
        tax=tax,
        total=total,
        payment_method=opt_str(payload, "paymentMethod"),
        gift_option=payload.get("giftOption"),
        insurance=bool(payload.get("insurance")),
        delivery_slot=opt_str(payload, "deliverySlot"),
        shipping_address=payload.get("shippingAddress") or payload.get("address"),
        status=order_lifecycle.PROCESSING,
        order_date=now,
        scheduled_date=order_lifecycle.default_scheduled_date(now, days),
    )

    # tracking ids are random; retry the rare collision on the unique index
    for _ in range(5):
        order.tracking_id = order_lifecycle.generate_tracking_id()
        db.session.add(order)
        try:
            db.session.commit()
            break
        except IntegrityError as e:
            db.session.rollback()
            if not _is_tracking_collision(e):
                current_app.logger.exception("order create failed")
                raise PersistenceFailure()
            current_app.logger.warning("tracking id collision on %s, retrying", order.tracking_id)
        except SQLAlchemyError:
            db.session.rollback()
            current_app.logger.exception("order create failed")
            raise PersistenceFailure()
    else:
        raise PersistenceFailure("Could not allocate a tracking id")

    current_app.logger.info("order %s created for %s (tracking %s)", order.id, order.owner_id, order.tracking_id)
    return order


def apply_order_action(order: Order, action: str, now: datetime, *, reason=None, new_date=None) -> Order:
    try:
        order_lifecycle.apply_action(order, action, now, reason=reason, new_date=new_date)
    except StoreError:
        current_app.logger.info("order %s: %s rejected in status %s", order.id, action, order.status)
        raise
    save(order)
    current_app.logger.info("order %s: %s applied, status %s", order.id, action, order.status)
    return order
