# storefront/services/order_lifecycle.py
"""
Order status rules.

Status is derived on read: nothing advances an order in the background,
`advance_status` is called whenever a user's orders are listed (and by the
optional `flask advance-orders` sweep). Explicit user actions go through
`apply_action`, which validates everything before touching the order.
"""
import random
from datetime import datetime, timedelta

from ..errors import InvalidTransition, ValidationFailure
from ..model.order import (
    Order,
    PROCESSING, SHIPPED, DELIVERED, CANCELLED, RETURN_REQUESTED,
    TERMINAL_STATUSES,
)
from ..utils.clock import parse_iso8601

SHIP_AFTER_DAYS = 3
FALLBACK_DELIVERY_DAYS = 6
TRACKING_PREFIX = "TRK"

# Side-branch statuses the automatic rule must leave alone.
_NOT_AUTO_ADVANCED = TERMINAL_STATUSES | {RETURN_REQUESTED}


def generate_tracking_id(rng=random) -> str:
    return f"{TRACKING_PREFIX}{rng.randint(100000, 999999)}"


def default_scheduled_date(order_date: datetime, days: int = 5) -> datetime:
    return order_date + timedelta(days=days)


def delivery_date(order: Order) -> datetime:
    return order.scheduled_date or order.order_date + timedelta(days=FALLBACK_DELIVERY_DAYS)


def next_status(order: Order, now: datetime):
    """Status the order should have at `now`, or None if unchanged."""
    if order.status in _NOT_AUTO_ADVANCED:
        return None

    status = order.status
    days_passed = (now - order.order_date).total_seconds() / 86400
    if status == PROCESSING and days_passed > SHIP_AFTER_DAYS:
        status = SHIPPED

    # may skip straight from Processing when both thresholds are crossed
    if now > delivery_date(order) and status != DELIVERED:
        status = DELIVERED

    return status if status != order.status else None


def advance_status(order: Order, now: datetime) -> bool:
    new = next_status(order, now)
    if new is None:
        return False
    order.status = new
    return True


# ---- explicit transitions ---------------------------------------------------

def _cancel(order, now, reason, new_date):
    if order.status == DELIVERED:
        raise InvalidTransition("Delivered orders cannot be cancelled", action="cancel", status=order.status)
    return {
        "status": CANCELLED,
        "cancellation": {"reason": reason, "cancelledAt": now.isoformat()},
    }


def _return(order, now, reason, new_date):
    if order.status != DELIVERED:
        raise InvalidTransition("Only delivered orders can be returned", action="return", status=order.status)
    return {
        "status": RETURN_REQUESTED,
        "return_request": {"reason": reason, "status": "Pending", "requestedAt": now.isoformat()},
    }


def _reschedule(order, now, reason, new_date):
    if order.status in TERMINAL_STATUSES:
        raise InvalidTransition(f"Cannot reschedule an order that is {order.status}", action="reschedule", status=order.status)
    when = parse_iso8601(new_date)
    if when is None:
        raise ValidationFailure("newDate must be an ISO-8601 date")
    return {"scheduled_date": when}


ACTIONS = {
    "cancel": _cancel,
    "return": _return,
    "reschedule": _reschedule,
}


def plan_action(order: Order, action: str, now: datetime, *, reason=None, new_date=None) -> dict:
    """Field changes `action` would make; raises without touching the order."""
    key = action.strip().lower() if isinstance(action, str) else None
    handler = ACTIONS.get(key)
    if handler is None:
        raise InvalidTransition(f"Unknown action '{action}'", action=action, status=order.status)
    return handler(order, now, reason, new_date)


def apply_action(order: Order, action: str, now: datetime, *, reason=None, new_date=None) -> dict:
    changes = plan_action(order, action, now, reason=reason, new_date=new_date)
    for field, value in changes.items():
        setattr(order, field, value)
    return changes
