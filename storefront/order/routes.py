# storefront/order/routes.py
from flask import g, jsonify

from . import bp
from ..services import order_service
from ..utils import clock
from ..utils.api import api_ok
from ..utils.decorators import login_required
from ..utils.parse import json_body


def ok(msg, data=None, status=200):
    r = jsonify(api_ok(msg, data)); r.status_code = status; return r


@bp.get("")
@login_required
def list_orders():
    """
    The caller's orders, newest first. Statuses are brought up to date
    (Processing -> Shipped -> Delivered) before the list is returned.
    """
    orders = order_service.list_orders(g.account["accountId"], clock.utcnow())
    return ok("orders", {"orders": [o.as_api() for o in orders]})


@bp.get("/<order_id>")
@login_required
def get_order(order_id):
    order = order_service.get_order_or_404(order_id, g.account["accountId"])
    return ok("order", {"order": order.as_api()})


@bp.post("")
@login_required
def create_order():
    """
    Body: { items: [{title, price, quantity, image}], subtotal, shipping, tax,
            total?, paymentMethod, giftOption, insurance, deliverySlot,
            shippingAddress }
    """
    payload = json_body()
    order = order_service.create_order(g.account, payload, clock.utcnow())
    resp = ok("Order placed successfully", {"order": order.as_api()}, status=201)
    resp.headers["X-Order-Id"] = order.id
    return resp


@bp.patch("")
@bp.patch("/<order_id>")
@login_required
def update_order(order_id=None):
    """
    Body: { orderId, action: cancel|return|reschedule, reason?, newDate? }
    """
    data = json_body()
    order = order_service.get_order_or_404(order_id or data.get("orderId"), g.account["accountId"])
    order = order_service.apply_order_action(
        order,
        data.get("action"),
        clock.utcnow(),
        reason=data.get("reason"),
        new_date=data.get("newDate"),
    )
    return ok("Order updated", {"order": order.as_api()})
