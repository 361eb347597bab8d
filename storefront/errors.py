# storefront/errors.py
from flask import jsonify

from .utils.api import api_error


class StoreError(Exception):
    """Base for every failure reported back to the caller."""

    status_code = 400
    message = "Request failed"

    def __init__(self, message=None, data=None):
        super().__init__(message or self.message)
        self.message = message or self.message
        self.data = data

    def to_response(self):
        r = jsonify(api_error(self.message, self.data))
        r.status_code = self.status_code
        return r


class ValidationFailure(StoreError):
    status_code = 400
    message = "Invalid request"


class Unauthorized(StoreError):
    status_code = 401
    message = "Unauthorized"


class Forbidden(StoreError):
    status_code = 403
    message = "Forbidden"


class NotFound(StoreError):
    status_code = 404
    message = "Not found"


class Conflict(StoreError):
    status_code = 409
    message = "Conflict"


class InvalidTransition(StoreError):
    status_code = 409
    message = "Action not allowed for this order"

    def __init__(self, message=None, *, action=None, status=None):
        data = {}
        if action is not None:
            data["action"] = action
        if status is not None:
            data["orderStatus"] = status
        super().__init__(message, data or None)
        self.action = action
        self.status = status


class CouponNotFound(NotFound):
    message = "Invalid coupon code"


class CouponInactive(StoreError):
    status_code = 400
    message = "This coupon is no longer active"


class CouponExpired(StoreError):
    status_code = 400
    message = "This coupon has expired"


class MinimumOrderNotMet(StoreError):
    status_code = 400

    def __init__(self, min_order_value):
        super().__init__(
            f"Minimum order value of {min_order_value:.2f} required",
            {"minOrderValue": min_order_value},
        )
        self.min_order_value = min_order_value


class PersistenceFailure(StoreError):
    status_code = 500
    message = "Storage unavailable, please try again"


def register_error_handlers(app):
    @app.errorhandler(StoreError)
    def handle_store_error(e):
        return e.to_response()
