from flask import Blueprint

bp = Blueprint("coupons", __name__, url_prefix="/api/coupons")

from . import routes  # noqa: E402,F401
