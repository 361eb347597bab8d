# ------- storefront/utils/decorators.py -------
from functools import wraps

from flask import g
from flask_jwt_extended import get_jwt, get_jwt_identity, verify_jwt_in_request

from ..errors import Forbidden, Unauthorized
from ..extensions import db
from ..model.user import User


def current_account():
    """{accountId, email} of the verified bearer token."""
    verify_jwt_in_request()
    claims = get_jwt()
    return {"accountId": get_jwt_identity(), "email": claims.get("email")}


def current_user():
    account = current_account()
    try:
        uid = int(account["accountId"])
    except (TypeError, ValueError):
        return None
    return db.session.get(User, uid)


def login_required(fn):
    @wraps(fn)
    def wrapper(*args, **kwargs):
        g.account = current_account()
        return fn(*args, **kwargs)
    return wrapper


def role_required(*roles, message: str | None = None):
    def decorator(fn):
        @wraps(fn)
        def wrapper(*args, **kwargs):
            u = current_user()
            if not u:
                raise Unauthorized()
            if u.role not in roles:
                raise Forbidden(message or "Forbidden")
            g.account = {"accountId": str(u.id), "email": u.email}
            return fn(*args, **kwargs)
        return wrapper
    return decorator
