# storefront/user/routes.py
from flask import jsonify

from . import bp
from ..errors import NotFound, ValidationFailure
from ..extensions import db
from ..utils.api import api_ok
from ..utils.decorators import current_user
from ..utils.parse import json_body, opt_str

# request key -> model column; each must hold a JSON list
_LIST_FIELDS = {
    "addresses": "addresses",
    "wishlist": "wishlist",
    "recentlyViewed": "recently_viewed",
    "cart": "cart",
    "savedForLater": "saved_for_later",
}


def _user_or_404():
    user = current_user()
    if not user:
        raise NotFound("User not found")
    return user


@bp.get("")
def get_profile():
    user = _user_or_404()
    return jsonify(api_ok("profile", {"user": user.as_profile()})), 200


@bp.put("")
def update_profile():
    """
    Body: any of { name, addresses, wishlist, recentlyViewed, cart, savedForLater }.
    Lists replace the stored list wholesale (the client keeps the source of truth).
    """
    user = _user_or_404()
    data = json_body()

    updates = {}
    if "name" in data:
        name = opt_str(data, "name", default="")
        if not name:
            raise ValidationFailure("name cannot be empty")
        updates["name"] = name
    for key, column in _LIST_FIELDS.items():
        if key in data:
            if not isinstance(data[key], list):
                raise ValidationFailure(f"{key} must be a list")
            updates[column] = list(data[key])

    for column, value in updates.items():
        setattr(user, column, value)
    db.session.commit()
    return jsonify(api_ok("Profile updated successfully", {"user": user.as_profile()})), 200
