from flask import jsonify, current_app

from . import bp
from ..errors import NotFound, Unauthorized
from ..services import account_service
from ..utils.api import api_ok
from ..utils.decorators import current_user
from ..utils.net import get_client_ip
from ..utils.parse import json_body

RESET_MESSAGE = "If that email address is in our system, we've sent instructions to reset your password."


@bp.post("/register")
def register():
    data = json_body()
    user = account_service.register_user(data.get("name"), data.get("email"), data.get("password"))
    return jsonify(api_ok("User registered successfully!", data={"user": user.as_dict()})), 201


@bp.post("/login")
def login():
    data = json_body()
    try:
        user = account_service.authenticate(data.get("email"), data.get("password"))
    except Unauthorized:
        current_app.logger.warning("failed login from %s", get_client_ip())
        raise
    return jsonify(api_ok(
        "You've logged in successfully",
        data={
            "user": user.as_dict(),
            "token": account_service.issue_token(user),
        }
    )), 200


@bp.post("/forgot-password")
def forgot_password():
    data = json_body()
    token = account_service.request_password_reset(data.get("email"))

    # Same answer whether or not the account exists.
    payload = {}
    if token and current_app.config.get("EXPOSE_RESET_TOKEN"):
        email = account_service.normalize_email(data.get("email"))
        link = f"{current_app.config['RESET_LINK_BASE']}?token={token}&email={email}"
        current_app.logger.warning("EXPOSE_RESET_TOKEN is on; reset link: %s", link)
        payload = {"token": token, "resetLink": link}
    return jsonify(api_ok(RESET_MESSAGE, data=payload)), 200


@bp.post("/reset-password")
def reset_password():
    data = json_body()
    account_service.reset_password(data.get("email"), data.get("token"), data.get("password"))
    return jsonify(api_ok("Password has been reset")), 200


@bp.get("/me")
def me():
    user = current_user()
    if not user:
        raise NotFound("User not found")
    return jsonify(api_ok("OK", data={"user": user.as_dict()})), 200
