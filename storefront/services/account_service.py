# storefront/services/account_service.py
import uuid
from datetime import timedelta

from flask import current_app
from flask_jwt_extended import create_access_token
from werkzeug.security import generate_password_hash, check_password_hash

from ..errors import Conflict, Unauthorized, ValidationFailure
from ..extensions import db
from ..model import User
from ..utils import clock

MIN_PASSWORD_LENGTH = 6


def normalize_email(value) -> str:
    return value.strip().lower() if isinstance(value, str) else ""


def find_user_by_email(email):
    email = normalize_email(email)
    return User.query.filter_by(email=email).first() if email else None


def _check_password(password):
    if not isinstance(password, str) or len(password) < MIN_PASSWORD_LENGTH:
        raise ValidationFailure(f"Password required, min {MIN_PASSWORD_LENGTH} chars")


def register_user(name, email, password) -> User:
    name = name.strip() if isinstance(name, str) else ""
    email = normalize_email(email)
    if not name or not email or not password:
        raise ValidationFailure("All fields are required")
    _check_password(password)
    if find_user_by_email(email):
        raise Conflict("Email already exists")

    # Bootstrap: very first account becomes admin
    is_first_user = db.session.query(User.id).count() == 0
    user = User(
        name=name,
        email=email,
        password_hash=generate_password_hash(password),
        role="admin" if is_first_user else "user",
    )
    db.session.add(user)
    db.session.commit()
    current_app.logger.info("account %s registered (%s)", user.id, user.role)
    return user


def authenticate(email, password) -> User:
    user = find_user_by_email(email)
    if not user or not isinstance(password, str) or not check_password_hash(user.password_hash, password):
        raise Unauthorized("Invalid credentials")
    return user


def issue_token(user: User) -> str:
    return create_access_token(
        identity=str(user.id),
        additional_claims={"email": user.email, "name": user.name, "role": user.role},
    )


def request_password_reset(email):
    """
    Returns the fresh token, or None when the email is unknown. Callers must
    answer both cases identically so accounts cannot be enumerated.
    """
    user = find_user_by_email(email)
    if not user:
        return None
    ttl = current_app.config.get("RESET_TOKEN_TTL_MINUTES", 60)
    token = uuid.uuid4().hex
    user.reset_password_token = token
    user.reset_password_expires = clock.utcnow() + timedelta(minutes=ttl)
    db.session.commit()
    current_app.logger.info("password reset requested for account %s", user.id)
    return token


def reset_password(email, token, new_password) -> User:
    if not email or not token:
        raise ValidationFailure("email and token are required")
    _check_password(new_password)
    user = find_user_by_email(email)
    if (
        not user
        or not user.reset_password_token
        or user.reset_password_token != token
        or not user.reset_password_expires
        or user.reset_password_expires < clock.utcnow()
    ):
        raise Unauthorized("Invalid or expired reset token")

    user.password_hash = generate_password_hash(new_password)
    user.reset_password_token = None
    user.reset_password_expires = None
    db.session.commit()
    current_app.logger.info("password reset completed for account %s", user.id)
    return user
