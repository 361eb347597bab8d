# storefront/utils/net.py
from flask import request


def get_client_ip():
    """Best guess at the caller's address, for failed-login log lines."""
    forwarded = request.headers.get("X-Forwarded-For", "")
    if forwarded:
        # left-most entry is the original client
        return forwarded.split(",")[0].strip()
    return request.headers.get("X-Real-IP") or request.remote_addr
