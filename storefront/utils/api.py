# --- storefront/utils/api.py ---
from . import clock


def _envelope(status, message, data):
    return {
        "status": status,
        "message": message,
        "data": {
            **(data or {}),
            "SERVER_TIME": clock.utcnow().strftime("%Y-%m-%d %H:%M:%S"),
        },
    }


def api_ok(message, data=None):
    return _envelope(True, message, data)


def api_error(message, data=None):
    return _envelope(False, message, data)
