# storefront/utils/parse.py
import math

from flask import request

from ..errors import ValidationFailure


def parse_bool(v, default=False):
    if v is None:
        return default
    if isinstance(v, bool):
        return v
    return str(v).strip().lower() in {"1", "true", "yes", "y", "on"}


def parse_opt_float(v):
    if v is None: return None
    if isinstance(v, str) and v.strip() == "": return None
    try: return float(v)
    except (TypeError, ValueError): return None


def require_amount(data: dict, key: str, *, default=None) -> float:
    """Non-negative number from a JSON body; ValidationFailure otherwise."""
    raw = data.get(key, default)
    if raw is None:
        raise ValidationFailure(f"{key} is required")
    if isinstance(raw, bool):
        raise ValidationFailure(f"{key} must be a number")
    try:
        value = float(raw)
    except (TypeError, ValueError):
        raise ValidationFailure(f"{key} must be a number")
    if not math.isfinite(value) or value < 0:
        raise ValidationFailure(f"{key} must be >= 0")
    return value


def require_fields(data: dict, *keys):
    missing = [k for k in keys if data.get(k) in (None, "")]
    if missing:
        raise ValidationFailure(f"Missing required fields: {', '.join(missing)}", {"missing": missing})


def json_body() -> dict:
    """Request JSON as a dict; an empty or unparsable body reads as {}."""
    data = request.get_json(silent=True)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValidationFailure("JSON object body required")
    return data


def opt_str(data: dict, key: str, *, default=None):
    """Stripped string value of `key`, `default` when absent or null."""
    raw = data.get(key)
    if raw is None:
        return default
    if not isinstance(raw, str):
        raise ValidationFailure(f"{key} must be a string")
    return raw.strip()


def require_quantity(item: dict, label: str) -> int:
    # 2 and 2.0 are both fine; 1.5, true and "2" are not
    qty = item.get("quantity", 1)
    if (isinstance(qty, bool) or not isinstance(qty, (int, float))
            or not math.isfinite(qty) or qty != int(qty) or qty < 1):
        raise ValidationFailure(f"{label}.quantity must be a positive integer")
    return int(qty)
