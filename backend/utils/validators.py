# backend/utils/validators.py
import math
from datetime import datetime, timezone

from bson import ObjectId

from utils.errors import ValidationError


def is_empty(value):
    if value is None:
        return True
    if isinstance(value, str) and not value.strip():
        return True
    return False


def require_fields(data, *fields):
    missing = [f for f in fields if is_empty(data.get(f))]
    if missing:
        raise ValidationError(f"Missing required fields: {', '.join(missing)}")


def object_id(value, label="id"):
    if isinstance(value, ObjectId):
        return value
    if not isinstance(value, str) or not ObjectId.is_valid(value):
        raise ValidationError(f"Invalid {label}")
    return ObjectId(value)


def require_str(data, field):
    value = data[field]
    if not isinstance(value, str):
        raise ValidationError(f"{field} must be a string")
    return value


def require_number(data, field):
    value = data[field]
    # bool is an int subclass
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValidationError(f"{field} must be a finite number")
    if isinstance(value, float) and not math.isfinite(value):
        raise ValidationError(f"{field} must be a finite number")
    return value


def require_bool(data, field):
    value = data[field]
    if not isinstance(value, bool):
        raise ValidationError(f"{field} must be true or false")
    return value


def require_datetime(data, field):
    """Parse an ISO-8601 string into a naive UTC datetime, as BSON stores it."""
    value = data[field]
    if not isinstance(value, str):
        raise ValidationError(f"{field} must be an ISO-8601 timestamp")
    text = value.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        raise ValidationError(f"{field} must be an ISO-8601 timestamp")
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc).replace(tzinfo=None)
