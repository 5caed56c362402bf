import math
from datetime import datetime, timezone

from .errors import ValidationError

MAX_ID = 2 ** 63


def text(data, key):
    value = data.get(key)
    if value is None:
        return ''
    return str(value).strip()


def email(value):
    """Emails are matched exactly, apart from surrounding whitespace."""
    if value is None:
        return ''
    return str(value).strip()


def is_missing(value):
    return value is None or (isinstance(value, str) and not value.strip())


def number(value, field):
    """Accept ints, floats and numeric strings. Sign and fraction are not checked."""
    if isinstance(value, bool):
        raise ValidationError(f'{field} must be a number')
    try:
        parsed = float(value)
    except (TypeError, ValueError, OverflowError):
        raise ValidationError(f'{field} must be a number')
    if not math.isfinite(parsed):
        raise ValidationError(f'{field} must be a number')
    return int(parsed) if parsed.is_integer() else parsed


def task_id(value):
    """Integer task id, or None when the value cannot name a task."""
    if isinstance(value, bool):
        return None
    try:
        parsed = int(str(value).strip())
    except (TypeError, ValueError):
        return None
    # ids outside a signed 64-bit column cannot exist
    if not -MAX_ID <= parsed < MAX_ID:
        return None
    return parsed


def timestamp(value, field):
    if is_missing(value):
        return None
    try:
        parsed = datetime.fromisoformat(str(value).strip().replace('Z', '+00:00'))
    except ValueError:
        raise ValidationError(f'{field} must be an ISO-8601 date')
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
    return parsed
