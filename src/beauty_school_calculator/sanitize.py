import math
import numbers
import re
from typing import Any

_LEADING_NUMBER = re.compile(r"^\s*([+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?)")
_TAGS = re.compile(r"<[^>]*>")
_WHITESPACE = re.compile(r"\s+")
_KEY_CHARS = re.compile(r"[^a-z0-9_\-]")


def absint(value: Any) -> int:
    """
    Coerce a raw form value to a non-negative integer.

    Missing or non-numeric values become 0, numeric strings keep their
    leading number ("12 years" -> 12), fractions are truncated and the
    sign is dropped. Values too large for a float become 0.
    """
    if value is None:
        return 0
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, numbers.Integral):
        try:
            float(value)
        except OverflowError:
            return 0
        return abs(int(value))
    if isinstance(value, numbers.Real):
        number = float(value)
    elif isinstance(value, str):
        match = _LEADING_NUMBER.match(value)
        if not match:
            return 0
        number = float(match.group(1))
    else:
        return 0

    if math.isnan(number) or math.isinf(number):
        return 0
    return abs(int(number))


def sanitize_key(value: Any) -> str:
    """Lowercase and keep only a-z, 0-9, dash and underscore."""
    if isinstance(value, bool) or not isinstance(value, (str, int, float)):
        return ""
    return _KEY_CHARS.sub("", str(value).lower())


def sanitize_text_field(value: Any) -> str:
    """Strip markup and collapse whitespace in a single-line text value."""
    if isinstance(value, bool) or not isinstance(value, (str, int, float)):
        return ""
    text = _TAGS.sub("", str(value))
    return _WHITESPACE.sub(" ", text).strip()
