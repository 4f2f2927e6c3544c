"""
Type coercion for loosely typed form values
"""
import math
from typing import Any, Union

FALSE_STRINGS = {"", "false", "0", "no", "off"}


def coerce_bool(value: Any) -> bool:
    """Booleans arrive as bools, numbers or strings from form widgets"""
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return value != 0
    if isinstance(value, str):
        return value.strip().lower() not in FALSE_STRINGS
    raise ValueError("must be a boolean, number or string")


def coerce_number(value: Any) -> Union[int, float, str]:
    """
    Numeric-looking value to a number, blanks to "".
    Integral values come back as int so "10" and 10 sanitize alike.
    """
    if value is None:
        return ""
    if isinstance(value, bool):
        raise ValueError("must be a number")
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return ""
        try:
            value = float(text)
        except ValueError:
            raise ValueError(f"{value!r} is not a number")
    if not isinstance(value, (int, float)):
        raise ValueError("must be a number")
    if isinstance(value, float):
        if math.isnan(value) or math.isinf(value):
            raise ValueError("must be a finite number")
        if value.is_integer():
            return int(value)
    return value
