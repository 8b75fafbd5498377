import math
from typing import Any, Union


def parse_number(raw: Any) -> Union[int, float]:
    """Lenient numeric coercion for path and query values.

    "12" -> 12, "1.0" -> 1, "3.14" -> 3.14, "abc" / "" / None -> nan.
    Validation happens afterwards with ``is_valid_id``.
    """
    if isinstance(raw, bool):
        return math.nan
    if isinstance(raw, (int, float)):
        return raw
    if not isinstance(raw, str) or not raw.strip():
        return math.nan

    text = raw.strip()
    try:
        return int(text)
    except ValueError:
        pass
    try:
        number = float(text)
    except ValueError:
        return math.nan

    # "1.0" and "1e3" name the integers 1 and 1000
    if number.is_integer():
        return int(number)
    return number
