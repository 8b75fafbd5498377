# backend/ers/core/validators.py

import dataclasses
import math
from collections.abc import Mapping
from typing import Any


def _own_items(obj: Any) -> list[tuple[str, Any]]:
    if isinstance(obj, Mapping):
        return list(obj.items())
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return [(f.name, getattr(obj, f.name)) for f in dataclasses.fields(obj)]
    return list(vars(obj).items())


def is_valid_id(id: Any) -> bool:
    # bool is an int subclass; True must not pass as id 1
    if isinstance(id, bool) or not isinstance(id, int):
        return False
    return id > 0


def is_positive_number(value: Any) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value) and value > 0


def is_valid_strings(*values: Any) -> bool:
    return all(isinstance(v, str) and v != "" for v in values)


def is_valid_object(obj: Any, *nullable_keys: str) -> bool:
    if obj is None:
        return False
    try:
        items = _own_items(obj)
    except TypeError:
        return False

    for key, value in items:
        if key in nullable_keys:
            continue
        if isinstance(value, float) and math.isnan(value):
            return False
        if not value:
            return False
    return True


def is_property_of(key: Any, entity_cls: Any) -> bool:
    if not key or not entity_cls or not isinstance(key, str):
        return False

    try:
        instance = entity_cls()
    except TypeError:
        return False

    return key in dict(_own_items(instance))


def is_empty_object(obj: Any) -> bool:
    if obj is None:
        return False
    try:
        return len(_own_items(obj)) == 0
    except TypeError:
        return False
