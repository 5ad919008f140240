from collections.abc import Iterable, Mapping
import math
import numbers
import random


def _to_number(key):
    if isinstance(key, (int, float)):
        return key
    try:
        return int(key)
    except (TypeError, ValueError):
        pass
    try:
        number = float(key)
    except (TypeError, ValueError):
        return key
    # "nan" and "inf" parse as floats but are names, not numbers.
    return number if math.isfinite(number) else key


def _is_number(value) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def _strict_equals(a, b) -> bool:
    if _is_number(a) and _is_number(b):
        return a == b
    return type(a) is type(b) and a == b


def get_key_by_value(mapping: Mapping, value, fallback=None):
    """Returns the first key mapped to value, as a number where it parses as one.

    Values compare strictly: 1 matches 1.0, but neither matches True or "1".
    """
    for key, candidate in mapping.items():
        if _strict_equals(candidate, value):
            return _to_number(key)
    return fallback or 0


def _get_field(obj, name):
    if isinstance(obj, Mapping):
        return obj[name]
    return getattr(obj, name)


def has_endpoints(device, endpoints: Iterable) -> bool:
    endpoint_ids = [_get_field(e, "ID") for e in _get_field(device, "endpoints")]
    for endpoint in endpoints:
        if endpoint not in endpoint_ids:
            return False
    return True


def get_random_int(min_value: int, max_value: int, rng=None) -> int:
    # max_value is exclusive.
    if rng is None:
        rng = random
    return math.floor(rng.random() * (max_value - min_value)) + min_value
