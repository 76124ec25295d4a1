"""
On-demand conversion of stored string values to primitive types.

Every strict cast raises CastError (or InvalidBoolValue) on bad input;
to_bool_lenient() is the one cast that never fails and maps anything
unrecognised to False.
"""

import math
import re
import struct

from .errors import CastError, InvalidBoolValue

BOOL_TRUE = frozenset({"1", "true", "on", "yes"})
BOOL_FALSE = frozenset({"0", "false", "off", "no"})

_SIGNED_INT = re.compile(r"[+-]?[0-9]+")
_UNSIGNED_INT = re.compile(r"\+?[0-9]+")

# (min, max) per integer width
_INT_RANGES = {
    "i32": (-(2 ** 31), 2 ** 31 - 1),
    "u32": (0, 2 ** 32 - 1),
    "i64": (-(2 ** 63), 2 ** 63 - 1),
    "u64": (0, 2 ** 64 - 1),
}


def _to_int(value: str, target_type: str) -> int:
    pattern = _UNSIGNED_INT if target_type.startswith("u") else _SIGNED_INT
    if not pattern.fullmatch(value):
        raise CastError(target_type, value, "not an integer")
    number = int(value)
    low, high = _INT_RANGES[target_type]
    if not low <= number <= high:
        raise CastError(target_type, value, "out of range")
    return number


def to_i32(value: str) -> int:
    return _to_int(value, "i32")


def to_u32(value: str) -> int:
    return _to_int(value, "u32")


def to_i64(value: str) -> int:
    return _to_int(value, "i64")


def to_u64(value: str) -> int:
    return _to_int(value, "u64")


def to_f64(value: str) -> float:
    # float() tolerates surrounding whitespace and digit underscores
    if "_" in value or value != value.strip() or not value:
        raise CastError("f64", value, "not a number")
    try:
        return float(value)
    except ValueError:
        raise CastError("f64", value, "not a number") from None


def to_f32(value: str) -> float:
    """Parse a single-precision float, rejecting values that overflow it."""
    try:
        number = to_f64(value)
    except CastError:
        raise CastError("f32", value, "not a number") from None
    try:
        result = struct.unpack("f", struct.pack("f", number))[0]
    except OverflowError:
        result = math.inf
    # pack() rounds finite values beyond the f32 range to inf
    if math.isinf(result) and not math.isinf(number):
        raise CastError("f32", value, "out of range")
    return result


def to_bool(value: str) -> bool:
    """Map a boolean token (case-insensitive) to True/False.

    Raises:
        InvalidBoolValue: if the token is in neither table.
    """
    token = value.lower()
    if token in BOOL_TRUE:
        return True
    if token in BOOL_FALSE:
        return False
    raise InvalidBoolValue(value)


def to_bool_lenient(value: str) -> bool:
    """Like to_bool(), but anything unrecognised is False."""
    return value.lower() in BOOL_TRUE


def to_str(value: str) -> str:
    return value


# Type name -> cast, used by the CLI --type flag
CASTS = {
    "str": to_str,
    "i32": to_i32,
    "u32": to_u32,
    "i64": to_i64,
    "u64": to_u64,
    "f32": to_f32,
    "f64": to_f64,
    "int": to_i64,
    "float": to_f64,
    "bool": to_bool,
    "bool-lenient": to_bool_lenient,
}
