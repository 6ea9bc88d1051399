"""Conversions between plain Python values and scalar text."""

from __future__ import annotations

import base64
import binascii
import math
import re
from typing import Any

_NULL_STRINGS = frozenset({"", "~", "null", "Null", "NULL"})
_INFINITY = frozenset({".inf", ".Inf", ".INF", "+.inf", "+.Inf", "+.INF"})
_NEGATIVE_INFINITY = frozenset({"-.inf", "-.Inf", "-.INF"})
_NAN = frozenset({".nan", ".NaN", ".NAN"})

_TRAILING_SPACE = " \t\n\r\v\f"
_INT_RE = re.compile(r"([+-]?)(0[xX][0-9a-fA-F]+|0[0-7]*|[1-9][0-9]*)")
_FLOAT_RE = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")

_INT_MIN = -(2**63)
_INT_MAX = 2**63 - 1


def is_null_string(text: str) -> bool:
    """Whether the text spells a null value."""
    return text in _NULL_STRINGS


def is_infinity(text: str) -> bool:
    """Whether the text spells positive infinity."""
    return text in _INFINITY


def is_negative_infinity(text: str) -> bool:
    """Whether the text spells negative infinity."""
    return text in _NEGATIVE_INFINITY


def is_nan(text: str) -> bool:
    """Whether the text spells not-a-number."""
    return text in _NAN


def encode_scalar(value: Any) -> str:
    """Render a bool, int, float, str or bytes value as scalar text."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        if math.isnan(value):
            return ".nan"
        if math.isinf(value):
            return "-.inf" if value < 0 else ".inf"
        return format(value, ".17g")
    if isinstance(value, str):
        return value
    if isinstance(value, (bytes, bytearray)):
        return base64.b64encode(bytes(value)).decode("ascii")
    raise TypeError(f"cannot encode {type(value).__name__} as a scalar")


def _numeric_body(text: str) -> str:
    # Leading whitespace is rejected; trailing whitespace is allowed.
    return text.rstrip(_TRAILING_SPACE)


def _decode_int(text: str) -> int:
    match = _INT_RE.fullmatch(_numeric_body(text))
    if match is None:
        raise ValueError(f"not an integer: {text!r}")
    sign, digits = match.groups()
    if digits[:2] in ("0x", "0X"):
        number = int(digits[2:], 16)
    elif len(digits) > 1 and digits.startswith("0"):
        number = int(digits[1:], 8)
    else:
        number = int(digits)
    if sign == "-":
        number = -number
    if not _INT_MIN <= number <= _INT_MAX:
        raise ValueError(f"integer out of range: {text!r}")
    return number


def _decode_float(text: str) -> float:
    body = _numeric_body(text)
    if _FLOAT_RE.fullmatch(body):
        number = float(body)
        if not math.isinf(number):
            return number
    if is_infinity(text):
        return math.inf
    if is_negative_infinity(text):
        return -math.inf
    if is_nan(text):
        return math.nan
    raise ValueError(f"not a floating-point number: {text!r}")


def _decode_bool(text: str) -> bool:
    if text == "true":
        return True
    if text == "false":
        return False
    raise ValueError(f"not a boolean: {text!r}")


def _decode_bytes(text: str) -> bytes:
    try:
        data = base64.b64decode(text)
    except (binascii.Error, ValueError) as exc:
        raise ValueError(f"not base64 data: {text!r}") from exc
    if not data and text:
        raise ValueError(f"not base64 data: {text!r}")
    return data


_DECODERS = {
    str: lambda text: text,
    int: _decode_int,
    float: _decode_float,
    bool: _decode_bool,
    bytes: _decode_bytes,
}


def decode_scalar(text: str, kind: type) -> Any:
    """Read scalar text as a value of the given kind.

    Raises ValueError when the text does not convert, and TypeError when
    the kind is not supported.
    """
    try:
        decoder = _DECODERS[kind]
    except (KeyError, TypeError):
        raise TypeError(f"unsupported scalar kind: {kind!r}") from None
    return decoder(text)