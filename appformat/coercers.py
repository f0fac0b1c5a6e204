"""Conversion between text and scalar values

Every `ScalarKind` has a parser (text → value) and a renderer (value → text).
Parsers receive the text already trimmed, and accept only the canonical,
locale-independent grammar of the kind:

- booleans: ``true`` or ``false``, in any case
- integers: ASCII decimal digits with an optional sign, within the bounds of
  the kind
- characters: exactly one character
- decimals: fixed-point numbers with an optional exponent
- doubles: as decimals, and the ``inf``, ``infinity``, and ``nan`` literals

"""

from decimal import Decimal, InvalidOperation
from functools import partial
from math import isfinite
import re
from typing import Any, Callable, Dict, Optional

from appformat.errors import CoercionError, InvalidValueError, UnsupportedKindError
from appformat.types import INTEGER_BOUNDS, ScalarKind, is_supported

__all__ = ["is_supported", "from_text", "to_text"]

_integer = re.compile(r"[+-]?[0-9]+")
_number = re.compile(r"[+-]?([0-9]+(\.[0-9]*)?|\.[0-9]+)([eE][+-]?[0-9]+)?")
_special = re.compile(r"[+-]?(inf|infinity|nan)", re.IGNORECASE)
_line_break = re.compile(r"[\r\n]")


def _parse_bool(text: str) -> bool:
    lowered = text.lower()
    if lowered == "true":
        return True
    if lowered == "false":
        return False
    raise ValueError(f"not a boolean literal: {text!r}")


def _parse_int(text: str, kind: ScalarKind) -> int:
    if not _integer.fullmatch(text):
        raise ValueError(f"not an integer: {text!r}")
    value = int(text)
    lo, hi = INTEGER_BOUNDS[kind]
    if not lo <= value <= hi:
        raise ValueError(f"{value} out of range [{lo}, {hi}]")
    return value


def _parse_char(text: str) -> str:
    if len(text) != 1:
        raise ValueError(f"expected a single character: {text!r}")
    return text


def _parse_decimal(text: str) -> Decimal:
    if not _number.fullmatch(text):
        raise ValueError(f"not a decimal number: {text!r}")
    try:
        return Decimal(text)
    except InvalidOperation as err:
        raise ValueError(f"not a decimal number: {text!r}") from err


def _parse_double(text: str) -> float:
    if _special.fullmatch(text):
        return float(text)
    if not _number.fullmatch(text):
        raise ValueError(f"not a floating point number: {text!r}")
    value = float(text)
    if not isfinite(value):
        raise ValueError(f"{text!r} overflows a double")
    return value


def _render_decimal(value: Any) -> str:
    return format(Decimal(value), "f")


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _in_bounds(value: Any, kind: ScalarKind) -> bool:
    lo, hi = INTEGER_BOUNDS[kind]
    return _is_int(value) and lo <= value <= hi


def _single_line(value: Any) -> bool:
    return isinstance(value, str) and not _line_break.search(value)


_parsers: Dict[ScalarKind, Callable[[str], Any]] = {
    ScalarKind.BOOL: _parse_bool,
    ScalarKind.CHAR: _parse_char,
    ScalarKind.DECIMAL: _parse_decimal,
    ScalarKind.DOUBLE: _parse_double,
    ScalarKind.STRING: str,
    **{kind: partial(_parse_int, kind=kind) for kind in INTEGER_BOUNDS},
}

# a value must pass its check before it is rendered
_checks: Dict[ScalarKind, Callable[[Any], bool]] = {
    ScalarKind.BOOL: lambda value: isinstance(value, bool),
    ScalarKind.CHAR: lambda value: _single_line(value) and len(value) == 1,
    ScalarKind.DECIMAL: lambda value: (
        (isinstance(value, Decimal) and value.is_finite()) or _is_int(value)
    ),
    ScalarKind.DOUBLE: lambda value: isinstance(value, float) or _is_int(value),
    ScalarKind.STRING: _single_line,
    **{kind: partial(_in_bounds, kind=kind) for kind in INTEGER_BOUNDS},
}

_renderers: Dict[ScalarKind, Callable[[Any], str]] = {
    ScalarKind.BOOL: lambda value: "True" if value else "False",
    ScalarKind.CHAR: str,
    ScalarKind.DECIMAL: _render_decimal,
    ScalarKind.DOUBLE: lambda value: repr(float(value)),
    ScalarKind.STRING: str,
    **{kind: lambda value: str(int(value)) for kind in INTEGER_BOUNDS},
}


def from_text(
    text: str, kind: Optional[ScalarKind], field: Optional[str] = None
) -> Any:
    """Convert text into a value of the given kind

    Parameters
    ----------
    text : str
        Textual value; surrounding whitespace is ignored
    kind : ScalarKind
        Target kind
    field : str, optional
        Name of the field being converted, for error reporting

    Returns
    -------
    The converted value

    Raises
    ------
    UnsupportedKindError
        If `kind` is not a supported scalar kind
    CoercionError
        If `text` is not a valid literal of `kind`

    """
    if not is_supported(kind):
        raise UnsupportedKindError(field, kind)
    text = text.strip()
    try:
        return _parsers[kind](text)
    except ValueError as err:
        raise CoercionError(text, kind) from err


def to_text(
    value: Any, kind: Optional[ScalarKind], field: Optional[str] = None
) -> str:
    """Render a value of the given kind as text

    Output round-trips through `from_text`, except for decimals and doubles
    where only numeric equality is preserved, and for characters or strings
    with surrounding whitespace.

    Raises
    ------
    UnsupportedKindError
        If `kind` is not a supported scalar kind
    InvalidValueError
        If `value` is not a valid value of `kind`: wrong type, out of range,
        not finite, or a character or string with a line break

    """
    if not is_supported(kind):
        raise UnsupportedKindError(field, kind)
    if not _checks[kind](value):
        raise InvalidValueError(field, value, kind)
    return _renderers[kind](value)
