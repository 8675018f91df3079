"""A small printf supporting the c, s, p, d, i, u, x, X and % conversions."""

from __future__ import annotations

import operator
from enum import Enum
from typing import Any, Iterator, Optional, Sequence, TextIO

from miniprintf.writers import (
    DECIMAL_DIGITS,
    LOWER_HEX_DIGITS,
    NULL_STRING,
    UPPER_HEX_DIGITS,
    format_number,
    format_pointer,
    put_str,
)

_INT_RANGE = 1 << 32
_INT_HALF = 1 << 31


def _as_int(value: Any) -> int:
    value = operator.index(value)
    return (value + _INT_HALF) % _INT_RANGE - _INT_HALF


def _as_unsigned(value: Any) -> int:
    return operator.index(value) % _INT_RANGE


class Conversion(Enum):
    """A conversion specifier following ``%``."""

    CHAR = "c"
    STRING = "s"
    POINTER = "p"
    DECIMAL = "d"
    INTEGER = "i"
    UNSIGNED = "u"
    HEX_LOWER = "x"
    HEX_UPPER = "X"
    PERCENT = "%"

    @property
    def consumes_argument(self) -> bool:
        """Whether this conversion takes a value from the arguments."""
        return self is not Conversion.PERCENT

    def convert(self, value: Any = None) -> str:
        """Render ``value`` according to this conversion."""
        if self is Conversion.CHAR:
            if isinstance(value, str):
                if len(value) != 1:
                    raise TypeError(f"%c requires a single character, got {value!r}")
                return value
            return chr(operator.index(value) % 256)
        if self is Conversion.STRING:
            if value is None:
                return NULL_STRING
            if not isinstance(value, str):
                raise TypeError(f"%s requires a string, got {type(value).__name__}")
            return value
        if self is Conversion.POINTER:
            return format_pointer(value)
        if self in (Conversion.DECIMAL, Conversion.INTEGER):
            return format_number(_as_int(value), DECIMAL_DIGITS, False)
        if self is Conversion.UNSIGNED:
            return format_number(_as_unsigned(value), DECIMAL_DIGITS, True)
        if self is Conversion.HEX_LOWER:
            return format_number(_as_unsigned(value), LOWER_HEX_DIGITS, True)
        if self is Conversion.HEX_UPPER:
            return format_number(_as_unsigned(value), UPPER_HEX_DIGITS, True)
        return "%"


def _pieces(fmt: str, args: Sequence[Any]) -> Iterator[str]:
    remaining = iter(args)
    chars = iter(fmt)
    for char in chars:
        if char != "%":
            yield char
            continue
        spec = next(chars, None)
        if spec is None:
            break
        try:
            conversion = Conversion(spec)
        except ValueError:
            # Unknown specifiers print nothing and take no argument.
            continue
        value = None
        if conversion.consumes_argument:
            try:
                value = next(remaining)
            except StopIteration:
                raise TypeError("not enough arguments for format string") from None
        yield conversion.convert(value)


def render(fmt: str, *args: Any) -> str:
    """Return the text ``printf`` would write for ``fmt`` and ``args``."""
    return "".join(_pieces(fmt, args))


def printf(fmt: str, *args: Any, stream: Optional[TextIO] = None) -> int:
    """Write the formatted text to ``stream`` (stdout by default) and return its length."""
    return put_str(render(fmt, *args), stream)