"""Primitive writers for characters, strings, numbers and pointers."""

from __future__ import annotations

import operator
import sys
from typing import Optional, TextIO

NULL_STRING = "(null)"
NULL_POINTER = "(nil)"
POINTER_PREFIX = "0x"

DECIMAL_DIGITS = "0123456789"
LOWER_HEX_DIGITS = "0123456789abcdef"
UPPER_HEX_DIGITS = "0123456789ABCDEF"

_WORD = 1 << 64


def _target(stream: Optional[TextIO]) -> TextIO:
    return sys.stdout if stream is None else stream


def put_char(char: str, stream: Optional[TextIO] = None) -> int:
    """Write a single character and return the number of characters written."""
    if len(char) != 1:
        raise ValueError(f"expected a single character, got {char!r}")
    _target(stream).write(char)
    return 1


def put_str(text: Optional[str], stream: Optional[TextIO] = None) -> int:
    """Write ``text`` (``None`` is shown as ``(null)``) and return its length."""
    if text is None:
        text = NULL_STRING
    _target(stream).write(text)
    return len(text)


def format_number(number: int, digits: str = DECIMAL_DIGITS, unsigned: bool = False) -> str:
    """Spell ``number`` in the numeral system whose digits are ``digits``.

    Signed numbers get a leading ``-`` when negative; unsigned ones are
    wrapped to a 64-bit word instead.
    """
    number = operator.index(number)
    base = len(digits)
    if base < 2:
        raise ValueError("a numeral system needs at least two digits")

    sign = ""
    if number < 0:
        if unsigned:
            number %= _WORD
        else:
            sign = "-"
            number = -number

    spelled = []
    while True:
        number, remainder = divmod(number, base)
        spelled.append(digits[remainder])
        if not number:
            break
    return sign + "".join(reversed(spelled))


def put_number(
    number: int,
    digits: str = DECIMAL_DIGITS,
    stream: Optional[TextIO] = None,
    unsigned: bool = False,
) -> int:
    """Write ``number`` in the given digits and return the characters written."""
    return put_str(format_number(number, digits, unsigned), stream)


def format_pointer(address: Optional[int]) -> str:
    """Spell an address as lowercase hex with a ``0x`` prefix, or ``(nil)``."""
    value = 0 if address is None else operator.index(address) % _WORD
    if value == 0:
        return NULL_POINTER
    return POINTER_PREFIX + format_number(value, LOWER_HEX_DIGITS, unsigned=True)


def put_pointer(address: Optional[int], stream: Optional[TextIO] = None) -> int:
    """Write an address as :func:`format_pointer` spells it."""
    return put_str(format_pointer(address), stream)