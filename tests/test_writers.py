import io

import pytest

from miniprintf.writers import (
    DECIMAL_DIGITS,
    LOWER_HEX_DIGITS,
    UPPER_HEX_DIGITS,
    format_number,
    format_pointer,
    put_char,
    put_number,
    put_pointer,
    put_str,
)


def test_put_char_writes_one_character():
    buf = io.StringIO()
    assert put_char("C", buf) == 1
    assert buf.getvalue() == "C"


def test_put_char_defaults_to_stdout(capsys):
    assert put_char("%") == 1
    assert capsys.readouterr().out == "%"


@pytest.mark.parametrize("bad", ["", "ab"])
def test_put_char_rejects_non_single_character(bad):
    with pytest.raises(ValueError):
        put_char(bad, io.StringIO())


def test_put_str_writes_and_counts():
    buf = io.StringIO()
    assert put_str("correto?", buf) == len("correto?")
    assert buf.getvalue() == "correto?"


def test_put_str_none_is_null():
    buf = io.StringIO()
    count = put_str(None, buf)
    assert buf.getvalue() == "(null)"
    assert count == len("(null)")


def test_put_str_empty_writes_nothing():
    buf = io.StringIO()
    assert put_str("", buf) == 0
    assert buf.getvalue() == ""


@pytest.mark.parametrize("n", [0, 7, 5587900, 2147483647, -2147483648, -1, 123456789])
def test_format_number_decimal_matches_str(n):
    assert format_number(n, DECIMAL_DIGITS, False) == str(n)


@pytest.mark.parametrize("n", [0, 31, 255, 5587900, 4294967295])
def test_format_number_hex(n):
    assert format_number(n, LOWER_HEX_DIGITS, True) == format(n, "x")
    assert format_number(n, UPPER_HEX_DIGITS, True) == format(n, "X")


@pytest.mark.parametrize("n", [0, 1, 5, 1024, -9])
def test_format_number_binary(n):
    assert format_number(n, "01", False) == format(n, "b")


def test_format_number_custom_digits():
    assert format_number(5, "ab", False) == "bab"


def test_format_number_unsigned_wraps_negative_to_word():
    assert format_number(-1, DECIMAL_DIGITS, True) == str(2**64 - 1)


def test_format_number_unsigned_positive_same_as_signed():
    assert format_number(255, LOWER_HEX_DIGITS, True) == format_number(255, LOWER_HEX_DIGITS, False)


@pytest.mark.parametrize("digits", ["", "0"])
def test_format_number_rejects_tiny_base(digits):
    with pytest.raises(ValueError):
        format_number(1, digits, False)


@pytest.mark.parametrize("bad", ["12", 1.5, None])
def test_format_number_rejects_non_integers(bad):
    with pytest.raises(TypeError):
        format_number(bad, DECIMAL_DIGITS, False)


@pytest.mark.parametrize("n", [0, 42, -313, 31313131])
def test_put_number_writes_formatted_text(n):
    buf = io.StringIO()
    count = put_number(n, DECIMAL_DIGITS, buf, False)
    assert buf.getvalue() == str(n)
    assert count == len(str(n))


def test_put_number_defaults_to_stdout(capsys):
    count = put_number(-42)
    assert capsys.readouterr().out == "-42"
    assert count == len("-42")


@pytest.mark.parametrize("address", [0, None])
def test_format_pointer_null(address):
    assert format_pointer(address) == "(nil)"


@pytest.mark.parametrize("address", [32132, 321321321321321])
def test_format_pointer_hex(address):
    assert format_pointer(address) == "0x" + format(address, "x")


def test_format_pointer_wraps_negative():
    assert format_pointer(-1) == "0x" + format(2**64 - 1, "x")


def test_put_pointer_writes_and_counts():
    buf = io.StringIO()
    count = put_pointer(32132, buf)
    assert buf.getvalue() == "0x" + format(32132, "x")
    assert count == len(buf.getvalue())


def test_put_pointer_null():
    buf = io.StringIO()
    assert put_pointer(0, buf) == len("(nil)")
    assert buf.getvalue() == "(nil)"