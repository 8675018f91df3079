# miniprintf

A small printf-style formatter that supports a deliberately narrow set of
conversions. Integers follow C-style fixed-width rules. The printing
functions return the number of characters they wrote.

## Installation

```
pip install .
```

## Conversions

| Spec | Meaning |
|------|---------|
| `%c` | a one-character string, or an integer reduced modulo 256 to a character |
| `%s` | a string; `None` prints as `(null)`; any other type raises `TypeError` |
| `%p` | an address in lower-case hex with a `0x` prefix, wrapped to 64 bits; `0` or `None` prints as `(nil)` |
| `%d`, `%i` | an integer wrapped to signed 32 bits, in decimal |
| `%u` | an integer wrapped to unsigned 32 bits, in decimal |
| `%x`, `%X` | an integer wrapped to unsigned 32 bits, in lower- or upper-case hex |
| `%%` | a literal percent sign |

Flags, widths and precisions are not supported. After a `%`, exactly one
character is read as the conversion. An unknown conversion character produces
no output and takes no argument. A `%` at the very end of the format string
produces nothing. If the format string needs more arguments than were given,
`TypeError` is raised. Extra arguments are ignored.

The specifiers are also available as the `Conversion` enum in
`miniprintf.formatter`. `Conversion("x").convert(255)` returns `'ff'`.
`Conversion.consumes_argument` is `False` only for `%%`.

## Usage

`render` returns the formatted text:

```python
from miniprintf.formatter import render

render("MIX %i %u %X %x %%", -313, 31313131, 31, 31)
# 'MIX -313 31313131 1F 1f %'

render("%p", 0)
# '(nil)'

render("%u", -1)
# '4294967295'
```

`printf` writes to a stream and returns the number of characters written.
The stream is a keyword-only argument and defaults to standard output:

```python
import io
from miniprintf.formatter import printf

buf = io.StringIO()
count = printf("%c %s %d\n", "c", "str", 313, stream=buf)
# buf.getvalue() == 'c str 313\n', count == 10
```

## Lower-level writers

`miniprintf.writers` provides the building blocks that the formatter uses.
Every `stream` argument defaults to standard output.

- `put_char(char, stream)` writes one character and returns 1. It raises
  `ValueError` if it is not given exactly one character.
- `put_str(text, stream)` writes a string, writing `None` as `(null)`, and
  returns its length.
- `format_number(number, digits, unsigned)` spells an integer in the base
  given by the digit alphabet, which defaults to decimal. A negative number
  gets a leading `-`, unless `unsigned` is true, in which case it is wrapped to
  64 bits. An alphabet with fewer than two digits raises `ValueError`.
- `put_number(number, digits, stream, unsigned)` writes a spelled integer.
- `format_pointer(address)` spells an address as `format_pointer` does for
  `%p`.
- `put_pointer(address, stream)` writes a spelled address.

The module also exports the digit alphabets `DECIMAL_DIGITS`,
`LOWER_HEX_DIGITS` and `UPPER_HEX_DIGITS`.

## Running the tests

```
pip install ".[test]"
pytest
```