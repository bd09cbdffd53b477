# ftprintf

A small formatting library. Its printf understands one fixed set of
conversions. It also ships the helpers that printf is built on: number to
text conversion, character classification, C-style string routines,
byte-buffer routines and output functions.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## printf

```python
from ftprintf.printf import ft_printf, render

render("%s has %d items (%x)", "cart", 42, 255)
# 'cart has 42 items (ff)'

count = ft_printf("%c%c%%\n", "o", "k")   # writes "ok%\n", returns 4
```

`ft_printf(fmt, *args, stream=None)` writes to `stream` (standard output
when none is given) and returns the number of characters it wrote.
`render(fmt, *args)` returns the text instead of writing it.

Supported conversions:

| Spec | Argument | Output |
|------|----------|--------|
| `%c` | one-character string or character code | the character |
| `%s` | string or `None` | the string up to its first NUL, or `(null)` for `None` |
| `%p` | integer address or `None` | `0x` followed by lower-case hex (64-bit), or `0x0` for zero or `None` |
| `%d`, `%i` | integer | signed decimal, wrapped to 32 bits |
| `%u` | integer | unsigned decimal, wrapped to 32 bits |
| `%x`, `%X` | integer | lower-case / upper-case hexadecimal, wrapped to 32 bits |
| `%%` | none | a literal `%` |

Flags, widths and precisions are not supported. A `%` followed by any other
character produces no output and skips that character; a lone `%` at the
end of the format prints nothing. A NUL character ends the format. If the
format asks for more arguments than were given, `TypeError` is raised.

## Helpers

- `ftprintf.numconv`: `itoa` (32-bit signed; raises `OverflowError` out of
  range), `uitoa` (32-bit unsigned), `atoi` (skips leading whitespace, one
  optional sign, stops at the first non-digit, gives 0 when there are no
  digits), `to_hex` (32-bit) and `to_hex_long` (64-bit), plus the constants
  `INT_MIN` and `INT_MAX`.
- `ftprintf.chars`: `isalpha`, `isdigit`, `isalnum`, `isascii`, `isprint`,
  `tolower`, `toupper`. Each takes a character code or a one-character
  string; the case conversions return the same kind of value they were given.
- `ftprintf.strings`: `strlen`, `strchr`, `strrchr`, `strdup`, `strjoin`,
  `strlcpy`, `strlcat`, `strncmp`, `strnstr`, `substr`, `strtrim`, `split`,
  `strmapi`, `striteri`. A NUL inside a string ends it. Searches return an
  index or `None`. `strlcpy` and `strlcat` return a `(text, length)` pair.
  `striteri` works in place on a mutable sequence, replacing an item when the
  callback returns something other than `None`.
- `ftprintf.memory`: `bzero`, `calloc`, `memset`, `memcpy`, `memmove`,
  `memchr`, `memcmp` on bytes-like objects; the writing functions need a
  `bytearray`. `memmove` takes optional `dst_offset` and `src_offset` and
  handles overlapping regions. Spans past the end of a buffer raise
  `IndexError`; negative lengths raise `ValueError`.
- `ftprintf.output`: `put_char`, `put_str`, `put_ptr`, `put_int`,
  `put_uint`, `put_hex` write to a text stream (standard output by default)
  and return the number of characters written; `putchar_fd`, `putstr_fd`,
  `putendl_fd`, `putnbr_fd` write UTF-8 bytes to an open file descriptor.

```python
from ftprintf.numconv import itoa, to_hex
from ftprintf.strings import split, strtrim

itoa(-2147483648)          # '-2147483648'
to_hex(48879, True)        # 'BEEF'
split("  a b  c ", " ")    # ['a', 'b', 'c']
strtrim("xxhixx", "x")     # 'hi'
```

## What it does not do

This is a library only: it has no command-line program. Its printf covers
only the conversions listed above, with no field widths, padding, precision
or length modifiers, and no floating-point output.