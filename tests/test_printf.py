import io

import pytest
from hypothesis import given, strategies as st

from ftprintf.numconv import INT_MAX, INT_MIN
from ftprintf.printf import ft_printf, render


def test_plain_text():
    assert render("hello") == "hello"


@given(st.text(alphabet=st.characters(blacklist_characters="%\0")))
def test_text_without_conversions_is_unchanged(text):
    assert render(text) == text


def test_percent_escape():
    assert render("%%") == "%"
    assert render("100%%") == "100%"


def test_char_conversion():
    assert render("%c", "A") == "A"
    assert render("%c", ord("B")) == "B"


@given(st.text(alphabet=st.characters(blacklist_characters="\0")))
def test_string_conversion(text):
    assert render("%s", text) == text


def test_null_string():
    assert render("%s", None) == "(null)"


def test_null_pointer():
    assert render("%p", None) == "0x0"


@given(st.integers(min_value=1, max_value=2**64 - 1))
def test_pointer_conversion(address):
    out = render("%p", address)
    assert out.startswith("0x")
    assert int(out, 16) == address


@given(st.integers(min_value=INT_MIN, max_value=INT_MAX))
def test_signed_conversions(n):
    assert int(render("%d", n)) == n
    assert render("%i", n) == render("%d", n)


def test_int_min():
    assert render("%d", INT_MIN) == "-2147483648"


def test_unsigned_wraps_negative():
    assert render("%u", -1) == str(2**32 - 1)


@given(st.integers(min_value=0, max_value=2**32 - 1))
def test_hex_conversions(n):
    lower = render("%x", n)
    assert int(lower, 16) == n
    assert lower == lower.lower()
    assert render("%X", n) == lower.upper()


def test_conversions_in_sequence():
    assert render("%s%d", "n=", 5) == "n=" + "5"


def test_unknown_conversion_is_dropped():
    assert render("a%qb") == "ab"


def test_trailing_percent_prints_nothing():
    assert render("abc%") == "abc"


def test_nul_ends_format():
    assert render("ab\0%d") == "ab"


def test_missing_argument():
    with pytest.raises(TypeError):
        render("%d %d", 1)


def test_extra_arguments_ignored():
    assert render("x", 1, 2) == "x"


@given(st.integers(min_value=INT_MIN, max_value=INT_MAX), st.text(alphabet="abc%"))
def test_ft_printf_matches_render(n, prefix):
    fmt = prefix.replace("%", "%%") + "[%d]"
    buf = io.StringIO()
    count = ft_printf(fmt, n, stream=buf)
    assert buf.getvalue() == render(fmt, n)
    assert count == len(buf.getvalue())


def test_ft_printf_default_stream(capsys):
    count = ft_printf("%s!", "hi")
    out = capsys.readouterr().out
    assert out == "hi!"
    assert count == len(out)