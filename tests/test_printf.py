import io

import pytest

from miniprintf.printf import format_conversion, printf, render


def test_plain_text():
    assert render("Hello, World!") == "Hello, World!"


def test_character_and_string():
    assert render("%c%c %s", "h", "i", "there") == "hi there"


def test_null_string_and_pointer():
    assert render("%s|%p", None, 0) == "(null)|(nil)"


def test_integers():
    assert render("%d %i", 12345, -12345) == "12345 -12345"
    assert render("%d", -2147483648) == "-2147483648"


def test_unsigned_and_hex():
    text = render("%u %x %X", 12345, 255, 255)
    dec, low, up = text.split(" ")
    assert int(dec) == 12345
    assert int(low, 16) == 255
    assert up == low.upper()


def test_pointer_has_prefix():
    text = render("%p", 4096)
    assert text.startswith("0x")
    assert int(text[2:], 16) == 4096


def test_percent_sign():
    assert render("100%%") == "100%"


def test_unknown_conversion_consumes_no_argument():
    assert render("%q%s", "x") == "qx"


def test_trailing_percent():
    assert render("abc%") == "abc\0"


def test_missing_argument():
    with pytest.raises(TypeError):
        render("%d %d", 1)


def test_extra_arguments_are_ignored():
    assert render("%s", "a", "b") == "a"


def test_format_conversion_consumes_one():
    args = iter(["first", "second"])
    assert format_conversion("s", args) == "first"
    assert next(args) == "second"


def test_format_conversion_literal():
    args = iter([1])
    assert format_conversion("%", args) == "%"
    assert next(args) == 1


def test_printf_writes_and_counts():
    buf = io.StringIO()
    count = printf("Character: %c %c %c\n", "A", "d", "h", stream=buf)
    assert buf.getvalue() == render("Character: %c %c %c\n", "A", "d", "h")
    assert count == len(buf.getvalue())


def test_printf_default_stdout(capsys):
    count = printf("String: %s\n", "Hello, World!")
    out = capsys.readouterr().out
    assert out == "String: Hello, World!\n"
    assert count == len(out)