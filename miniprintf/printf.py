"""A small printf: %c %s %p %d %i %u %x %X and %%."""

from __future__ import annotations

import sys
from typing import Any, Iterator, TextIO

from miniprintf.conversions import (
    format_character,
    format_hexadecimal,
    format_number,
    format_pointer,
    format_string,
    format_unsigned,
)

_CONVERTERS = {
    "c": format_character,
    "s": format_string,
    "p": format_pointer,
    "d": format_number,
    "i": format_number,
    "u": format_unsigned,
}


def _next_arg(args: Iterator[Any], word: str) -> Any:
    try:
        return next(args)
    except StopIteration:
        raise TypeError(f"not enough arguments for conversion %{word}") from None


def format_conversion(word: str, args: Iterator[Any]) -> str:
    """Return the text for one conversion, taking its argument from ``args``.

    A character that is not a known conversion is emitted as itself and
    consumes no argument.
    """
    converter = _CONVERTERS.get(word)
    if converter is not None:
        return converter(_next_arg(args, word))
    if word in ("x", "X"):
        return format_hexadecimal(_next_arg(args, word), word)
    return word


def _pieces(fmt: str, args: tuple[Any, ...]) -> Iterator[str]:
    arg_iter = iter(args)
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            yield ch
            continue
        word = next(chars, None)
        if word is None:
            # A lone trailing '%' emits the terminating NUL and ends the format.
            yield "\0"
            return
        yield format_conversion(word, arg_iter)


def render(fmt: str, *args: Any) -> str:
    """Return the formatted text without writing it anywhere."""
    return "".join(_pieces(fmt, args))


def printf(fmt: str, *args: Any, stream: TextIO | None = None) -> int:
    """Write the formatted text to ``stream`` (stdout by default); return its length."""
    text = render(fmt, *args)
    out = sys.stdout if stream is None else stream
    out.write(text)
    return len(text)