"""Text produced by each conversion that the formatter understands.

Integer arguments behave as fixed-width machine values. Signed and unsigned
conversions wrap to 32 bits, and pointers wrap to 64 bits.
"""

from __future__ import annotations

_UINT32 = 1 << 32
_UINT64 = 1 << 64
_INT32_MIN = -(1 << 31)

NULL_STRING = "(null)"
NULL_POINTER = "(nil)"
POINTER_PREFIX = "0x"

_LOWER_DIGITS = "0123456789abcdef"
_UPPER_DIGITS = "0123456789ABCDEF"


def _to_int32(n: int) -> int:
    n %= _UINT32
    return n - _UINT32 if n >= -_INT32_MIN else n


def _to_hex(num: int, digits: str) -> str:
    if num == 0:
        return digits[0]
    out = []
    while num:
        num, rem = divmod(num, 16)
        out.append(digits[rem])
    return "".join(reversed(out))


def format_character(character: int | str) -> str:
    """Return one character, given as a code (low byte kept) or a 1-char string."""
    if isinstance(character, str):
        if len(character) != 1:
            raise ValueError("a character conversion takes exactly one character")
        return character
    if isinstance(character, int):
        return chr(character % 256)
    raise TypeError(f"cannot format {type(character).__name__} as a character")


def format_string(text: str | None) -> str:
    """Return the text itself, or "(null)" for None."""
    if text is None:
        return NULL_STRING
    if not isinstance(text, str):
        raise TypeError(f"cannot format {type(text).__name__} as a string")
    return text


def format_number(n: int) -> str:
    """Return a signed decimal, wrapping the value to a 32-bit integer."""
    return str(_to_int32(int(n)))


def format_unsigned(n: int) -> str:
    """Return an unsigned decimal, wrapping the value to 32 bits."""
    return str(int(n) % _UINT32)


def format_hexadecimal(num: int, word: str) -> str:
    """Return a 32-bit unsigned value in hex; ``word`` is 'x' or 'X' for the case."""
    if word == "x":
        digits = _LOWER_DIGITS
    elif word == "X":
        digits = _UPPER_DIGITS
    else:
        raise ValueError(f"hexadecimal conversion must be 'x' or 'X', not {word!r}")
    return _to_hex(int(num) % _UINT32, digits)


def format_pointer(ptr: int | None) -> str:
    """Return a 64-bit address as "0x" plus lower-case hex, or "(nil)" for zero."""
    if ptr is None:
        return NULL_POINTER
    ptr = int(ptr) % _UINT64
    if ptr == 0:
        return NULL_POINTER
    return POINTER_PREFIX + _to_hex(ptr, _LOWER_DIGITS)