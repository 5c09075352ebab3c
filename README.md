# miniprintf

A compact printf-style formatter with a small, fixed set of conversions.
`printf` returns the number of characters it wrote.

## Installation

```
pip install miniprintf
```

## Usage

```python
import sys
from miniprintf.printf import printf, render

count = printf("Hello, %s! %d%%\n", "world", 42, stream=sys.stdout)
# prints "Hello, world! 42%" and a newline, and returns 18

text = render("%x %X %p", 255, 255, 0x1A2B)
# "ff FF 0x1a2b"
```

- `render(fmt, *args)` builds the formatted string and returns it.
- `printf(fmt, *args, stream=None)` writes that string to `stream`
  (standard output when `stream` is `None`) and returns its length.

## Conversions

| Spec       | Argument                  | Output                                              |
|------------|---------------------------|-----------------------------------------------------|
| `%c`       | 1-character str, or int   | the character; for an int, the code's low byte      |
| `%s`       | str or `None`             | the text, or `(null)` for `None`                    |
| `%p`       | int or `None`             | `0x` plus lowercase hex (64-bit), or `(nil)` for zero or `None` |
| `%d`, `%i` | int                       | signed decimal, wrapped to a 32-bit integer         |
| `%u`       | int                       | unsigned decimal, wrapped to 32 bits                |
| `%x`, `%X` | int                       | unsigned 32-bit hex, lower or upper case            |
| `%%`       | none                      | a literal `%`                                       |

Other behaviour:

- Any other character after `%` is written out as it is and takes no argument.
- A lone `%` at the very end of the format writes a NUL character (`"\0"`)
  and ends the output.
- Too few arguments for the conversions raises `TypeError`; so does a
  non-string for `%s`. A string of length other than one for `%c` raises
  `ValueError`. Extra arguments are ignored.
- Flags, field widths and precision are not supported.

## Modules

`miniprintf.conversions` holds one function per conversion:
`format_character`, `format_string`, `format_number`, `format_unsigned`,
`format_hexadecimal(num, word)` (with `word` `"x"` or `"X"`, anything else
raises `ValueError`) and `format_pointer`.

`miniprintf.printf.format_conversion(word, args)` returns the text for one
conversion character, taking its argument from the iterator `args`.