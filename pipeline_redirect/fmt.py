"""A small printf-style formatter with a fixed set of conversions."""

from __future__ import annotations

import operator
import sys
from typing import IO, Any, Callable

_INT_BITS = 32
_PTR_BITS = 64


def _signed(value: Any) -> int:
    number = operator.index(value)
    half = 1 << (_INT_BITS - 1)
    return (number + half) % (1 << _INT_BITS) - half


def _unsigned(value: Any) -> int:
    return operator.index(value) % (1 << _INT_BITS)


def _char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError("%c needs a single character")
        return value
    return chr(operator.index(value) % 256)


def _string(value: Any) -> str:
    return "(null)" if value is None else str(value)


def _pointer(value: Any) -> str:
    if value is None:
        return "(nil)"
    address = operator.index(value) % (1 << _PTR_BITS)
    return "(nil)" if address == 0 else f"0x{address:x}"


def _decimal(value: Any) -> str:
    return str(_signed(value))


def _udecimal(value: Any) -> str:
    return str(_unsigned(value))


def _hex_lower(value: Any) -> str:
    return f"{_unsigned(value):x}"


def _hex_upper(value: Any) -> str:
    return f"{_unsigned(value):X}"


_HANDLERS: dict[str, Callable[[Any], str]] = {
    "c": _char,
    "s": _string,
    "p": _pointer,
    "d": _decimal,
    "i": _decimal,
    "u": _udecimal,
    "x": _hex_lower,
    "X": _hex_upper,
}


def format_printf(template: str, *args: Any) -> str:
    """Expand the conversions ``%c %s %p %d %i %u %x %X %%`` in ``template``.

    Integers are taken as 32-bit values (64-bit for ``%p``), as the
    conversions would see them. Extra arguments are ignored.
    """
    values = iter(args)
    out: list[str] = []
    chars = iter(template)
    for ch in chars:
        if ch != "%":
            out.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            raise ValueError("template ends with a lone '%'")
        if spec == "%":
            out.append("%")
            continue
        handler = _HANDLERS.get(spec)
        if handler is None:
            raise ValueError(f"unsupported conversion: %{spec}")
        try:
            value = next(values)
        except StopIteration:
            raise TypeError("not enough arguments for format") from None
        out.append(handler(value))
    return "".join(out)


def printf(template: str, *args: Any, file: IO[str] | None = None) -> int:
    """Write the formatted text to ``file`` (standard output by default).

    Returns the number of characters written.
    """
    text = format_printf(template, *args)
    stream = sys.stdout if file is None else file
    stream.write(text)
    stream.flush()
    return len(text)