"""Integer-to-text and float-to-text conversions for 32-bit embedded targets.

``int``, ``long``, ``unsigned int`` and ``unsigned long`` are all 32 bits
wide here. Values outside that range wrap, as they would when stored in
such a type.
"""

from __future__ import annotations

__all__ = ["itoa", "ltoa", "utoa", "ultoa", "dtostrf"]

_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"
_WORD_BITS = 32
_WORD_MASK = (1 << _WORD_BITS) - 1
_SIGN_BIT = 1 << (_WORD_BITS - 1)


def _check_radix(radix: int) -> None:
    if not 2 <= radix <= 36:
        raise ValueError(f"radix must be between 2 and 36, got {radix}")


def _to_signed(value: int) -> int:
    value &= _WORD_MASK
    return value - (1 << _WORD_BITS) if value & _SIGN_BIT else value


def _format_unsigned(value: int, radix: int) -> str:
    digits = []
    while True:
        value, digit = divmod(value, radix)
        digits.append(_DIGITS[digit])
        if not value:
            break
    return "".join(reversed(digits))


def ltoa(value: int, radix: int) -> str:
    """Format a signed long in the given radix.

    A minus sign is written only for radix 10; in any other radix a negative
    value is shown as its 32-bit two's-complement pattern.
    """
    _check_radix(radix)
    value = _to_signed(value)
    if radix == 10 and value < 0:
        return "-" + _format_unsigned(-value, radix)
    return _format_unsigned(value & _WORD_MASK, radix)


def itoa(value: int, radix: int) -> str:
    """Format a signed int in the given radix (same rules as :func:`ltoa`)."""
    return ltoa(value, radix)


def ultoa(value: int, radix: int) -> str:
    """Format an unsigned long in the given radix."""
    _check_radix(radix)
    return _format_unsigned(value & _WORD_MASK, radix)


def utoa(value: int, radix: int) -> str:
    """Format an unsigned int in the given radix."""
    return ultoa(value, radix)


def dtostrf(val: float, width: int, prec: int) -> str:
    """Format ``val`` as ``%<width>.<prec>f``.

    A negative width left-justifies the result within ``-width`` columns.
    """
    if not -128 <= width <= 127:
        raise ValueError(f"width must fit in a signed char, got {width}")
    if not 0 <= prec <= 255:
        raise ValueError(f"precision must fit in an unsigned char, got {prec}")
    return "%*.*f" % (width, prec, float(val))