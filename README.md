# nonisoconv

Small helpers in `nonisoconv.noniso` that turn numbers into text the way
common 32-bit microcontroller runtimes do.

- `itoa(value, radix)` and `ltoa(value, radix)` take a signed integer.
  In base 10 a negative value gets a leading `-`; in any other base a
  negative value is written as its 32-bit two's-complement bit pattern.
- `utoa(value, radix)` and `ultoa(value, radix)` take an unsigned integer.
- `dtostrf(val, width, prec)` formats a float as `%<width>.<prec>f`: `prec`
  digits after the decimal point, right-aligned in a field at least `width`
  characters wide. A negative width left-aligns within `-width` columns.

Integers are treated as 32 bits wide: a value outside that range wraps, as
it would when stored in a 32-bit type. Digits above 9 are written as
lower-case letters, and zero is written as `0`.

## Errors

All of these raise `ValueError`:

- a radix outside 2 to 36 for any of the integer functions;
- a `dtostrf` width outside -128 to 127;
- a `dtostrf` precision outside 0 to 255.

## Installation

```
pip install nonisoconv
```

## Usage

```python
from nonisoconv.noniso import itoa, ltoa, utoa, ultoa, dtostrf

itoa(1000, 10)          # '1000'
itoa(45, 16)            # '2d'
itoa(255, 2)            # '11111111'
ltoa(-42, 10)           # '-42'
ltoa(-1, 16)            # 'ffffffff'
utoa(0, 8)              # '0'
ultoa(-1, 10)           # '4294967295'
dtostrf(5.698, 0, 3)    # '5.698'
dtostrf(3.14159, 8, 2)  # '    3.14'
dtostrf(3.14159, -8, 2) # '3.14    '
```

## Running the tests

```
pip install "nonisoconv[test]"
pytest
```