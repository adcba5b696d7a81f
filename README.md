# fixbig

Fixed-width unsigned integers made of 64-bit limbs. Every value has a set bit
width, and arithmetic wraps around modulo `2**width`, the way hardware integers
do, only wider.

## Install

```
pip install fixbig
```

For the test suite:

```
pip install "fixbig[test]"
pytest
```

## Usage

```python
from fixbig.bigint import BigInt, Base

a = BigInt(0x10, bits=256)
b = BigInt(3, bits=256)

print((a * b).to_string(Base.HEX))   # 0x30
print((a - b).to_string(Base.DEC))   # 13
print(a.to_string(Base.BIN))         # 0b10000
print(str(a))                        # 0x10, hexadecimal is the default

zero = BigInt(0, bits=256)
wrapped = zero.decremented()         # wraps to 2**256 - 1
print(int(wrapped) == 2**256 - 1)    # True
```

`bits` is rounded up to a whole number of 64-bit limbs, and that limb count
must be a multiple of four, so 256, 512, 1024, 2048, 4096 and 8192 bits all
work; other counts raise `ValueError`, as does a value that is negative or does
not fit. The `width` property gives the rounded width in bits.

A `BigInt` can be compared and combined with a plain `int` (which is converted
to the same width) or with another `BigInt` of the same width. Mixing widths in
arithmetic or ordering raises `TypeError`; `==` between different widths is
simply `False`. `incremented()` and `decremented()` return `self + 1` and
`self - 1` with wrap-around.

`limbs()` returns the value's limbs, least significant first. Multiplication
keeps the low half of the full product. It uses schoolbook multiplication up to
512 bits and Karatsuba above that.

`to_string()` accepts `Base.HEX` (the default), `Base.DEC` or `Base.BIN`, or
the numbers 16, 10 and 2. Zero is printed as `"0"` in every base.

The limb-level routines are in `fixbig.limbs`: `less_than`, `add`, `sub`,
`mul_school`, `mul_karatsuba` and `divmod_basic`. Each takes sequences of
64-bit limbs of equal length, least significant first, and raises `ValueError`
for mismatched lengths or out-of-range limbs. `add` and `sub` wrap; the two
multiplications return the full double-length product. `divmod_basic` returns
`(quotient, remainder)` and raises `ZeroDivisionError` when the divisor is zero.

## Command line

```
fixbig
```

This prints the powers of sixteen from `0x10` upwards, one per line, computed
in an 8192-bit integer: 1024 lines, ending at `16**1024`. Options:

- `--count N` — how many powers to print (default 1024)
- `--bits N` — the integer width (default 8192); with a small width the later
  powers wrap around to `0`
- `--base {hex,dec,bin}` — the output base (default `hex`)

## Limits

There is no `BigInt` division operator, and values are unsigned only.