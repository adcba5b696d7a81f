"""Arithmetic on little-endian sequences of unsigned 64-bit limbs.

Every operand is a sequence of integers in ``0 .. 2**64 - 1``; the limb at
position 0 is the least significant one. Binary operations require operands of
equal length.
"""

from __future__ import annotations

from collections.abc import Sequence

WORD_BITS = 64
MASK = (1 << WORD_BITS) - 1
SCHOOL_LIMIT = 8


def _validate(*operands: Sequence[int]) -> int:
    lengths = {len(operand) for operand in operands}
    if len(lengths) != 1:
        raise ValueError("operands must have the same number of limbs")
    for operand in operands:
        if any(not 0 <= limb <= MASK for limb in operand):
            raise ValueError("limb outside the unsigned 64-bit range")
    return lengths.pop()


def _to_int(limbs: Sequence[int]) -> int:
    return sum(limb << (WORD_BITS * pos) for pos, limb in enumerate(limbs))


def _from_int(value: int, count: int) -> list[int]:
    return [(value >> (WORD_BITS * pos)) & MASK for pos in range(count)]


def _pad(limbs: Sequence[int], count: int) -> list[int]:
    return list(limbs) + [0] * (count - len(limbs))


def _add_carry(a: Sequence[int], b: Sequence[int]) -> tuple[list[int], int]:
    out = []
    carry = 0
    for x, y in zip(a, b):
        total = x + y + carry
        out.append(total & MASK)
        carry = total >> WORD_BITS
    return out, carry


def _sub_borrow(a: Sequence[int], b: Sequence[int]) -> list[int]:
    out = []
    borrow = 0
    for x, y in zip(a, b):
        diff = x - y - borrow
        borrow = 1 if diff < 0 else 0
        out.append(diff & MASK)
    return out


def _school(a: Sequence[int], b: Sequence[int]) -> list[int]:
    dst = [0] * (len(a) + len(b))
    for i, x in enumerate(a):
        if not x:
            continue
        carry = 0
        for j, y in enumerate(b):
            total = dst[i + j] + x * y + carry
            dst[i + j] = total & MASK
            carry = total >> WORD_BITS
        dst[i + len(b)] = carry
    return dst


def _accumulate(dst: list[int], src: Sequence[int], offset: int) -> None:
    """Add ``src`` into ``dst`` at limb ``offset``, dropping overflow past the end."""
    width = len(dst)
    carry = 0
    for pos, limb in enumerate(src, start=offset):
        if pos >= width:
            return
        total = dst[pos] + limb + carry
        dst[pos] = total & MASK
        carry = total >> WORD_BITS
    pos = offset + len(src)
    while carry and pos < width:
        total = dst[pos] + carry
        dst[pos] = total & MASK
        carry = total >> WORD_BITS
        pos += 1


def _widened_sum(low: Sequence[int], high: Sequence[int]) -> list[int]:
    out, carry = _add_carry(_pad(low, len(high)), high)
    return out + [carry]


def _karatsuba(a: Sequence[int], b: Sequence[int]) -> list[int]:
    n = len(a)
    if n <= SCHOOL_LIMIT:
        return _school(a, b)

    half = n // 2
    a0, a1 = a[:half], a[half:]
    b0, b1 = b[:half], b[half:]

    z0 = _karatsuba(a0, b0)
    z2 = _karatsuba(a1, b1)
    z1 = _karatsuba(_widened_sum(a0, a1), _widened_sum(b0, b1))
    z1 = _sub_borrow(z1, _pad(z0, len(z1)))
    z1 = _sub_borrow(z1, _pad(z2, len(z1)))

    dst = [0] * (2 * n)
    _accumulate(dst, z0, 0)
    _accumulate(dst, z1, half)
    _accumulate(dst, z2, 2 * half)
    return dst


def less_than(a: Sequence[int], b: Sequence[int]) -> bool:
    """Return whether ``a`` is numerically smaller than ``b``."""
    _validate(a, b)
    for x, y in zip(reversed(a), reversed(b)):
        if x != y:
            return x < y
    return False


def add(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """Return ``a + b`` modulo ``2**(64 * len(a))``."""
    _validate(a, b)
    return _add_carry(a, b)[0]


def sub(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """Return ``a - b`` modulo ``2**(64 * len(a))``."""
    _validate(a, b)
    return _sub_borrow(a, b)


def mul_school(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """Return the full ``2 * len(a)``-limb product by schoolbook multiplication."""
    _validate(a, b)
    return _school(list(a), list(b))


def mul_karatsuba(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """Return the full ``2 * len(a)``-limb product by Karatsuba multiplication."""
    _validate(a, b)
    return _karatsuba(list(a), list(b))


def divmod_basic(
    numerator: Sequence[int], denominator: Sequence[int]
) -> tuple[list[int], list[int]]:
    """Return ``(quotient, remainder)`` limbs; raise ZeroDivisionError on a zero divisor."""
    count = _validate(numerator, denominator)
    divisor = _to_int(denominator)
    if divisor == 0:
        raise ZeroDivisionError("division by zero")
    quotient, remainder = divmod(_to_int(numerator), divisor)
    return _from_int(quotient, count), _from_int(remainder, count)