"""Fixed-width unsigned integers with wrap-around arithmetic."""

from __future__ import annotations

from enum import Enum

from fixbig.limbs import MASK, WORD_BITS, less_than, add, mul_karatsuba, mul_school, sub

KARATSUBA_THRESHOLD = 512


class Base(Enum):
    """Number bases understood by :meth:`BigInt.to_string`."""

    DEC = 10
    HEX = 16
    BIN = 2


class BigInt:
    """An unsigned integer of a fixed bit width, stored as 64-bit limbs.

    The width is ``bits`` rounded up to whole limbs, and the limb count must be
    a multiple of four. Arithmetic wraps modulo ``2**width``.
    """

    __slots__ = ("_bits", "_limbs")

    def __init__(self, value: int = 0, bits: int = 256) -> None:
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError("value must be an int")
        if isinstance(bits, bool) or not isinstance(bits, int) or bits <= 0:
            raise ValueError("bits must be a positive int")
        count = -(-bits // WORD_BITS)
        if count % 4:
            raise ValueError("the number of 64-bit limbs must be divisible by 4")
        if not 0 <= value < 1 << (count * WORD_BITS):
            raise ValueError(f"value does not fit in {count * WORD_BITS} bits")
        self._bits = bits
        self._limbs = tuple((value >> (WORD_BITS * pos)) & MASK for pos in range(count))

    @classmethod
    def _wrap(cls, bits: int, limbs) -> BigInt:
        obj = object.__new__(cls)
        obj._bits = bits
        obj._limbs = tuple(limbs)
        return obj

    @property
    def bits(self) -> int:
        return self._bits

    @property
    def width(self) -> int:
        return len(self._limbs) * WORD_BITS

    def limbs(self) -> tuple[int, ...]:
        """Return the limbs, least significant first."""
        return self._limbs

    def _coerce(self, other) -> BigInt | None:
        if isinstance(other, BigInt):
            if len(other._limbs) != len(self._limbs):
                raise TypeError("operands have different widths")
            return other
        if isinstance(other, int) and not isinstance(other, bool):
            return BigInt(other, self._bits)
        return None

    def __lt__(self, other):
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return less_than(self._limbs, rhs._limbs)

    def __le__(self, other):
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return not less_than(rhs._limbs, self._limbs)

    def __gt__(self, other):
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return less_than(rhs._limbs, self._limbs)

    def __ge__(self, other):
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return not less_than(self._limbs, rhs._limbs)

    def __eq__(self, other):
        try:
            rhs = self._coerce(other)
        except (TypeError, ValueError):
            return False
        if rhs is None:
            return NotImplemented
        return self._limbs == rhs._limbs

    def __hash__(self) -> int:
        return hash(int(self))

    def __add__(self, other):
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self._wrap(self._bits, add(self._limbs, rhs._limbs))

    __radd__ = __add__

    def __sub__(self, other):
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return self._wrap(self._bits, sub(self._limbs, rhs._limbs))

    def __rsub__(self, other):
        lhs = self._coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs - self

    def __mul__(self, other):
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        multiply = mul_karatsuba if self._bits > KARATSUBA_THRESHOLD else mul_school
        product = multiply(self._limbs, rhs._limbs)
        return self._wrap(self._bits, product[: len(self._limbs)])

    __rmul__ = __mul__

    def __int__(self) -> int:
        return sum(limb << (WORD_BITS * pos) for pos, limb in enumerate(self._limbs))

    def __index__(self) -> int:
        return int(self)

    def incremented(self) -> BigInt:
        """Return ``self + 1``, wrapping at the top of the range."""
        return self + 1

    def decremented(self) -> BigInt:
        """Return ``self - 1``, wrapping below zero."""
        return self - 1

    def to_string(self, base: Base | int = Base.HEX) -> str:
        """Format the value; zero is ``"0"`` in every base."""
        base = Base(base)
        value = int(self)
        if value == 0:
            return "0"
        if base is Base.HEX:
            return f"0x{value:x}"
        if base is Base.BIN:
            return f"0b{value:b}"
        return str(value)

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"BigInt({self.to_string()}, bits={self._bits})"