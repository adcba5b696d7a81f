"""Command that prints successive powers of sixteen in a fixed width."""

from __future__ import annotations

import argparse
from collections.abc import Iterator

from fixbig.bigint import Base, BigInt

_BASES = {"hex": Base.HEX, "dec": Base.DEC, "bin": Base.BIN}


def powers_of_sixteen(count: int = 1024, bits: int = 8192) -> Iterator[BigInt]:
    """Yield ``16**1 .. 16**count`` as ``bits``-wide integers, wrapping on overflow."""
    if count < 0:
        raise ValueError("count must not be negative")
    value = BigInt(0x10, bits)
    for _ in range(count):
        yield value
        value *= 0x10


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="fixbig", description="Print successive powers of sixteen."
    )
    parser.add_argument("--count", type=int, default=1024, help="number of powers to print")
    parser.add_argument("--bits", type=int, default=8192, help="integer width in bits")
    parser.add_argument("--base", choices=sorted(_BASES), default="hex", help="output base")
    args = parser.parse_args(argv)

    if args.count < 0:
        parser.error("--count must not be negative")
    base = _BASES[args.base]
    try:
        for value in powers_of_sixteen(args.count, args.bits):
            print(value.to_string(base))
    except ValueError as exc:
        parser.error(str(exc))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())