"""Reversal of the byte order of fixed-size integers and floats."""

from __future__ import annotations

import struct

_FORMATS = frozenset("bBhHiIlLqQfd")


def byte_swap(value: int | float, fmt: str) -> int | float:
    """Reverse the bytes of ``value`` stored with the struct format code
    ``fmt`` (one of b, B, h, H, i, I, l, L, q, Q, f, d; standard sizes)."""
    if fmt not in _FORMATS:
        raise ValueError(f"unsupported format for byte swapping: {fmt!r}")
    try:
        packed = struct.pack("<" + fmt, value)
    except struct.error as exc:
        raise ValueError(f"cannot store {value!r} as {fmt!r}: {exc}") from None
    return struct.unpack(">" + fmt, packed)[0]