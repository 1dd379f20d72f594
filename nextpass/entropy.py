"""
Entropy sources and the bounded uniform draw.

A source is any object with a binary file-like ``read(size) -> bytes``
method: ``io.BytesIO``, a file opened in ``"rb"`` mode, :class:`SystemSource`,
or an :class:`EntropyCounter` wrapping one of those.
"""

from __future__ import annotations

import os
from typing import Protocol


class ByteSource(Protocol):
    def read(self, size: int) -> bytes:
        ...


class SystemSource:
    """
    Default source: the operating system CSPRNG via ``os.urandom``.
    """

    def read(self, size: int) -> bytes:
        return os.urandom(size)

    def __repr__(self) -> str:
        return "SystemSource()"


class EntropyCounter:
    """
    Forward reads to ``source`` and count the bytes it delivered.

    Errors from the wrapped source propagate unchanged and leave the
    count untouched. No buffering, no retries.
    """

    def __init__(self, source: ByteSource) -> None:
        self._source = source
        self._count = 0

    @property
    def count(self) -> int:
        return self._count

    def read(self, size: int) -> bytes:
        data = self._source.read(size)
        self._count += len(data)
        return data


def read_full(source: ByteSource, size: int) -> bytes:
    """
    Read exactly ``size`` bytes from ``source``.

    Short reads are completed with further reads. An empty read before
    ``size`` bytes were collected means the source is exhausted and
    raises ``EOFError``. A source that returns more than it was asked for
    breaks the read contract and raises ``ValueError``.
    """
    chunks: list[bytes] = []
    remaining = size
    while remaining > 0:
        chunk = source.read(remaining)
        if not chunk:
            raise EOFError(
                f"entropy source exhausted after {size - remaining} of {size} bytes"
            )
        if len(chunk) > remaining:
            raise ValueError(
                f"entropy source returned {len(chunk)} bytes when {remaining} were requested"
            )
        chunks.append(chunk)
        remaining -= len(chunk)
    return b"".join(chunks)


def random_below(source: ByteSource, bound: int) -> int:
    """
    Return an integer drawn uniformly from ``[0, bound)``.

    Reads the minimum number of bytes that can represent ``bound - 1``,
    masks the surplus high bits of the leading byte and rejects values
    outside the range, so no modulo bias is introduced. A bound of 1
    returns 0 without touching the source.
    """
    if bound <= 0:
        raise ValueError(f"bound must be positive, got {bound}")

    bit_len = (bound - 1).bit_length()
    if bit_len == 0:
        return 0

    num_bytes = (bit_len + 7) // 8
    # Bits of bound - 1 that live in the most significant byte.
    top_bits = bit_len % 8 or 8
    top_mask = (1 << top_bits) - 1

    while True:
        raw = bytearray(read_full(source, num_bytes))
        raw[0] &= top_mask
        value = int.from_bytes(raw, "big")
        if value < bound:
            return value
