"""
Mapping logic: Convert a bounded random integer into a password, and back.
"""

from __future__ import annotations

from typing import Sequence


def int_to_symbols(value: int, alphabet: Sequence[str], length: int) -> str:
    """
    Write ``value`` as ``length`` digits in base ``len(alphabet)``.

    We:
    - Repeatedly divmod the running value by the base.
    - Use each remainder as an index into the alphabet.
    - Fill the password from the end, so the first symbol is the most
      significant digit and the output follows the byte order of the
      random draw.

    Digits above ``length`` are dropped, so ``value`` is expected to be
    below ``len(alphabet) ** length``.
    """
    if value < 0:
        raise ValueError(f"value must not be negative, got {value}")

    base = len(alphabet)
    password_chars = [""] * length

    for i in range(length - 1, -1, -1):
        value, digit = divmod(value, base)
        password_chars[i] = alphabet[digit]

    return "".join(password_chars)


def symbols_to_int(password: str, alphabet: Sequence[str]) -> int:
    """
    Inverse of :func:`int_to_symbols`: read ``password`` as a base
    ``len(alphabet)`` number, most significant symbol first.
    """
    index = {symbol: i for i, symbol in enumerate(alphabet)}
    base = len(alphabet)

    value = 0
    for pos, symbol in enumerate(password):
        if symbol not in index:
            raise ValueError(f"Symbol {symbol!r} at offset {pos} is not in the alphabet")
        value = value * base + index[symbol]
    return value
