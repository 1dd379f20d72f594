"""
Password generator: validated alphabet and length, complexity queries,
and generation from a single bounded random draw.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable

from .entropy import ByteSource, EntropyCounter, SystemSource, random_below
from .errors import (
    DuplicateSymbolError,
    EmptyAlphabetError,
    EntropyUnavailableError,
    InvalidLengthError,
    InvalidSymbolError,
    SourceLockedError,
)
from .mapping import int_to_symbols

logger = logging.getLogger(__name__)


@dataclass
class GenerationResult:
    """
    Full result of one password generation.
    """
    # Final password
    password: str

    # Bytes consumed from the entropy source, rejected draws included
    bytes_read: int

    # Strength metadata for reporting
    alphabet_size: int
    bits: int


class Generator:
    """
    Generates passwords of ``length`` symbols drawn from ``alphabet``.

    Unless :meth:`set_random_source` is called, random bytes come from
    the operating system CSPRNG. Raises ``EmptyAlphabetError`` for an
    empty alphabet and ``DuplicateSymbolError`` for the first repeated
    symbol.
    """

    def __init__(self, alphabet: Iterable[str], length: int) -> None:
        symbols = tuple(alphabet)
        if not symbols:
            raise EmptyAlphabetError()

        seen: dict[str, int] = {}
        for i, symbol in enumerate(symbols):
            if not isinstance(symbol, str) or len(symbol) != 1:
                raise InvalidSymbolError(symbol, i)
            if symbol in seen:
                raise DuplicateSymbolError(symbol, seen[symbol], i)
            seen[symbol] = i

        if isinstance(length, bool) or not isinstance(length, int):
            raise TypeError(f"length must be an int, got {type(length).__name__}")
        if length < 0:
            raise InvalidLengthError(length)

        self._alphabet = symbols
        self._length = length
        self._source: ByteSource = SystemSource()
        self._used = False

    def __repr__(self) -> str:
        return (
            f"Generator(alphabet_size={len(self._alphabet)}, "
            f"length={self._length}, source={self._source!r})"
        )

    @property
    def alphabet(self) -> tuple[str, ...]:
        return self._alphabet

    @property
    def length(self) -> int:
        return self._length

    @property
    def source(self) -> ByteSource:
        return self._source

    def set_random_source(self, source: ByteSource) -> None:
        """
        Change the source of entropy used by :meth:`generate`.

        Replacing the default with a non random source is not secure.
        Only do this for testing, or if the replacement is itself a
        cryptographic random stream. Must happen before the first call
        to :meth:`generate`.
        """
        if self._used:
            raise SourceLockedError()
        self._source = source

    def max(self) -> int:
        """Total number of distinct passwords this generator can produce."""
        return len(self._alphabet) ** self._length

    def bits(self) -> int:
        """
        Complexity of a generated password in bits, rounded up.

        Zero when only one password is possible.
        """
        return (self.max() - 1).bit_length()

    def generate(self) -> GenerationResult:
        """
        Generate one password.

        The whole password is decoded from a single integer drawn below
        :meth:`max`, which consumes about ``bits() / 8`` bytes instead of
        one draw per symbol.
        """
        self._used = True

        if self._length == 0:
            return GenerationResult("", 0, len(self._alphabet), 0)

        if not self._alphabet:
            raise EmptyAlphabetError()

        bound = self.max()
        counter = EntropyCounter(self._source)
        try:
            num = random_below(counter, bound)
        except (OSError, EOFError, ValueError) as exc:
            raise EntropyUnavailableError(
                f"Cannot get random data: {exc}", bytes_read=counter.count
            ) from exc

        password = int_to_symbols(num, self._alphabet, self._length)
        bits = self.bits()
        logger.debug(
            "generated %d symbols (%d bits) from %d entropy bytes",
            self._length,
            bits,
            counter.count,
        )

        return GenerationResult(
            password=password,
            bytes_read=counter.count,
            alphabet_size=len(self._alphabet),
            bits=bits,
        )
