"""
Exception types raised by the password generator.

Configuration errors (bad alphabet, bad length) are raised before any
entropy is consumed. Runtime errors wrap failures of the entropy source.
"""

from __future__ import annotations


class NextpassError(Exception):
    """Base class for all generator errors."""


class ConfigurationError(NextpassError, ValueError):
    """The alphabet or length cannot be used to generate passwords."""


class EmptyAlphabetError(ConfigurationError):
    def __init__(self, message: str = "Alphabet has length 0") -> None:
        super().__init__(message)


class DuplicateSymbolError(ConfigurationError):
    """
    A symbol appears more than once in the alphabet.

    Both offsets are kept so callers can point at the composition bug.
    """

    def __init__(self, symbol: str, first_index: int, duplicate_index: int) -> None:
        self.symbol = symbol
        self.first_index = first_index
        self.duplicate_index = duplicate_index
        super().__init__(
            f"Duplicate character {symbol!r} in alphabet at offset "
            f"{duplicate_index}; already found at offset {first_index}"
        )


class InvalidSymbolError(ConfigurationError):
    def __init__(self, symbol: object, index: int) -> None:
        self.symbol = symbol
        self.index = index
        super().__init__(
            f"Alphabet entry {symbol!r} at offset {index} is not a single character"
        )


class InvalidLengthError(ConfigurationError):
    def __init__(self, length: int) -> None:
        self.length = length
        super().__init__(f"Password length must not be negative, got {length}")


class UnknownCharsetError(ConfigurationError):
    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Unknown character set name: {name}")


class EntropyUnavailableError(NextpassError):
    """
    The entropy source failed while drawing random data.

    The original exception is available as ``__cause__``.
    """

    def __init__(self, message: str, bytes_read: int = 0) -> None:
        self.bytes_read = bytes_read
        super().__init__(message)


class SourceLockedError(NextpassError, RuntimeError):
    def __init__(self) -> None:
        super().__init__(
            "Random source can only be replaced before the first password is generated"
        )
