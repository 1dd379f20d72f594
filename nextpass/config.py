"""
Configuration and character sets for the password generator.
"""

from dataclasses import dataclass
from typing import Optional

from .errors import UnknownCharsetError

LOWER_CHARS = "abcdefghijklmnopqrstuvwxyz"
UPPER_CHARS = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
DIGIT_CHARS = "0123456789"
# Printable ASCII excluding letters, digits and the space.
SPECIAL_CHARS = "`~!@#$%^&*()-=_+[]{}\\|;:'\"/?<>,."

BASE58_CHARS = "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"
BASE64_CHARS = DIGIT_CHARS + UPPER_CHARS + LOWER_CHARS + "+/"
URL_CHARS = DIGIT_CHARS + UPPER_CHARS + LOWER_CHARS + "-._~"
HEX_CHARS = "0123456789ABCDEF"
OCTAL_CHARS = "01234567"
BINARY_CHARS = "01"

CHARSETS = {
    "base64": BASE64_CHARS,
    "base58": BASE58_CHARS,
    "url": URL_CHARS,
    "hex": HEX_CHARS,
    "octal": OCTAL_CHARS,
    "binary": BINARY_CHARS,
}


@dataclass
class PassConfig:
    # Desired password length in characters.
    length: int = 64

    # Character classes, appended in this order after the named set.
    lower: bool = False
    upper: bool = False
    digits: bool = False
    special: bool = False

    # Predefined set from CHARSETS, or "" for none.
    charset: str = ""

    # Extra symbols, e.g. read from standard input. Newlines count.
    additional: str = ""

    # Alternate file of random bytes. Not secure unless the file is random.
    random_source: Optional[str] = None

    # Draw entropy from the quantum simulator instead of the OS.
    quantum: bool = False
    # Each qubit gives one raw bit per circuit run.
    # NOTE: Keep this <= backend limit (often 20-29 for local simulators).
    num_qubits: int = 20
    quantum_streams: int = 2


def build_alphabet(config: PassConfig) -> str:
    """
    Concatenate the symbols selected by ``config``.

    Duplicates are kept; the generator rejects them with the offsets of
    both occurrences.
    """
    parts = []
    if config.charset:
        try:
            parts.append(CHARSETS[config.charset])
        except KeyError:
            raise UnknownCharsetError(config.charset) from None
    if config.lower:
        parts.append(LOWER_CHARS)
    if config.upper:
        parts.append(UPPER_CHARS)
    if config.digits:
        parts.append(DIGIT_CHARS)
    if config.special:
        parts.append(SPECIAL_CHARS)
    if config.additional:
        parts.append(config.additional)
    return "".join(parts)


# Default configuration instance you can import elsewhere
DEFAULT_CONFIG = PassConfig(lower=True, upper=True, digits=True, special=True)
