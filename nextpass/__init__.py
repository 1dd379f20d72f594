"""
Cryptographically secure password generator.
"""

__version__ = "0.1.0"

from .config import PassConfig, DEFAULT_CONFIG, build_alphabet
from .entropy import EntropyCounter, SystemSource
from .errors import (
    NextpassError,
    ConfigurationError,
    EmptyAlphabetError,
    DuplicateSymbolError,
    EntropyUnavailableError,
)
from .generator import Generator, GenerationResult
from .cli import generate_password, generate_password_with_meta

__all__ = [
    "PassConfig",
    "DEFAULT_CONFIG",
    "build_alphabet",
    "EntropyCounter",
    "SystemSource",
    "NextpassError",
    "ConfigurationError",
    "EmptyAlphabetError",
    "DuplicateSymbolError",
    "EntropyUnavailableError",
    "Generator",
    "GenerationResult",
    "generate_password",
    "generate_password_with_meta",
]
