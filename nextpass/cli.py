"""
Command-line interface and high-level generator functions.
"""
from __future__ import annotations

import argparse
import logging
import sys

from . import __version__
from .config import CHARSETS, DEFAULT_CONFIG, PassConfig, build_alphabet
from .errors import EntropyUnavailableError, UnknownCharsetError
from .generator import GenerationResult, Generator

logger = logging.getLogger(__name__)

EPILOG = f"""\
Character sets available with --type: {"|".join(CHARSETS)}

If the included characters are not enough,
use -A, and pass your favorite foreign characters or emojis into standard input.

Duplicate characters are not allowed in the final alphabet

Examples:
    nextpass -l 32 -LUDS
        generates a password with length 32, including
        lowercase and uppercase letters, digits, and special characters.
    echo -n ABCDEF | nextpass -DA
        generates a 64 digit hexadecimal string (256 bits).
    nextpass -t hex
        does the same thing as above.
"""


def build_generator(config: PassConfig | None = None) -> Generator:
    """
    Create a Generator for ``config``.

    The quantum source is attached here. A ``random_source`` file is
    opened by the caller that owns its lifetime.
    """
    cfg = config or DEFAULT_CONFIG
    generator = Generator(build_alphabet(cfg), cfg.length)

    if cfg.quantum:
        # qiskit is slow to import; only pay for it when asked.
        from .quantum_engine import QuantumSource

        generator.set_random_source(QuantumSource(cfg))
        logger.debug("using quantum entropy source")

    return generator


def generate_password_with_meta(
    config: PassConfig | None = None,
) -> GenerationResult:
    """
    High-level generation pipeline with metadata:

    - Assemble the alphabet from the configured character classes.
    - Pick the entropy source (OS, file, or quantum simulator).
    - Draw one bounded integer and map it to password characters.
    """
    cfg = config or DEFAULT_CONFIG
    generator = build_generator(cfg)

    if cfg.random_source:
        logger.debug("reading entropy from %s", cfg.random_source)
        with open(cfg.random_source, "rb") as source:
            generator.set_random_source(source)
            return generator.generate()

    return generator.generate()


def generate_password(
    config: PassConfig | None = None,
) -> str:
    meta = generate_password_with_meta(config)
    return meta.password


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="nextpass",
        description=(
            "nextpass generates a cryptographically random password. Whenever "
            "you need to create your next password, use nextpass."
        ),
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument('-l', '--length', type=int, default=64,
                        help='length of resulting password (default: 64)')
    parser.add_argument('-U', '--upper', action='store_true',
                        help='include uppercase letters A-Z')
    parser.add_argument('-L', '--lower', action='store_true',
                        help='include lowercase letters a-z')
    parser.add_argument('-D', '--digits', action='store_true',
                        help='include digits 0-9')
    parser.add_argument('-S', '--special', action='store_true',
                        help='include special characters, which are the printable ascii '
                             'characters excluding letters, digits, and the space')
    parser.add_argument('-A', '--additional', action='store_true',
                        help='read additional characters from standard input, encoded in '
                             'UTF-8; newline characters will NOT be ignored')
    parser.add_argument('-t', '--type', dest='charset', default='', metavar='NAME',
                        help='use a predefined character set')
    parser.add_argument('-n', '--no-newline', action='store_true',
                        help="don't print a newline after the password")
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='print more information, in addition to the generated password')
    parser.add_argument('--debug', action='store_true', help='enable debug logging')
    parser.add_argument('-V', '--version', action='version',
                        version=f'%(prog)s version {__version__}')

    source = parser.add_mutually_exclusive_group()
    source.add_argument('-r', '--random-source', metavar='FILE',
                        help="specify a file to be used as an alternate source of randomness. "
                             "Don't use this unless you know what you're doing.")
    source.add_argument('-Q', '--quantum', action='store_true',
                        help='draw random bits from a simulated quantum circuit. Not cryptographically '
                             "secure; don't use this unless you know what you're doing.")
    return parser


def _read_additional() -> str:
    # Decode as UTF-8 regardless of locale; invalid bytes become U+FFFD.
    try:
        return sys.stdin.buffer.read().decode("utf-8", errors="replace")
    except OSError as exc:
        print(
            "Cannot read from standard input. If additional characters were passed in,\n"
            f"they will be skipped.\n\n{exc}\n",
            file=sys.stderr,
        )
        return ""


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.length < 0:
        parser.error(f"argument -l/--length: must not be negative: {args.length}")
    if args.charset and (args.lower or args.upper or args.digits or args.special):
        parser.error("argument -t/--type: not allowed with -L, -U, -D or -S")

    config = PassConfig(
        length=args.length,
        lower=args.lower,
        upper=args.upper,
        digits=args.digits,
        special=args.special,
        charset=args.charset,
        additional=_read_additional() if args.additional else "",
        random_source=args.random_source,
        quantum=args.quantum,
    )

    try:
        alphabet = build_alphabet(config)
    except UnknownCharsetError as exc:
        print(exc, file=sys.stderr)
        return 1

    if not alphabet:
        print(
            "No characters included in password; cannot generate.\n"
            "Did you forget to enable one of the character types?",
            file=sys.stderr,
        )
        parser.print_usage(sys.stderr)
        return 1

    try:
        result = generate_password_with_meta(config)
    except ValueError as exc:
        print(f"Cannot create new password generator: {exc}", file=sys.stderr)
        return 1
    except EntropyUnavailableError as exc:
        print(f"Cannot generate password: {exc}", file=sys.stderr)
        return 1
    except OSError as exc:
        print(f"Cannot open {config.random_source}: {exc}", file=sys.stderr)
        return 1

    if args.verbose:
        print(
            f"password length: {config.length}\n"
            f"alphabet size: {result.alphabet_size}\n"
            f"complexity in bits: about {result.bits}\n"
            f"bytes read: {result.bytes_read}\n"
        )

    print(result.password, end="" if args.no_newline else "\n")
    return 0


def run() -> None:
    """
    Entry point for the ``nextpass`` console script and ``python -m nextpass``.
    """
    sys.exit(main())
