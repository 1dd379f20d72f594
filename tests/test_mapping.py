"""
Tests for Mapping
=================
Tests for integer-to-password decoding in nextpass/mapping.py.
"""

import pytest

from nextpass.config import HEX_CHARS
from nextpass.mapping import int_to_symbols, symbols_to_int


class TestIntToSymbols:
    """Tests for decoding a random integer into symbols."""

    def test_most_significant_digit_first(self):
        assert int_to_symbols(5, "01", 8) == "00000101"

    def test_zero_is_first_symbol_repeated(self):
        assert int_to_symbols(0, "abc", 4) == "aaaa"

    def test_largest_value_is_last_symbol_repeated(self):
        assert int_to_symbols(3 ** 4 - 1, "abc", 4) == "cccc"

    def test_hex_matches_builtin_formatting(self):
        assert int_to_symbols(0xDEADBEEF, HEX_CHARS, 8) == "DEADBEEF"
        assert int_to_symbols(0xBEEF, HEX_CHARS, 8) == "0000BEEF"

    def test_unicode_symbols(self):
        # 5 = 0*9 + 1*3 + 2
        assert int_to_symbols(5, ("α", "β", "γ"), 3) == "αβγ"

    def test_zero_length(self):
        assert int_to_symbols(0, "01", 0) == ""

    def test_negative_value_rejected(self):
        with pytest.raises(ValueError):
            int_to_symbols(-1, "01", 4)


class TestSymbolsToInt:
    """Tests for reading a password back as an integer."""

    def test_inverse_of_decoding(self):
        assert symbols_to_int("00000101", "01") == 5
        assert symbols_to_int("DEADBEEF", HEX_CHARS) == 0xDEADBEEF

    def test_empty_password(self):
        assert symbols_to_int("", "01") == 0

    def test_unknown_symbol(self):
        with pytest.raises(ValueError, match="offset 2"):
            symbols_to_int("01x", "01")
