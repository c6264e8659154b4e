"""Tests for core.domain.grid."""

import pytest

from core.domain.grid import DEFAULT_GRID_SPEC, DIGIPIN_ALPHABET, GridAlphabet


class TestGridAlphabet:
    """Tests for GridAlphabet."""

    def test_digipin_layout(self):
        """Row 0 is the northern band, column 0 the western one."""
        assert DIGIPIN_ALPHABET.size == 4
        assert DIGIPIN_ALPHABET.symbols == "FC98J327K456LMPT"
        assert DIGIPIN_ALPHABET.symbol_at(0, 0) == "F"
        assert DIGIPIN_ALPHABET.symbol_at(3, 3) == "T"

    def test_position_lookup(self):
        assert DIGIPIN_ALPHABET.position("F") == (0, 0)
        assert DIGIPIN_ALPHABET.position("2") == (1, 2)
        assert DIGIPIN_ALPHABET.position("T") == (3, 3)
        assert DIGIPIN_ALPHABET.position("A") is None

    def test_contains(self):
        assert "L" in DIGIPIN_ALPHABET
        assert "0" not in DIGIPIN_ALPHABET
        assert "1" not in DIGIPIN_ALPHABET

    def test_pattern(self):
        pattern = DIGIPIN_ALPHABET.pattern(3)
        assert pattern.fullmatch("39J")
        assert not pattern.fullmatch("39j")
        assert not pattern.fullmatch("39JJ")

    def test_from_symbols(self):
        alphabet = GridAlphabet.from_symbols("ABCDEFGHI")
        assert alphabet.size == 3
        assert alphabet.position("F") == (1, 2)

    def test_from_symbols_requires_square(self):
        with pytest.raises(ValueError):
            GridAlphabet.from_symbols("ABCDE")

    def test_rejects_duplicates(self):
        with pytest.raises(ValueError):
            GridAlphabet.from_symbols("AABC")

    def test_rejects_single_cell(self):
        with pytest.raises(ValueError):
            GridAlphabet.from_symbols("A")

    def test_rejects_ragged_rows(self):
        with pytest.raises(ValueError):
            GridAlphabet(rows=(("A", "B"), ("C",)))


class TestGridSpec:
    """Tests for the default GridSpec."""

    def test_defaults(self):
        assert DEFAULT_GRID_SPEC.size == 4
        assert DEFAULT_GRID_SPEC.precision == 10
        assert DEFAULT_GRID_SPEC.separator == "-"
        assert DEFAULT_GRID_SPEC.bounds.southwest.latitude == 2.5
        assert DEFAULT_GRID_SPEC.bounds.northeast.longitude == 99.5
