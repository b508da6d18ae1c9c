"""Tests for CanonicalFilter invariants."""

import pytest
from fastapi_atoz.models import CanonicalFilter, FilterKind
from pydantic import ValidationError


class TestCanonicalFilter:
    def test_letter_shape(self):
        f = CanonicalFilter.for_letter("q")
        assert f.kind == FilterKind.LETTER
        assert f.letter == "q"
        assert f.is_letter and not f.is_none and not f.is_symbols

    def test_none_shape(self):
        f = CanonicalFilter.none()
        assert f.is_none
        assert f.letter is None
        assert f.representative() == ""

    def test_symbols_shape(self):
        f = CanonicalFilter.symbols()
        assert f.is_symbols
        assert f.representative() == "sym"
        assert f.representative("9") == "9"

    @pytest.mark.parametrize("letter", ["B", "ab", "", "1", "é", None])
    def test_invalid_letter_rejected(self, letter):
        with pytest.raises(ValidationError):
            CanonicalFilter(kind=FilterKind.LETTER, letter=letter)

    @pytest.mark.parametrize("kind", [FilterKind.NONE, FilterKind.SYMBOLS])
    def test_letter_only_on_letter_kind(self, kind):
        with pytest.raises(ValidationError):
            CanonicalFilter(kind=kind, letter="a")

    def test_frozen(self):
        f = CanonicalFilter.for_letter("a")
        with pytest.raises(ValidationError):
            f.letter = "b"

    def test_equality_and_hash(self):
        assert CanonicalFilter.for_letter("a") == CanonicalFilter.for_letter("a")
        assert CanonicalFilter.for_letter("a") != CanonicalFilter.for_letter("b")
        assert len({CanonicalFilter.symbols(), CanonicalFilter.symbols()}) == 1
