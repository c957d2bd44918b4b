"""Tests for retyper.layouts.catalog: identifier classification and display codes."""

from __future__ import annotations

import string

import pytest

from retyper.layouts import (
    VARIANTS,
    CyrillicVariant,
    classify,
    display_code,
    forward,
    is_cyrillic,
    is_latin,
    reverse,
)

US = "com.apple.keylayout.US"
RUSSIAN = "com.apple.keylayout.Russian"
RUSSIAN_PC = "com.apple.keylayout.RussianWin"
UKRAINIAN = "com.apple.keylayout.Ukrainian"
UKRAINIAN_PC = "com.apple.keylayout.Ukrainian-PC"
BELARUSIAN = "com.apple.keylayout.Belarusian"


# ------------------------------------------------------------------
# classify
# ------------------------------------------------------------------

class TestClassify:
    @pytest.mark.parametrize("layout_id, expected", [
        (RUSSIAN, CyrillicVariant.RUSSIAN),
        (RUSSIAN_PC, CyrillicVariant.RUSSIAN_PC),
        (UKRAINIAN, CyrillicVariant.UKRAINIAN),
        (UKRAINIAN_PC, CyrillicVariant.UKRAINIAN_PC),
        (BELARUSIAN, CyrillicVariant.BELARUSIAN),
    ])
    def test_canonical_ids(self, layout_id, expected):
        assert classify(layout_id) is expected

    def test_identifier_containing_canonical_id(self):
        assert classify("custom." + RUSSIAN + ".copy") is CyrillicVariant.RUSSIAN
        assert classify(RUSSIAN_PC + "-2") is CyrillicVariant.RUSSIAN_PC

    def test_fragment_contained_in_canonical_id(self):
        assert classify("Russian") is CyrillicVariant.RUSSIAN
        assert classify("RussianWin") is CyrillicVariant.RUSSIAN_PC
        assert classify("keylayout.Ukrainian-PC") is CyrillicVariant.UKRAINIAN_PC
        assert classify("Belarusian") is CyrillicVariant.BELARUSIAN

    @pytest.mark.parametrize("layout_id", [
        US,
        "com.apple.keylayout.ABC",
        "com.apple.keylayout.PolishPro",
        "com.apple.keylayout.Greek",
        "xkb:us::eng",
        "",
    ])
    def test_non_cyrillic(self, layout_id):
        assert classify(layout_id) is None


class TestIsLatin:
    @pytest.mark.parametrize("layout_id", [
        US,
        "com.apple.keylayout.ABC",
        "com.apple.keylayout.PolishPro",
        "com.apple.keylayout.British",
        "com.example.SomethingNew",
    ])
    def test_latin(self, layout_id):
        assert is_latin(layout_id) is True
        assert is_cyrillic(layout_id) is False

    @pytest.mark.parametrize("layout_id", [RUSSIAN, RUSSIAN_PC, UKRAINIAN, BELARUSIAN])
    def test_cyrillic_is_not_latin(self, layout_id):
        assert is_latin(layout_id) is False
        assert is_cyrillic(layout_id) is True


# ------------------------------------------------------------------
# display_code
# ------------------------------------------------------------------

class TestDisplayCode:
    @pytest.mark.parametrize("layout_id, code", [
        (US, "EN"),
        ("com.apple.keylayout.ABC", "EN"),
        ("com.apple.keylayout.USInternational-PC", "EN"),
        (RUSSIAN, "RU"),
        (RUSSIAN_PC, "RU"),
        (UKRAINIAN, "UA"),
        (UKRAINIAN_PC, "UA"),
        (BELARUSIAN, "BY"),
        ("com.apple.keylayout.PolishPro", "PL"),
        ("com.apple.keylayout.German", "DE"),
        ("com.apple.keylayout.Swedish-Pro", "SV"),
    ])
    def test_known(self, layout_id, code):
        assert display_code(layout_id) == code

    def test_fallback_uses_last_segment(self):
        assert display_code("com.apple.keylayout.Greek") == "GR"
        assert display_code("com.apple.keylayout.hebrew") == "HE"

    @pytest.mark.parametrize("layout_id, code", [
        ("com.apple.keylayout.Dvorak", "DV"),
        ("com.apple.keylayout.Colemak", "CO"),
        ("com.apple.keylayout.USExtended", "EN"),
    ])
    def test_alternative_latin_layouts_use_fallback(self, layout_id, code):
        # Latin for conversion purposes, but not in the display catalog
        assert is_latin(layout_id) is True
        assert display_code(layout_id) == code

    def test_fallback_without_dots(self):
        assert display_code("latvian") == "LA"

    def test_short_and_empty(self):
        assert display_code("x") == "X"
        assert display_code("") == ""


# ------------------------------------------------------------------
# forward / reverse
# ------------------------------------------------------------------

class TestForwardReverse:
    def test_forward(self):
        assert forward(CyrillicVariant.RUSSIAN, "q") == "й"
        assert forward(CyrillicVariant.UKRAINIAN, "s") == "і"
        assert forward(CyrillicVariant.BELARUSIAN, "o") == "ў"

    def test_reverse(self):
        assert reverse(CyrillicVariant.RUSSIAN, "й") == "q"
        assert reverse(CyrillicVariant.UKRAINIAN_PC, "№") == "#"

    @pytest.mark.parametrize("variant", list(CyrillicVariant))
    def test_digits_pass_through(self, variant):
        for ch in string.digits:
            assert forward(variant, ch) == ch
            assert reverse(variant, ch) == ch

    @pytest.mark.parametrize("variant", list(CyrillicVariant))
    def test_whitespace_passes_through(self, variant):
        for ch in " \t\n":
            assert forward(variant, ch) == ch
            assert reverse(variant, ch) == ch

    @pytest.mark.parametrize("variant", [
        CyrillicVariant.RUSSIAN,
        CyrillicVariant.RUSSIAN_PC,
        CyrillicVariant.UKRAINIAN,
        CyrillicVariant.UKRAINIAN_PC,
    ])
    def test_round_trip(self, variant):
        for ch in VARIANTS[variant].forward:
            assert reverse(variant, forward(variant, ch)) == ch

    def test_pc_variants_use_pc_tables(self):
        assert forward(CyrillicVariant.RUSSIAN, "@") == "@"
        assert forward(CyrillicVariant.RUSSIAN_PC, "@") == '"'


class TestVariantTable:
    def test_every_variant_present(self):
        assert set(VARIANTS) == set(CyrillicVariant)

    def test_canonical_ids_match_enum(self):
        for variant, info in VARIANTS.items():
            assert info.layout_id == variant.value
