"""Keyboard layout catalog: which identifiers are Cyrillic, and how to show them.

Layout identifiers come from the host (e.g. ``com.apple.keylayout.Russian``)
and are only ever matched as substrings. Anything not recognised as one of
the Cyrillic variants below is treated as a Latin layout.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional

from retyper.layouts import maps


class CyrillicVariant(Enum):
    RUSSIAN = "com.apple.keylayout.Russian"
    RUSSIAN_PC = "com.apple.keylayout.RussianWin"
    UKRAINIAN = "com.apple.keylayout.Ukrainian"
    UKRAINIAN_PC = "com.apple.keylayout.Ukrainian-PC"
    BELARUSIAN = "com.apple.keylayout.Belarusian"


@dataclass(frozen=True)
class LayoutVariant:
    layout_id: str        # canonical identifier
    display_code: str     # 'RU', 'UA', 'BY'
    forward: Mapping[str, str]
    reverse: Mapping[str, str]


VARIANTS: Mapping[CyrillicVariant, LayoutVariant] = MappingProxyType({
    CyrillicVariant.RUSSIAN: LayoutVariant(
        CyrillicVariant.RUSSIAN.value, "RU", maps.EN_TO_RU, maps.RU_TO_EN,
    ),
    CyrillicVariant.RUSSIAN_PC: LayoutVariant(
        CyrillicVariant.RUSSIAN_PC.value, "RU", maps.EN_TO_RU_PC, maps.RU_PC_TO_EN,
    ),
    CyrillicVariant.UKRAINIAN: LayoutVariant(
        CyrillicVariant.UKRAINIAN.value, "UA", maps.EN_TO_UA, maps.UA_TO_EN,
    ),
    CyrillicVariant.UKRAINIAN_PC: LayoutVariant(
        CyrillicVariant.UKRAINIAN_PC.value, "UA", maps.EN_TO_UA_PC, maps.UA_PC_TO_EN,
    ),
    CyrillicVariant.BELARUSIAN: LayoutVariant(
        CyrillicVariant.BELARUSIAN.value, "BY", maps.EN_TO_BY, maps.BY_TO_EN,
    ),
})

# Latin layout name fragments → display code. Longer fragments come first so
# 'USInternational' is tried before 'US'.
LATIN_DISPLAY_CODES: tuple[tuple[str, str], ...] = (
    ("USInternational", "EN"),
    ("Australian", "EN"),
    ("Portuguese", "PT"),
    ("Norwegian", "NO"),
    ("Hungarian", "HU"),
    ("PolishPro", "PL"),
    ("Slovenian", "SI"),
    ("Canadian", "EN"),
    ("Romanian", "RO"),
    ("Croatian", "HR"),
    ("British", "EN"),
    ("Italian", "IT"),
    ("Spanish", "ES"),
    ("Swedish", "SV"),
    ("Finnish", "FI"),
    ("Turkish", "TR"),
    ("German", "DE"),
    ("French", "FR"),
    ("Polish", "PL"),
    ("Danish", "DA"),
    ("Slovak", "SK"),
    ("Dutch", "NL"),
    ("Czech", "CZ"),
    ("ABC", "EN"),
    ("US", "EN"),
)

# Checked when the identifier contains a canonical id: most specific first.
_BY_SPECIFICITY = sorted(CyrillicVariant, key=lambda v: len(v.value), reverse=True)


def classify(layout_id: str) -> Optional[CyrillicVariant]:
    """Return the Cyrillic variant *layout_id* refers to, or None for Latin.

    Matches by substring in both directions. ``com.apple.keylayout.RussianWin``
    contains the plain Russian id too, so the longest contained canonical id
    wins; a fragment such as ``Russian`` falls back to enumeration order.
    """
    if not layout_id:
        return None
    for variant in _BY_SPECIFICITY:
        if variant.value in layout_id:
            return variant
    for variant in CyrillicVariant:
        if layout_id in variant.value:
            return variant
    return None


def is_cyrillic(layout_id: str) -> bool:
    return classify(layout_id) is not None


def is_latin(layout_id: str) -> bool:
    """Any layout that is not a known Cyrillic variant counts as Latin."""
    return classify(layout_id) is None


def display_code(layout_id: str) -> str:
    """Two-letter abbreviation for *layout_id* ('RU', 'EN', 'PL', ...)."""
    variant = classify(layout_id)
    if variant is not None:
        return VARIANTS[variant].display_code

    for pattern, code in LATIN_DISPLAY_CODES:
        if pattern in layout_id:
            return code

    last = layout_id.split(".")[-1]
    return last[:2].upper()


def forward(variant: CyrillicVariant, ch: str) -> str:
    """Latin → native for one character; unmapped characters pass through."""
    return VARIANTS[variant].forward.get(ch, ch)


def reverse(variant: CyrillicVariant, ch: str) -> str:
    """Native → Latin for one character; unmapped characters pass through."""
    return VARIANTS[variant].reverse.get(ch, ch)
