"""Keyboard layout tables and identifier catalog."""

from retyper.layouts.catalog import (
    VARIANTS,
    CyrillicVariant,
    LayoutVariant,
    classify,
    display_code,
    forward,
    is_cyrillic,
    is_latin,
    reverse,
)

__all__ = [
    "VARIANTS",
    "CyrillicVariant",
    "LayoutVariant",
    "classify",
    "display_code",
    "forward",
    "is_cyrillic",
    "is_latin",
    "reverse",
]
