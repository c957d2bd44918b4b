"""Pure text conversion functions (no side effects, fully testable).

Direction is decided from the text itself, not from the layout that happens
to be active: predominantly Latin text is converted to the first available
Cyrillic layout, predominantly Cyrillic text back to the first Latin one.
"""

from __future__ import annotations

import logging
import unicodedata
from enum import Enum
from typing import List, Mapping, NamedTuple, Optional, Sequence

import regex

import retyper.log  # registers TRACE level and logger.trace()
from retyper.layouts import VARIANTS, classify, is_latin

logger = logging.getLogger(__name__)


class Script(Enum):
    CYRILLIC = "cyrillic"
    LATIN = "latin"
    UNKNOWN = "unknown"


class ConversionResult(NamedTuple):
    converted: str
    target_layout_id: Optional[str] = None


_GRAPHEME = regex.compile(r"\X")


def _characters(text: str) -> List[str]:
    """Split *text* into extended grapheme clusters."""
    return _GRAPHEME.findall(text)


def _lookup(table: Mapping[str, str], char: str) -> str:
    # Tables hold precomposed letters; decomposed input (и + U+0306) must match too
    return table.get(unicodedata.normalize("NFC", char), char)


def _is_cyrillic_char(char: str) -> bool:
    return all("\u0400" <= cp <= "\u04ff" for cp in char)


def _is_latin_char(char: str) -> bool:
    return all(("A" <= cp <= "Z") or ("a" <= cp <= "z") for cp in char)


def detect_script(text: str) -> Script:
    """Return the predominant script of *text*.

    Digits, punctuation and letters of other scripts are ignored. A tie,
    including no letters at all, is ``Script.UNKNOWN``.
    """
    cyrillic = 0
    latin = 0
    for char in _characters(text):
        if _is_cyrillic_char(char):
            cyrillic += 1
        elif _is_latin_char(char):
            latin += 1

    if cyrillic > latin:
        return Script.CYRILLIC
    if latin > cyrillic:
        return Script.LATIN
    return Script.UNKNOWN


def convert_text(text: str, table: Mapping[str, str]) -> str:
    """Remap every character of *text* through *table*; unknown ones stay."""
    return "".join(_lookup(table, char) for char in _characters(text))


def auto_convert(text: str, available_layout_ids: Sequence[str]) -> ConversionResult:
    """Convert *text* typed in the wrong layout.

    Args:
        text:                 Buffered text to convert.
        available_layout_ids: Host layout identifiers, in priority order.

    Returns:
        ``ConversionResult(converted, target_layout_id)``. When no conversion
        applies the text comes back unchanged with ``target_layout_id=None``.
    """
    script = detect_script(text)
    logger.debug("Detected script: %s, text: %r", script.value, text)

    if script is Script.LATIN:
        for layout_id in available_layout_ids:
            variant = classify(layout_id)
            if variant is None:
                continue
            converted = convert_text(text, VARIANTS[variant].forward)
            logger.trace("%r -> %r via %s", text, converted, variant.name)  # type: ignore[attr-defined]
            return ConversionResult(converted, layout_id)
        logger.debug("No Cyrillic layout available, nothing to convert")

    elif script is Script.CYRILLIC:
        source = next((v for v in map(classify, available_layout_ids) if v is not None), None)
        target = next((lid for lid in available_layout_ids if is_latin(lid)), None)
        if source is not None and target is not None:
            converted = convert_text(text, VARIANTS[source].reverse)
            logger.trace("%r -> %r via %s", text, converted, source.name)  # type: ignore[attr-defined]
            return ConversionResult(converted, target)
        logger.debug("Cyrillic text but source=%s target=%s, nothing to convert",
                     source, target)

    return ConversionResult(text, None)
