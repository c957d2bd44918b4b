"""Latin (QWERTY) ↔ Cyrillic keyboard layout conversion maps.

Forward tables are keyed by the character the QWERTY layout produces on a
physical key; values are what the native layout produces on the same key.
Reverse tables are derived by inversion. When two keys produce the same native
character the later entry in the forward table wins (Belarusian ``]``/``}``
both give an apostrophe, so ``'`` reverses to ``}``).
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

_RUSSIAN: dict[str, str] = {
    "q": "й", "w": "ц", "e": "у", "r": "к", "t": "е", "y": "н", "u": "г",
    "i": "ш", "o": "щ", "p": "з", "[": "х", "]": "ъ",
    "a": "ф", "s": "ы", "d": "в", "f": "а", "g": "п", "h": "р",
    "j": "о", "k": "л", "l": "д", ";": "ж", "'": "э",
    "z": "я", "x": "ч", "c": "с", "v": "м", "b": "и", "n": "т",
    "m": "ь", ",": "б", ".": "ю", "/": ".", "`": "ё",
    # Uppercase
    "Q": "Й", "W": "Ц", "E": "У", "R": "К", "T": "Е", "Y": "Н", "U": "Г",
    "I": "Ш", "O": "Щ", "P": "З", "{": "Х", "}": "Ъ",
    "A": "Ф", "S": "Ы", "D": "В", "F": "А", "G": "П", "H": "Р",
    "J": "О", "K": "Л", "L": "Д", ":": "Ж", '"': "Э",
    "Z": "Я", "X": "Ч", "C": "С", "V": "М", "B": "И", "N": "Т",
    "M": "Ь", "<": "Б", ">": "Ю", "?": ",", "~": "Ё",
}

# Ukrainian: і on the ы key, ї on ъ, є on э, ґ on ё
_UKRAINIAN: dict[str, str] = {
    **_RUSSIAN,
    "s": "і", "]": "ї", "'": "є", "`": "ґ",
    "S": "І", "}": "Ї", '"': "Є", "~": "Ґ",
}

# Belarusian: ў on the щ key, і on и, apostrophe on ъ (both cases)
_BELARUSIAN: dict[str, str] = {
    **_RUSSIAN,
    "o": "ў", "b": "і", "]": "'",
    "O": "Ў", "B": "І", "}": "'",
}

# Windows-style layouts put punctuation on the Shift+digit row and the
# backslash key; letters are unchanged.
_PC_PUNCTUATION: dict[str, str] = {
    "@": '"', "#": "№", "$": ";", "^": ":", "&": "?", "|": "/",
}


def _invert(table: Mapping[str, str]) -> dict[str, str]:
    """Reverse a forward table; later entries win on collisions."""
    reverse: dict[str, str] = {}
    for latin, native in table.items():
        reverse[native] = latin
    return reverse


def _freeze(table: dict[str, str]) -> Mapping[str, str]:
    return MappingProxyType(table)


EN_TO_RU = _freeze(_RUSSIAN)
EN_TO_RU_PC = _freeze({**_RUSSIAN, **_PC_PUNCTUATION})
EN_TO_UA = _freeze(_UKRAINIAN)
EN_TO_UA_PC = _freeze({**_UKRAINIAN, **_PC_PUNCTUATION})
EN_TO_BY = _freeze(_BELARUSIAN)

RU_TO_EN = _freeze(_invert(EN_TO_RU))
RU_PC_TO_EN = _freeze(_invert(EN_TO_RU_PC))
UA_TO_EN = _freeze(_invert(EN_TO_UA))
UA_PC_TO_EN = _freeze(_invert(EN_TO_UA_PC))
BY_TO_EN = _freeze(_invert(EN_TO_BY))

# Native characters that two different keys produce, per forward table.
BY_COLLISIONS: frozenset[str] = frozenset({"'"})
