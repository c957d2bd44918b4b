"""Choosing which host layouts take part in conversion and switching."""

from __future__ import annotations

import logging
from typing import Iterable, Optional, Sequence

from retyper.layouts import is_cyrillic, is_latin

logger = logging.getLogger(__name__)


def relevant_layout_ids(
    installed: Sequence[str],
    active: Iterable[str] | None = None,
) -> list[str]:
    """Return the layout ids conversion should consider, in priority order.

    User-selected keyboards (*active*) win as long as at least one of them is
    still installed; otherwise every installed Latin or Cyrillic layout is
    used in the order the host reports them.
    """
    if active:
        installed_set = set(installed)
        valid = [lid for lid in active if lid in installed_set]
        if valid:
            return valid
        logger.debug("None of the active keyboards are installed, using all")

    return [lid for lid in installed if lid and (is_latin(lid) or is_cyrillic(lid))]


def next_layout_id(current: str, available: Sequence[str]) -> Optional[str]:
    """Pick the layout to switch to from *current*.

    Latin → first Cyrillic, anything else → first Latin. If the opposite
    family is missing, cycle to the entry after *current*.
    """
    if is_latin(current):
        target = next((lid for lid in available if is_cyrillic(lid)), None)
    else:
        target = next((lid for lid in available if is_latin(lid)), None)
    if target is not None:
        return target

    if current in available:
        idx = list(available).index(current)
        return available[(idx + 1) % len(available)]
    return None
