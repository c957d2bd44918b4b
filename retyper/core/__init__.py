"""Script detection and layout conversion."""

from retyper.core.layout_selection import next_layout_id, relevant_layout_ids
from retyper.core.text_converter import (
    ConversionResult,
    Script,
    auto_convert,
    convert_text,
    detect_script,
)

__all__ = [
    "ConversionResult",
    "Script",
    "auto_convert",
    "convert_text",
    "detect_script",
    "next_layout_id",
    "relevant_layout_ids",
]
