"""ReTyper: fix text typed in the wrong keyboard layout."""

from retyper.__version__ import __version__
from retyper.core import ConversionResult, Script, auto_convert, detect_script

__all__ = [
    "__version__",
    "ConversionResult",
    "Script",
    "auto_convert",
    "detect_script",
]
