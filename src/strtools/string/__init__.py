"""
Trimming, case conversion, splitting and affix tests for strings.
"""

from .tokens import split
from .casing import to_lower, to_upper
from .affixes import ends_with, starts_with
from .whitespace import WHITESPACE, trim, trim_left, trim_right

