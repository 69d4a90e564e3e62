"""
Portable string manipulation primitives: trimming, case conversion, splitting,
affix tests, line reading, filename expansion, and formatted strings of any
length.
"""

# std
from importlib.metadata import PackageNotFoundError, version

# third-party
from loguru import logger

# silence logging by default
logger.disable('strtools')

# relative
from . import io, printf, shell, string
from .io import EOF, iter_lines, read_line
from .config import CONFIG
from .shell import EXPANSION_SUPPORTED, expand_filename
from .printf import (Failed, FormatRequest, Rendered, format_string, render,
                     strprintf, vrender)
from .string import (WHITESPACE, ends_with, split, starts_with, to_lower,
                     to_upper, trim, trim_left, trim_right)
from .exceptions import (AllocationError, FormatError, RenderError,
                         StrToolsError, UnsupportedPlatform)


# ---------------------------------------------------------------------------- #

# version
try:
    __version__ = version('strtools')
except PackageNotFoundError:
    __version__ = '0.0.0'


# aliases
strings = string
