"""
Locale independent case conversion.
"""

# std
import string as _string


# ---------------------------------------------------------------------------- #
# Only ASCII letters are mapped, everything else passes through unchanged.
# `str.lower` would also convert letters from other scripts.
LOWER = str.maketrans(_string.ascii_uppercase, _string.ascii_lowercase)
UPPER = str.maketrans(_string.ascii_lowercase, _string.ascii_uppercase)


# ---------------------------------------------------------------------------- #

def to_lower(string):
    """
    Convert ASCII letters to lower case.

    Examples
    --------
    >>> to_lower('ÀBC-1')
    'Àbc-1'
    """
    return string.translate(LOWER)


def to_upper(string):
    """
    Convert ASCII letters to upper case.

    Examples
    --------
    >>> to_upper('àbc-1')
    'àBC-1'
    """
    return string.translate(UPPER)
