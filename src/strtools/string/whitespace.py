"""
Trimming whitespace from strings.
"""


# ---------------------------------------------------------------------------- #
WHITESPACE = ' \t\n'


# ---------------------------------------------------------------------------- #

def trim(string, chars=WHITESPACE):
    """
    Remove leading and trailing whitespace. Unlike `str.strip`, only the
    characters in `chars` (space, tab and newline by default) are considered
    whitespace.

    Parameters
    ----------
    string : str
        Text to trim.
    chars : str, optional
        The set of characters to remove, by default ' \\t\\n'.

    Examples
    --------
    >>> trim('  \\t hi \\n')
    'hi'
    >>> trim('\\r\\n')
    '\\r'

    Returns
    -------
    str
    """
    if not string:
        return string

    return string.strip(chars)


def trim_left(string, chars=WHITESPACE):
    """Remove leading whitespace."""
    if not string:
        return string

    return string.lstrip(chars)


def trim_right(string, chars=WHITESPACE):
    """Remove trailing whitespace."""
    if not string:
        return string

    return string.rstrip(chars)
