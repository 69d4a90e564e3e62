"""
Splitting strings on delimiter characters.
"""

# third-party
import more_itertools as mit


# ---------------------------------------------------------------------------- #

def split(string, delimiters):
    """
    Split `string` at every occurrence of any of the characters in
    `delimiters`. Empty tokens are kept: consecutive delimiters produce empty
    strings, as does a delimiter at either end of `string`.

    Parameters
    ----------
    string : str
        The string to split.
    delimiters : str or collection of str
        Each character is a delimiter.

    Examples
    --------
    >>> split('a,,b,', ',')
    ['a', '', 'b', '']
    >>> split('key=value; other', '=;')
    ['key', 'value', ' other']
    >>> split('', ',')
    ['']

    Returns
    -------
    list of str
        Always contains at least one (possibly empty) token.
    """
    delimiters = set(delimiters)
    return [''.join(chars)
            for chars in mit.split_at(string, delimiters.__contains__)]
