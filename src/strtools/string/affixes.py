"""
Testing for string affixes.
"""


def starts_with(string, prefix):
    """
    Check whether `string` starts with `prefix`.

    Examples
    --------
    >>> starts_with('hello', '')
    True
    >>> starts_with('', 'hello')
    False
    """
    if len(string) < len(prefix):
        return False

    return string[:len(prefix)] == prefix


def ends_with(string, suffix):
    """Check whether `string` ends with `suffix`."""
    if len(string) < len(suffix):
        return False

    # comparison starts from the last character
    return all(a == b for a, b in zip(reversed(suffix), reversed(string)))
