"""
Shell-style filename expansion.
"""

# std
import os
import re
import sys
import glob

# third-party
import more_itertools as mit
from loguru import logger

# relative
from .emit import Emit
from .config import CONFIG
from .exceptions import UnsupportedPlatform, UnsupportedPlatformWarning


# ---------------------------------------------------------------------------- #
# Word expansion is a POSIX shell facility. Android ships without one.
EXPANSION_SUPPORTED = (os.name == 'posix'
                       and sys.platform != 'android'
                       and not hasattr(sys, 'getandroidapilevel'))

# Pieces of a shell word, in order of precedence
RGX_WORD_PART = re.compile(r'''
    '(?P<single>[^']*)'                 # single quoted: literal
  | "(?P<double>(?:[^"\\]|\\.)*)"       # double quoted: variables only
  | \\(?P<escaped>.)                    # escaped character: literal
  | (?P<space>\s+)                      # word separator
  | (?P<bare>[^'"\\\s]+)                # unquoted: full expansion
  | (?P<bad>.)                          # unbalanced quote or trailing escape
''', re.VERBOSE | re.DOTALL)
RGX_ESCAPE = re.compile(r'\\(.)', re.DOTALL)


# ---------------------------------------------------------------------------- #

def split_words(pattern):
    """
    Split `pattern` into shell words, keeping track of how each part of a word
    was quoted.

    Parameters
    ----------
    pattern : str
        The text to split.

    Examples
    --------
    >>> split_words('~/"$HOME"/*.txt \\'a b\\'')
    [[('~/', 'bare'), ('$HOME', 'double'), ('/*.txt', 'bare')], [('a b', 'single')]]

    Returns
    -------
    list of list of (str, str) tuples
        Each word is a list of `(text, quoting)` pairs where quoting is one of
        'bare', 'double', 'single' or 'escaped'. Quotes are removed.

    Raises
    ------
    ValueError
        If `pattern` has an unbalanced quote or ends with a backslash.
    """
    words, parts = [], []
    for mo in RGX_WORD_PART.finditer(pattern):
        kind = mo.lastgroup
        if kind == 'space':
            if parts:
                words.append(parts)
                parts = []
            continue

        if kind == 'bad':
            raise ValueError(f'Unbalanced quote or escape at position '
                             f'{mo.start()} in {pattern!r}.')

        if kind == 'double':
            # backslash escaped characters inside double quotes are literal
            for i, text in enumerate(RGX_ESCAPE.split(mo[kind])):
                parts.append((text, ('double', 'escaped')[i % 2]))
            continue

        parts.append((mo[kind], kind))

    if parts:
        words.append(parts)

    return words


def _expand_word(parts):
    # tilde expansion only applies to an unquoted tilde at the start of a word
    text, kind = parts[0]
    if kind == 'bare' and text.startswith('~'):
        parts = [(os.path.expanduser(text), kind), *parts[1:]]

    # only unquoted text is subject to pattern matching
    literal, pattern, magic = [], [], False
    for text, kind in parts:
        if kind in ('bare', 'double'):
            text = os.path.expandvars(text)

        literal.append(text)
        if kind == 'bare':
            magic = magic or glob.has_magic(text)
            pattern.append(text)
        else:
            pattern.append(glob.escape(text))

    if magic and (matches := sorted(glob.glob(''.join(pattern)))):
        return matches

    return [''.join(literal)]


def wordexp(pattern):
    """
    Perform shell-like word expansion on `pattern`: split into words, then
    expand user home directories, environment variables and glob patterns in
    each word. Quoting follows the shell: single quotes and backslash escapes
    keep text literal, double quotes allow variable expansion only. Glob
    patterns that match nothing are kept verbatim. Command substitution is not
    performed.

    Parameters
    ----------
    pattern : str
        The text to expand.

    Examples
    --------
    >>> wordexp('~/"My Documents"/*.txt')
    ['/home/user/My Documents/a.txt', '/home/user/My Documents/b.txt']
    >>> wordexp("'*.txt'")
    ['*.txt']

    Returns
    -------
    list of str
        The expanded words. Empty if `pattern` is blank or could not be parsed
        (eg. unbalanced quotes).
    """
    try:
        words = split_words(pattern)
    except ValueError as err:
        logger.debug('Could not parse {!r} for word expansion: {}', pattern, err)
        return []

    return list(mit.collapse(map(_expand_word, words)))


def expand_filename(filename, emit=None):
    """
    Expand `filename` the way a shell would and return the first resulting
    word. If nothing expands, `filename` is returned unchanged.

    On platforms without word expansion, an empty string is returned and a
    diagnostic is emitted, so that callers can tell "nothing to expand" apart
    from "expansion unavailable".

    Parameters
    ----------
    filename : str or Path
        The filename, possibly containing '~', '$VAR' or glob patterns.
    emit : {'ignore', 'info', 'debug', 'warn', 'raise'}, optional
        What to do if expansion is not supported on this platform. The default
        is taken from the `shell.unsupported` config value.

    Returns
    -------
    str

    Raises
    ------
    UnsupportedPlatform
        If expansion is unavailable and `emit='raise'`.
    """
    filename = str(filename)
    if not EXPANSION_SUPPORTED:
        Emit(emit or CONFIG.shell.unsupported,
             UnsupportedPlatform, UnsupportedPlatformWarning)(
            'Filename expansion is not supported on platform {!r}. Could not '
            'expand {!r}.', sys.platform, filename
        )
        return ''

    if words := wordexp(filename):
        return words[0]

    return filename
