
# third-party
import pytest

# local
from strtools.string import (ends_with, split, starts_with, to_lower, to_upper,
                             trim, trim_left, trim_right)


# ---------------------------------------------------------------------------- #
STRINGS = ['', ' ', ' \t\n', 'hi', '  \t hi \n', '\nhello world\t', 'a b',
           '\r\n', ' x\ry ']


# ---------------------------------------------------------------------------- #
# Trim

@pytest.mark.parametrize(
    'string, left, right, both',
    [('',               '',             '',             ''),
     ('   ',            '',             '',             ''),
     ('  \t hi \n',     'hi \n',        '  \t hi',      'hi'),
     ('hi',             'hi',           'hi',           'hi'),
     ('\thello world ', 'hello world ', '\thello world', 'hello world'),
     # carriage returns are not part of the whitespace set
     ('\r hi \r',       '\r hi \r',     '\r hi \r',     '\r hi \r')]
)
def test_trim(string, left, right, both):
    assert trim_left(string) == left
    assert trim_right(string) == right
    assert trim(string) == both


@pytest.mark.parametrize('string', STRINGS)
def test_trim_idempotent(string):
    assert trim(trim(string)) == trim(string)


def test_trim_chars():
    assert trim('--x--', '-') == 'x'


# ---------------------------------------------------------------------------- #
# Case

@pytest.mark.parametrize(
    'string, lower, upper',
    [('',                   '',                 ''),
     ('Hello World!',       'hello world!',     'HELLO WORLD!'),
     ('123_abc-XYZ',        '123_abc-xyz',      '123_ABC-XYZ'),
     # only ASCII letters change
     ('ÄÖÜ äöü ß',          'ÄÖÜ äöü ß',        'ÄÖÜ äöü ß'),
     ('İstanbul',           'İstanbul',         'İSTANBUL')]
)
def test_case(string, lower, upper):
    assert to_lower(string) == lower
    assert to_upper(string) == upper


# ---------------------------------------------------------------------------- #
# Split

@pytest.mark.parametrize(
    'string, delimiters, expected',
    [('a,,b,',          ',',    ['a', '', 'b', '']),
     ('a,b,c',          ',',    ['a', 'b', 'c']),
     ('abc',            ',',    ['abc']),
     ('',               ',',    ['']),
     (',',              ',',    ['', '']),
     (',a',             ',',    ['', 'a']),
     ('k=v;x=y',        '=;',   ['k', 'v', 'x', 'y']),
     ('a b\tc',         ' \t',  ['a', 'b', 'c']),
     ('a  b',           ' ',    ['a', '', 'b']),
     ('abc',            '',     ['abc'])]
)
def test_split(string, delimiters, expected):
    assert split(string, delimiters) == expected


@pytest.mark.parametrize(
    'string, delimiters',
    [('a,,b,', ','),
     ('k=v;x=y;;', '=;'),
     (';=;', '=;'),
     ('no delimiters', ',')]
)
def test_split_rejoin(string, delimiters):
    # each delimiter position is kept when joining on any delimiter
    for delimiter in delimiters:
        expected = ''.join(delimiter if c in delimiters else c for c in string)
        assert delimiter.join(split(string, delimiters)) == expected


# ---------------------------------------------------------------------------- #
# Affixes

@pytest.mark.parametrize(
    'string, affix, start, end',
    [('hello', 'he', True, False),
     ('hello', 'lo', False, True),
     ('hello', 'hello', True, True),
     ('hello', 'hello!', False, False),
     ('', 'x', False, False),
     ('', '', True, True),
     ('abab', 'ab', True, True)]
)
def test_affixes(string, affix, start, end):
    assert starts_with(string, affix) is start
    assert ends_with(string, affix) is end


@pytest.mark.parametrize('string', STRINGS)
def test_empty_affix(string):
    assert starts_with(string, '')
    assert ends_with(string, '')


@pytest.mark.parametrize('affix', [s for s in STRINGS if s])
def test_empty_subject(affix):
    assert not starts_with('', affix)
    assert not ends_with('', affix)
