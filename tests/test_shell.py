
# std
import os
import warnings

# third-party
import pytest

# local
from strtools import shell
from strtools.shell import expand_filename, split_words, wordexp
from strtools.exceptions import UnsupportedPlatform, UnsupportedPlatformWarning


# ---------------------------------------------------------------------------- #
posix_only = pytest.mark.skipif(not shell.EXPANSION_SUPPORTED,
                                reason='Word expansion not available.')


@pytest.fixture
def files(tmp_path):
    for name in ('b.txt', 'a.txt', 'c.dat'):
        (tmp_path / name).touch()
    return tmp_path


@pytest.fixture
def unsupported(monkeypatch):
    monkeypatch.setattr(shell, 'EXPANSION_SUPPORTED', False)


# ---------------------------------------------------------------------------- #

@posix_only
def test_expand_home(monkeypatch, tmp_path):
    monkeypatch.setenv('HOME', str(tmp_path))
    assert expand_filename('~/data.txt') == f'{tmp_path}/data.txt'


@posix_only
def test_expand_variable(monkeypatch):
    monkeypatch.setenv('STRTOOLS_TEST_DIR', '/some/where')
    assert expand_filename('$STRTOOLS_TEST_DIR/x') == '/some/where/x'
    assert expand_filename('${STRTOOLS_TEST_DIR}/y') == '/some/where/y'


@posix_only
def test_expand_glob(files):
    assert expand_filename(f'{files}/*.txt') == f'{files}/a.txt'
    assert wordexp(f'{files}/*.txt') == [f'{files}/a.txt', f'{files}/b.txt']


@posix_only
@pytest.mark.parametrize(
    'filename',
    ['plain.txt', '/no/such/dir/*.fits', '', 'unbalanced "quote']
)
def test_expand_unchanged(filename):
    assert expand_filename(filename) == filename


@posix_only
def test_expand_quoted():
    assert expand_filename('"my file.txt" other') == 'my file.txt'
    assert wordexp("'a b' c") == ['a b', 'c']


@pytest.mark.parametrize(
    'pattern, expected',
    [('plain', [[('plain', 'bare')]]),
     ('a  b', [[('a', 'bare')], [('b', 'bare')]]),
     ("'a b'", [[('a b', 'single')]]),
     ('~/"$X"/*', [[('~/', 'bare'), ('$X', 'double'), ('/*', 'bare')]]),
     ('"a\\$b"', [[('a', 'double'), ('$', 'escaped'), ('b', 'double')]]),
     ('\\*x', [[('*', 'escaped'), ('x', 'bare')]]),
     ("''", [[('', 'single')]]),
     ('', [])]
)
def test_split_words(pattern, expected):
    assert split_words(pattern) == expected


@pytest.mark.parametrize('pattern', ['"open', "'open", 'trailing\\'])
def test_split_words_unbalanced(pattern):
    with pytest.raises(ValueError):
        split_words(pattern)


@posix_only
def test_quoted_glob_is_literal(files):
    assert expand_filename(f"'{files}/*.txt'") == f'{files}/*.txt'
    assert expand_filename(f'"{files}/*.txt"') == f'{files}/*.txt'
    assert expand_filename(f'{files}/\\*.txt') == f'{files}/*.txt'
    # unquoted part of a partly quoted word is still matched
    assert wordexp(f'"{files}"/*.txt') == [f'{files}/a.txt', f'{files}/b.txt']


@posix_only
def test_quoted_variable(monkeypatch):
    monkeypatch.setenv('STRTOOLS_TEST_DIR', '/some/where')
    assert expand_filename("'$STRTOOLS_TEST_DIR'/x") == '$STRTOOLS_TEST_DIR/x'
    assert expand_filename('\\$STRTOOLS_TEST_DIR') == '$STRTOOLS_TEST_DIR'
    assert expand_filename('"$STRTOOLS_TEST_DIR"/x') == '/some/where/x'


@posix_only
def test_quoted_tilde(monkeypatch, tmp_path):
    monkeypatch.setenv('HOME', str(tmp_path))
    assert expand_filename('"~"/data.txt') == '~/data.txt'
    assert expand_filename('~/"my data".txt') == f'{tmp_path}/my data.txt'


def test_unsupported_warns(unsupported):
    with pytest.warns(UnsupportedPlatformWarning):
        assert expand_filename('~/data.txt') == ''


def test_unsupported_raises(unsupported):
    with pytest.raises(UnsupportedPlatform):
        expand_filename('~/data.txt', emit='raise')


def test_unsupported_ignore(unsupported):
    with warnings.catch_warnings():
        warnings.simplefilter('error')
        assert expand_filename('~/data.txt', emit='ignore') == ''


def test_unsupported_logged(unsupported, messages):
    assert expand_filename(os.path.join('~', 'x'), emit='info') == ''
    assert any('not supported' in str(msg) for msg in messages)
