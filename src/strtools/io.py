"""
Line oriented reading from open streams.
"""

# std
import io


# ---------------------------------------------------------------------------- #
EOF = -1


# ---------------------------------------------------------------------------- #

def read_line(stream, line):
    """
    Read the next line from `stream` into the reusable buffer `line`.

    The content of `line` is replaced with the characters up to, but not
    including, the next newline. The newline itself is consumed and discarded.

    Parameters
    ----------
    stream : io.IOBase
        An open, readable text or binary stream.
    line : io.StringIO or io.BytesIO
        Buffer that receives the line. Must match the type of `stream`.

    Examples
    --------
    >>> stream, line = io.StringIO('a\\nb\\n'), io.StringIO()
    >>> read_line(stream, line), line.getvalue()
    (1, 'a')

    Returns
    -------
    int
        Number of characters extracted, or `EOF` if the stream is exhausted.
    """

    text = stream.readline()
    if not text:
        return EOF

    # text and binary streams are both supported
    newline = b'\n' if isinstance(text, bytes) else '\n'
    if text.endswith(newline):
        text = text[:-1]

    line.seek(0)
    line.truncate()
    line.write(text)
    return len(text)


def iter_lines(stream, line=None):
    """
    Yield successive lines from the open `stream`, without newlines, until the
    stream is exhausted.

    Parameters
    ----------
    stream : io.IOBase
        An open, readable text or binary stream.
    line : io.StringIO or io.BytesIO, optional
        Reusable line buffer. A new one matching the stream type is created if
        not given.

    Yields
    ------
    str or bytes
    """
    if line is None:
        binary = not isinstance(stream, io.TextIOBase)
        line = (io.StringIO, io.BytesIO)[binary]()

    while read_line(stream, line) != EOF:
        yield line.getvalue()
