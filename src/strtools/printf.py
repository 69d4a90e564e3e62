"""
Build formatted strings of arbitrary length from printf-style templates.

Text is first rendered into a probe buffer of fixed capacity. The bounded
formatter always reports the length that the complete text requires, so if the
probe buffer turns out to be too small, it is released and the text is rendered
a second time into a buffer of exactly the right size.

Examples
--------
>>> format_string('%s has %d items', 'cart', 3)
'cart has 3 items'
>>> with render('%-10s|', 'left') as outcome:
...     outcome.length, outcome.text
(11, 'left      |')
"""

# std
from collections import abc
from dataclasses import dataclass, field
from typing import Any, Optional, Union

# third-party
from loguru import logger

# relative
from .config import CONFIG
from .exceptions import AllocationError, FormatError, RenderError


# ---------------------------------------------------------------------------- #
NUL = 0


# ---------------------------------------------------------------------------- #

class Buffer:
    """
    An owned, fixed capacity byte buffer. Data written to the buffer is always
    followed by a NUL terminator. Once released, the buffer can no longer be
    used.
    """

    __slots__ = ('_data', '_size', '_owner')

    def __init__(self, capacity, owner=None):
        self._data = bytearray(capacity)
        self._size = 0
        self._owner = owner

    def __repr__(self):
        if self.released:
            return f'{type(self).__name__}(<released>)'
        return f'{type(self).__name__}(capacity={self.capacity}, size={self._size})'

    def __len__(self):
        return self._size

    def __bytes__(self):
        return self.tobytes()

    def __enter__(self):
        return self

    def __exit__(self, *_):
        if not self.released:
            self.release()

    def _check(self):
        if self._data is None:
            raise ValueError('Operation on released buffer.')
        return self._data

    @property
    def capacity(self):
        return len(self._check())

    @property
    def released(self):
        return self._data is None

    def write(self, data):
        """
        Write as much of `data` as fits, leaving room for the terminator.

        Parameters
        ----------
        data : bytes
            The content to write.

        Returns
        -------
        int
            Number of bytes written, excluding the terminator.
        """
        buffer = self._check()
        if not buffer:
            return 0

        self._size = size = min(len(data), len(buffer) - 1)
        buffer[:size] = data[:size]
        buffer[size] = NUL
        return size

    def shrink(self, capacity):
        buffer = self._check()
        if not self._size < capacity <= len(buffer):
            raise ValueError(
                f'Cannot resize buffer with capacity {len(buffer)} holding '
                f'{self._size} bytes to {capacity} bytes.'
            )
        del buffer[capacity:]

    def tobytes(self):
        return bytes(self._check()[:self._size])

    def decode(self, encoding='utf-8', errors='strict'):
        return self.tobytes().decode(encoding, errors)

    def release(self):
        self._check()
        self._data = None
        if self._owner is not None:
            self._owner.reclaim(self)


class Allocator:
    """
    Hands out owned buffers and keeps account of allocations and releases.

    Parameters
    ----------
    limit : int, optional
        Largest buffer (in bytes) that may be requested. Larger requests raise
        `AllocationError`. The default, None, places no limit.
    """

    def __init__(self, limit=None):
        self.limit = limit
        self.sizes = []
        self.released = 0

    def __repr__(self):
        return (f'{type(self).__name__}(allocated={self.allocated}, '
                f'released={self.released})')

    @property
    def allocated(self):
        return len(self.sizes)

    @property
    def outstanding(self):
        return self.allocated - self.released

    def allocate(self, size):
        size = int(size)
        if size < 0:
            raise ValueError(f'Invalid buffer size: {size}.')

        if self.limit is not None and size > self.limit:
            raise AllocationError(
                f'Requested buffer of {size} bytes exceeds allocation limit of '
                f'{self.limit} bytes.'
            )

        try:
            buffer = Buffer(size, self)
        except MemoryError as err:
            raise AllocationError(
                f'Could not allocate buffer of {size} bytes.'
            ) from err

        self.sizes.append(size)
        logger.trace('Allocated buffer of {} bytes.', size)
        return buffer

    def reclaim(self, buffer):
        self.released += 1
        logger.trace('Released {}.', buffer)


# ---------------------------------------------------------------------------- #

@dataclass(frozen=True)
class FormatRequest:
    """
    A format template together with a snapshot of the values to substitute.
    The snapshot can be traversed any number of times.
    """

    template: str
    args: Union[tuple, abc.Mapping] = ()

    @classmethod
    def capture(cls, template, args=()):
        if isinstance(args, abc.Mapping):
            return cls(template, dict(args))

        return cls(template, tuple(args))

    def format(self):
        return self.template % self.args


@dataclass(frozen=True)
class Rendered:
    """Successful outcome. The caller owns `buffer` and must release it."""

    length: int
    buffer: Buffer
    encoding: str = field(default='utf-8', compare=False)

    def __bool__(self):
        return True

    def __enter__(self):
        return self

    def __exit__(self, *_):
        if not self.buffer.released:
            self.buffer.release()

    @property
    def text(self):
        return self.buffer.decode(self.encoding)

    def release(self):
        self.buffer.release()


@dataclass(frozen=True)
class Failed:
    """Unsuccessful outcome. No buffer is held."""

    error: Optional[RenderError] = None
    length = -1

    def __bool__(self):
        return False

    def __enter__(self):
        return self

    def __exit__(self, *_):
        pass


RenderOutcome = Union[Rendered, Failed]


# ---------------------------------------------------------------------------- #

def bounded_format(buffer: Buffer, request: FormatRequest,
                   encoding: str = 'utf-8') -> int:
    """
    Render `request` into `buffer`, truncating if necessary.

    Parameters
    ----------
    buffer : Buffer
        Destination. At most `buffer.capacity - 1` bytes of text are written,
        followed by the terminator.
    request : FormatRequest
        Template and arguments.
    encoding : str
        Encoding for the rendered text.

    Returns
    -------
    int
        The number of bytes required by the complete rendered text, regardless
        of how much of it fit in the buffer. -1 if the template could not be
        rendered.

    Raises
    ------
    AllocationError
        If memory ran out while rendering the text.
    """
    try:
        data = request.format().encode(encoding)
    except (TypeError, ValueError, KeyError, OverflowError) as err:
        logger.debug('Could not render template {!r}: {}', request.template, err)
        return -1
    except MemoryError as err:
        raise AllocationError(
            f'Out of memory while rendering template {request.template!r}.'
        ) from err

    buffer.write(data)
    return len(data)


def _render_pass(allocator, size, request, encoding):
    # Render into a new buffer of `size` bytes. The buffer is returned only if
    # the complete text fit, otherwise it is released before returning.
    buffer = allocator.allocate(size)
    try:
        nchars = bounded_format(buffer, request, encoding)
        if 0 <= nchars < size:
            buffer.shrink(nchars + 1)
            buffer, result = None, buffer
            return nchars, result

        return nchars, None
    finally:
        if buffer is not None:
            buffer.release()


def vrender(template: str, args: Any = (), capacity: Optional[int] = None,
            encoding: Optional[str] = None,
            allocator: Optional[Allocator] = None) -> RenderOutcome:
    """
    Render a printf-style `template` with the sequence (or mapping) of values
    `args` into a new buffer of exactly the required size.

    Parameters
    ----------
    template : str
        Format template using `%` style conversion directives.
    args : iterable or mapping
        Values to substitute. Iterables are consumed once, up front.
    capacity : int, optional
        Size of the probe buffer in bytes. Default from the `printf.capacity`
        config value.
    encoding : str, optional
        Text encoding. Default from the `printf.encoding` config value.
    allocator : Allocator, optional
        Source of buffers. A new `Allocator` is used by default.

    Returns
    -------
    Rendered or Failed
        On success, the caller takes ownership of `Rendered.buffer`. On
        failure, no buffer is held.
    """

    request = FormatRequest.capture(template, args)
    capacity = int(CONFIG.printf.capacity if capacity is None else capacity)
    if capacity < 1:
        raise ValueError(f'Probe buffer capacity should be positive, not '
                         f'{capacity}.')

    encoding = encoding or CONFIG.printf.encoding
    if allocator is None:
        allocator = Allocator()

    try:
        nchars, buffer = _render_pass(allocator, capacity, request, encoding)
        if buffer is None and nchars >= 0:
            logger.debug('Rendered text requires {} bytes, probe buffer has {}. '
                         'Rendering again.', nchars, capacity)
            nchars, buffer = _render_pass(allocator, nchars + 1, request,
                                          encoding)
    except AllocationError as err:
        logger.debug('{}', err)
        return Failed(err)

    if nchars < 0:
        return Failed(FormatError(
            f'Could not render template {request.template!r} with arguments '
            f'{request.args!r}.'
        ))

    if buffer is None:
        # arguments rendered longer on the second pass
        return Failed(FormatError(
            f'Rendered length of template {request.template!r} changed between '
            f'passes.'
        ))

    return Rendered(nchars, buffer, encoding)


def render(template, *args, capacity=None, encoding=None, allocator=None):
    """
    Render a printf-style `template` with values `args`. See `vrender`.
    A single mapping argument supplies the values for named directives, as
    with `template % mapping`.

    Examples
    --------
    >>> outcome = render('%s has %d items', 'cart', 3)
    >>> outcome.text
    'cart has 3 items'
    >>> outcome.release()
    """
    if len(args) == 1 and isinstance(args[0], abc.Mapping):
        args, = args

    return vrender(template, args, capacity, encoding, allocator)


# ---------------------------------------------------------------------------- #

def format_string(template, *args, **kws):
    """
    Format `template` with `args`, returning the text, or an empty string if
    rendering failed.
    """
    with vrender(template, args, **kws) as outcome:
        if outcome:
            return outcome.text

    logger.error('Error while allocating memory or formatting: {}',
                 outcome.error)
    return ''


def strprintf(template, *args, **kws):
    """
    Format `template` with `args`.

    Returns
    -------
    length : int
        The number of bytes in the rendered text, or -1 on failure.
    text : str
        The rendered text. Empty on failure.
    """
    with vrender(template, args, **kws) as outcome:
        return outcome.length, (outcome.text if outcome else '')
