"""
Exception types.
"""


class StrToolsError(Exception):
    """Base class for errors raised or reported by this package."""


class RenderError(StrToolsError):
    """A formatted string could not be built."""


class FormatError(RenderError):
    """The format template is malformed or does not match its arguments."""


class AllocationError(RenderError, MemoryError):
    """A buffer of the requested size could not be allocated."""


class UnsupportedPlatform(StrToolsError):
    """The requested facility does not exist on this platform."""


class UnsupportedPlatformWarning(UserWarning):
    pass
