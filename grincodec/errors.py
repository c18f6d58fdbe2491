"""
errors.py

Exceptions raised by grincodec.
"""


class GrinError(Exception):
    """Base class for all grincodec errors."""
    pass


class FormatError(GrinError, ValueError):
    """The input does not start with the .grin magic number."""
    pass


class CorruptStreamError(GrinError, ValueError):
    """The serialized tree or the coded payload is malformed or truncated."""
    pass


class InternalInvariantError(GrinError, RuntimeError):
    """A symbol has no entry in the code table derived from the tree."""
    pass
