"""Exceptions raised by the codec.

The in-memory coder raises these directly; the file helpers in
``huffzip.files`` report them and hand back an empty path instead.
"""


class HuffzipError(Exception):
    """Base class for every codec failure."""


class SourceUnreadable(HuffzipError):
    """Input file could not be opened or read."""


class EmptyInput(HuffzipError):
    """Zero symbols to build a tree from."""


class InputTooLarge(HuffzipError):
    """More symbols than the 4-byte count field can record."""


class CorruptContainer(HuffzipError):
    """Container ended early or holds something no encoder writes."""


class DestinationUnwritable(HuffzipError):
    """Output file could not be created or written."""
