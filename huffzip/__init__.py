"""Byte-oriented Huffman compression of whole files."""

from .errors import (
    CorruptContainer,
    DestinationUnwritable,
    EmptyInput,
    HuffzipError,
    InputTooLarge,
    SourceUnreadable,
)
from .files import compress_file, decompress_file, file_size
from .huffman import HuffmanCoder

__all__ = [
    "CorruptContainer",
    "DestinationUnwritable",
    "EmptyInput",
    "HuffmanCoder",
    "HuffzipError",
    "InputTooLarge",
    "SourceUnreadable",
    "compress_file",
    "decompress_file",
    "file_size",
]
