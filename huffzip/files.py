"""File-level compress/decompress used by the benchmark harness.

These never raise codec errors: a failure is printed to stderr and the empty
string is returned in place of the output path.
"""

from __future__ import annotations

import os
import sys

from .errors import DestinationUnwritable, HuffzipError, SourceUnreadable
from .huffman import HuffmanCoder

COMPRESSED_TAG = "compressed_"
DECOMPRESSED_TAG = "decompressed_"


def compressed_path(source: str) -> str:
    head, tail = os.path.split(source)
    return os.path.join(head, COMPRESSED_TAG+tail)


def decompressed_path(source: str) -> str:
    head, tail = os.path.split(source)
    if tail.startswith(COMPRESSED_TAG):
        tail = tail[len(COMPRESSED_TAG):]
    return os.path.join(head, DECOMPRESSED_TAG+tail)


def read_source(path: str) -> bytes:
    try:
        with open(path, "rb") as fp:
            return fp.read()
    except OSError as exc:
        raise SourceUnreadable(f"Cannot open file: {path}") from exc


def write_destination(path: str, blob: bytes) -> None:
    try:
        with open(path, "wb") as fp:
            fp.write(blob)
    except OSError as exc:
        raise DestinationUnwritable(f"Cannot write file: {path}") from exc


def _report(exc: HuffzipError) -> str:
    print(f"[error] {exc}", file=sys.stderr)
    return ""


def compress_file(source: str, dest: str = "", coder: HuffmanCoder | None = None) -> str:
    """Compress source into dest(default: source name prefixed with compressed_).

    Returns dest, or "" if anything failed.
    """
    dest = dest or compressed_path(source)
    coder = coder or HuffmanCoder()
    try:
        write_destination(dest, coder.encode(read_source(source)))
    except HuffzipError as exc:
        return _report(exc)
    return dest


def decompress_file(source: str, dest: str = "", coder: HuffmanCoder | None = None) -> str:
    """Restore the original bytes of a container into dest.

    The default dest strips a leading compressed_ tag and prefixes decompressed_.
    The container is fully decoded before dest is opened, so a corrupt input
    leaves no output file behind.
    """
    dest = dest or decompressed_path(source)
    coder = coder or HuffmanCoder()
    try:
        write_destination(dest, coder.decode(read_source(source)))
    except HuffzipError as exc:
        return _report(exc)
    return dest


def file_size(path: str) -> int:
    """Size of path in bytes, or -1 if it cannot be opened."""
    try:
        with open(path, "rb") as fp:
            return fp.seek(0, os.SEEK_END)
    except OSError:
        print(f"[error] Cannot open file {path}", file=sys.stderr)
        return -1
