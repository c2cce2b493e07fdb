"""
HuffmanCoder

This class runs the full pipeline from symbol frequency analysis to prefix tree
construction, then writes the tree shape itself in front of the packed payload so
the decoder rebuilds the identical code table without any side channel.

Container layout:

    serialized tree | symbol count (4 bytes, little-endian) | packed bits
"""

from __future__ import annotations

from io import BytesIO

from .bits import pack, unpack
from .codes import CodeTable
from .errors import CorruptContainer, EmptyInput, InputTooLarge
from .frequency import count_symbols
from .serial import deserialize_tree, serialize_tree
from .tree import build_tree

COUNT_SIZE = 4
MAX_SYMBOLS =(1 <<(8*COUNT_SIZE))-1


class HuffmanCoder:
    """Whole-buffer Huffman encoder/decoder.

    Handles the full byte range, including a file made of a single repeated
    byte (one-leaf tree, one bit per symbol).
    """

    name = "Huffman"

    def encode(self, data: bytes) -> bytes:
        if not data:
            raise EmptyInput("nothing to compress: input is empty")
        if len(data) > MAX_SYMBOLS:
            raise InputTooLarge(f"{len(data)} bytes exceeds the {MAX_SYMBOLS} symbol limit")

        #Build tree from symbol frequencies, then walk it for the codes
        root = build_tree(count_symbols(data))
        table = CodeTable.from_tree(root)

        buf = BytesIO()
        buf.write(serialize_tree(root))
        buf.write(len(data).to_bytes(COUNT_SIZE, "little"))   #Uncompressed size
        buf.write(pack(data, table))
        return buf.getvalue()

    def decode(self, blob: bytes) -> bytes:
        root, i = deserialize_tree(blob)
        table = CodeTable.from_tree(root)

        if len(blob)-i < COUNT_SIZE:
            raise CorruptContainer("container ends inside the symbol count")
        count = int.from_bytes(blob[i:i+COUNT_SIZE], "little"); i += COUNT_SIZE
        if count == 0:
            raise CorruptContainer("container records zero symbols")

        #Decode bitstream until the recorded count is met
        return unpack(memoryview(blob)[i:], table, count)
