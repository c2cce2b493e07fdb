"""
Preorder tree serialization.

    leaf      b"1" + symbol byte
    internal  b"0" + left subtree + right subtree

The stream delimits itself, so the decoder knows where the tree ends without a
length field.
"""

from __future__ import annotations

from typing import Set, Tuple

from .errors import CorruptContainer
from .tree import Internal, Leaf, Node

LEAF = ord("1")
INTERNAL = ord("0")

#256 distinct symbols cannot put a node deeper than this
MAX_DEPTH = 255


def serialize_tree(root: Node) -> bytes:
    out = bytearray()
    _write(root, out)
    return bytes(out)


def _write(node: Node, out: bytearray) -> None:
    if isinstance(node, Leaf):
        out += bytes([LEAF, node.symbol])
        return
    out.append(INTERNAL)
    _write(node.left, out)
    _write(node.right, out)


def deserialize_tree(blob: bytes, offset: int = 0) -> Tuple[Node, int]:
    """Rebuild a tree starting at blob[offset].

    Returns the root and the offset of the first byte after the tree. Raises
    CorruptContainer instead of reading past the end of blob.
    """
    seen: Set[int] = set()

    def read(pos: int, depth: int) -> Tuple[Node, int]:
        if depth > MAX_DEPTH:
            raise CorruptContainer(f"tree nested deeper than {MAX_DEPTH} levels")
        if pos >= len(blob):
            raise CorruptContainer(f"tree truncated at byte {pos}")

        marker = blob[pos]
        if marker == LEAF:
            if pos+1 >= len(blob):
                raise CorruptContainer(f"leaf at byte {pos} has no symbol")
            sym = blob[pos+1]
            if sym in seen:
                raise CorruptContainer(f"symbol {sym} appears in two leaves")
            seen.add(sym)
            return Leaf(sym), pos+2

        if marker != INTERNAL:
            raise CorruptContainer(f"unexpected marker 0x{marker:02x} at byte {pos}")
        left, pos = read(pos+1, depth+1)
        right, pos = read(pos, depth+1)
        return Internal(left, right), pos

    return read(offset, 0)
