"""
Huffman tree nodes and the greedy builder.

A tree is either a Leaf (one byte value) or an Internal node owning exactly two
subtrees. Frequencies are kept on the nodes while building but are never
transmitted, so equality only looks at shape and symbols.
"""

from __future__ import annotations

from heapq import heapify, heappush, heappop
from typing import List, Mapping, Tuple, Union

from .errors import EmptyInput

#
#Node types
#

class Leaf:
    """Terminal node holding a single symbol."""

    __slots__ =("symbol", "freq")

    def __init__(self, symbol: int, freq: int = 0):
        self.symbol, self.freq = symbol, freq

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Leaf) and self.symbol == other.symbol

    def __repr__(self) -> str:
        return f"Leaf({self.symbol})"


class Internal:
    """Branch with a left("0") and right("1") child; no symbol."""

    __slots__ =("left", "right", "freq")

    def __init__(self, left: "Node", right: "Node", freq: int | None = None):
        self.left, self.right = left, right
        self.freq = left.freq+right.freq if freq is None else freq

    def __eq__(self, other: object) -> bool:
        return(isinstance(other, Internal)
               and self.left == other.left and self.right == other.right)

    def __repr__(self) -> str:
        return f"Internal({self.left!r}, {self.right!r})"


Node = Union[Leaf, Internal]


#
#Builder
#

def build_tree(freq: Mapping[int, int]) -> Node:
    """Merge the two lightest nodes until a single root is left.

    Heap entries are ordered by(frequency, creation order). Leaves are created
    in ascending symbol order and merged nodes get the next number as they are
    made, so equal inputs always give the same tree. The first node popped
    becomes the left child.
    """
    if not freq:
        raise EmptyInput("cannot build a Huffman tree from zero symbols")

    heap: List[Tuple[int, int, Node]] = [
        (f, order, Leaf(s, f)) for order,(s, f) in enumerate(sorted(freq.items()))
    ]
    heapify(heap)

    #A lone leaf skips the loop and is returned as the root
    order = len(heap)
    while len(heap) > 1:
        f1, _, n1 = heappop(heap)
        f2, _, n2 = heappop(heap)
        heappush(heap,(f1+f2, order, Internal(n1, n2, f1+f2)))
        order += 1
    return heap[0][2]
