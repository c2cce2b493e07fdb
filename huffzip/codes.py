from __future__ import annotations

from typing import Dict, Tuple

from .tree import Leaf, Node

#(bits, length): the code read most significant bit first
Code = Tuple[int, int]


class CodeTable:
    """Symbol -> code and code -> symbol, derived from one tree.

    Left edges contribute a 0 bit and right edges a 1 bit, accumulated from the
    root. A tree that is a single leaf gives its symbol the one-bit code 0.
    """

    __slots__ =("codes", "symbols", "max_length")

    def __init__(self, codes: Dict[int, Code]):
        self.codes = codes
        self.symbols: Dict[Code, int] ={code: sym for sym, code in codes.items()}
        self.max_length = max((ln for _, ln in codes.values()), default=0)

    @classmethod
    def from_tree(cls, root: Node) -> "CodeTable":
        codes: Dict[int, Code] ={}
        _walk(root, 0, 0, codes)
        return cls(codes)

    def bitstring(self, symbol: int) -> str:
        bits, length = self.codes[symbol]
        return f"{bits:0{length}b}"


def _walk(node: Node, bits: int, length: int, out: Dict[int, Code]) -> None:
    if isinstance(node, Leaf):
        out[node.symbol] =(bits, length) if length else(0, 1)
        return
    _walk(node.left,  bits << 1,       length+1, out)
    _walk(node.right,(bits << 1) | 1, length+1, out)
