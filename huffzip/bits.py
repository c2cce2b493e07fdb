"""
Bit packing for the container payload.

Codes are written most significant bit first and the last byte is padded with
zero bits. Padding cannot be told apart from code bits, so the decoder is
always given the number of symbols to emit.
"""

from __future__ import annotations

from typing import Iterator

from .codes import CodeTable
from .errors import CorruptContainer

#
#Bit I/O buffers
#

class BitWriter:
    #Collect variable-length codes and flush whole bytes as they fill up.

    __slots__ =("buf", "acc", "nbits")

    def __init__(self):
        self.buf = bytearray()
        self.acc = 0
        self.nbits = 0

    def write(self, bits: int, length: int) -> None:
        self.acc =(self.acc << length) | bits
        self.nbits += length
        while self.nbits >= 8:
            self.nbits -= 8
            self.buf.append((self.acc >> self.nbits) & 0xFF)
        self.acc &=(1 << self.nbits)-1

    def finish(self) -> bytes:
        if self.nbits:
            self.buf.append((self.acc <<(8-self.nbits)) & 0xFF)
            self.acc = self.nbits = 0
        return bytes(self.buf)


class BitReader:
    #Yield the bits of a byte buffer one at a time.

    __slots__ =("blob",)

    def __init__(self, blob: bytes):
        self.blob = blob

    def __iter__(self) -> Iterator[int]:
        for byte in self.blob:
            for shift in range(7, -1, -1):
                yield(byte >> shift) & 1


#
#Payload encode / decode
#

def pack(data: bytes, table: CodeTable) -> bytes:
    """Concatenate the code of every symbol in order and pad to a byte."""
    out = BitWriter()
    codes = table.codes
    for sym in data:
        out.write(*codes[sym])
    return out.finish()


def unpack(payload: bytes, table: CodeTable, count: int) -> bytes:
    """Decode exactly count symbols from payload.

    Bits are appended to an accumulator until it equals a code in the table.
    The code set is prefix-free, so the first match is the only one possible.
    Bits left over after the last symbol are padding and are ignored.
    """
    out = bytearray()
    if count == 0:
        return b""

    lookup = table.symbols
    limit = table.max_length
    acc = length = 0
    for bit in BitReader(payload):
        acc =(acc << 1) | bit
        length += 1
        sym = lookup.get((acc, length))
        if sym is None:
            if length >= limit:
                raise CorruptContainer(f"bit pattern {acc:0{length}b} matches no code")
            continue
        out.append(sym)
        if len(out) == count:
            return bytes(out)
        acc = length = 0

    raise CorruptContainer(f"payload ended after {len(out)} of {count} symbols")
