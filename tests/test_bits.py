import pytest

from huffzip.bits import BitReader, BitWriter, pack, unpack
from huffzip.codes import CodeTable
from huffzip.errors import CorruptContainer
from huffzip.frequency import count_symbols
from huffzip.tree import Internal, Leaf, build_tree


def _table(data: bytes) -> CodeTable:
    return CodeTable.from_tree(build_tree(count_symbols(data)))


def test_writer_is_msb_first_and_zero_padded():
    out = BitWriter()
    out.write(0b1, 1)
    out.write(0b01, 2)
    assert out.finish() == bytes([0b10100000])


def test_writer_spans_bytes():
    out = BitWriter()
    out.write(0b101, 3)
    out.write(0b1111111111, 10)
    assert out.finish() == bytes([0b10111111, 0b11111000])


def test_writer_exact_byte_needs_no_padding():
    out = BitWriter()
    for _ in range(4):
        out.write(0b10, 2)
    assert out.finish() == b"\xaa"


def test_reader_order():
    assert list(BitReader(b"\x81\x40")) == [1, 0, 0, 0, 0, 0, 0, 1,
                                            0, 1, 0, 0, 0, 0, 0, 0]


def test_aaabbc_payload():
    # a=0 c=10 b=11 -> 000 1111 10 -> 9 bits, two bytes
    table = _table(b"aaabbc")
    payload = pack(b"aaabbc", table)
    assert payload == bytes([0b00011111, 0b00000000])
    assert unpack(payload, table, 6) == b"aaabbc"


def test_padding_is_never_decoded():
    table = CodeTable.from_tree(Leaf(65))
    payload = pack(b"AAA", table)
    assert payload == b"\x00"
    assert unpack(payload, table, 3) == b"AAA"


def test_stops_at_count_even_with_trailing_bytes():
    table = _table(b"aaabbc")
    payload = pack(b"abc", table) + b"\xff\xff"
    assert unpack(payload, table, 3) == b"abc"


def test_zero_count_emits_nothing():
    assert unpack(b"\xff", _table(b"ab"), 0) == b""


def test_short_payload_is_corrupt():
    table = _table(b"aaabbc")
    with pytest.raises(CorruptContainer, match="payload ended"):
        unpack(pack(b"abc", table), table, 10)


def test_unmatched_bits_are_corrupt():
    # Only code 0 exists for a lone leaf; a 1 bit can never match.
    table = CodeTable.from_tree(Leaf(7))
    with pytest.raises(CorruptContainer, match="matches no code"):
        unpack(b"\x80", table, 1)


def test_every_byte_value_survives():
    data = bytes(range(256)) * 4 + bytes([0] * 100)
    table = _table(data)
    assert unpack(pack(data, table), table, len(data)) == data


def test_deep_codes():
    # Fibonacci-like weights give a maximally skewed tree
    weights = [1, 1, 2, 3, 5, 8, 13, 21, 34, 55, 89]
    data = b"".join(bytes([i]) * w for i, w in enumerate(weights))
    table = _table(data)
    assert table.max_length == len(weights) - 1
    assert unpack(pack(data, table), table, len(data)) == data


def test_explicit_table():
    table = CodeTable.from_tree(Internal(Internal(Leaf(1), Leaf(2)), Leaf(3)))
    payload = pack(bytes([3, 1, 2, 3]), table)
    assert payload == bytes([0b10001100])
    assert unpack(payload, table, 4) == bytes([3, 1, 2, 3])
