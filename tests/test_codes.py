import random

from huffzip.codes import CodeTable
from huffzip.frequency import count_symbols
from huffzip.tree import Internal, Leaf, build_tree


def _table(data: bytes) -> CodeTable:
    return CodeTable.from_tree(build_tree(count_symbols(data)))


def test_left_is_zero_right_is_one():
    table = CodeTable.from_tree(Internal(Leaf(1), Internal(Leaf(2), Leaf(3))))
    assert table.bitstring(1) == "0"
    assert table.bitstring(2) == "10"
    assert table.bitstring(3) == "11"
    assert table.max_length == 2


def test_aaabbc_code_lengths():
    table = _table(b"aaabbc")
    assert len(table.bitstring(ord("a"))) == 1
    assert len(table.bitstring(ord("b"))) == 2
    assert len(table.bitstring(ord("c"))) == 2


def test_single_leaf_gets_one_bit_code():
    table = CodeTable.from_tree(Leaf(65))
    assert table.codes == {65: (0, 1)}
    assert table.symbols == {(0, 1): 65}
    assert table.bitstring(65) == "0"


def test_mappings_are_inverse():
    table = _table(bytes(range(256)) * 2 + b"hello world")
    assert len(table.codes) == 256
    for sym, code in table.codes.items():
        assert table.symbols[code] == sym
    assert 0 in table.codes and 255 in table.codes


def test_codes_are_prefix_free():
    rng = random.Random(1234)
    for _ in range(20):
        alphabet = rng.sample(range(256), rng.randint(2, 60))
        data = bytes(rng.choice(alphabet) for _ in range(rng.randint(2, 500)))
        if len(set(data)) < 2:
            continue
        codes = [_table(data).bitstring(s) for s in set(data)]
        for a in codes:
            for b in codes:
                if a != b:
                    assert not b.startswith(a)
