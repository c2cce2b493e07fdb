from collections import Counter


def count_symbols(data: bytes) -> Counter:
    """Map every byte value present in data to its occurrence count.

    Empty input gives an empty table; callers must not build a tree from it.
    """
    return Counter(data)
