import random

import pytest

from searchcore.ordered_map_file import OrderedMapFile


@pytest.fixture
def path(tmp_path):
    return tmp_path / "tree.bin"


def test_empty_map(path):
    with OrderedMapFile(path, "<i", "<q") as tree:
        assert len(tree) == 0
        assert tree.find(1) is None
        assert 1 not in tree


def test_insert_and_find(path):
    with OrderedMapFile(path, "<i", "<q") as tree:
        assert tree.insert(5, 50)
        assert tree.find(5) == (5, 50)
        assert 5 in tree
        assert len(tree) == 1


def test_duplicate_insert_keeps_original(path):
    with OrderedMapFile(path, "<i", "<q") as tree:
        assert tree.insert(5, 50)
        assert not tree.insert(5, 99)
        assert tree.find(5) == (5, 50)
        assert len(tree) == 1


@pytest.mark.parametrize("order", [3, 4, 7, 64])
def test_random_inserts_all_found(path, order):
    keys = random.Random(7).sample(range(100000), 1500)
    with OrderedMapFile(path, "<i", "<q", order=order) as tree:
        for key in keys:
            assert tree.insert(key, key * 2)
        assert len(tree) == len(keys)
        for key in keys:
            assert tree.find(key) == (key, key * 2)
        present = set(keys)
        for key in range(0, 100000, 997):
            assert (key in tree) == (key in present)


@pytest.mark.parametrize("keys", [list(range(500)), list(range(500, 0, -1))])
def test_sequential_inserts(path, keys):
    with OrderedMapFile(path, "<i", "<i", order=4) as tree:
        for key in keys:
            tree.insert(key, -key)
        assert len(tree) == len(keys)
        assert all(tree.find(key) == (key, -key) for key in keys)
        assert tree.find(max(keys) + 1) is None
        assert tree.find(min(keys) - 1) is None


def test_persistence(path):
    keys = random.Random(3).sample(range(10000), 400)
    with OrderedMapFile(path, "<i", "<q", order=5) as tree:
        for key in keys:
            tree.insert(key, key + 1)
    with OrderedMapFile(path, "<i", "<q", order=5) as tree:
        assert len(tree) == len(keys)
        assert all(tree.find(key) == (key, key + 1) for key in keys)
        assert tree.insert(-1, 0)
        assert len(tree) == len(keys) + 1


def test_custom_descending_compare(path):
    def descending(a, b):
        return (a < b) - (a > b)

    keys = random.Random(11).sample(range(5000), 300)
    with OrderedMapFile(path, "<i", "<i", order=4, compare=descending) as tree:
        for key in keys:
            assert tree.insert(key, key)
        assert all(tree.find(key) == (key, key) for key in keys)
        assert len(tree) == len(keys)


def test_tuple_keys_and_values(path):
    with OrderedMapFile(path, "<ii", "<hh", order=3) as tree:
        pairs = [(a, b) for a in range(10) for b in range(10)]
        for a, b in pairs:
            tree.insert((a, b), (b, a))
        assert len(tree) == len(pairs)
        assert all(tree.find((a, b)) == ((a, b), (b, a)) for a, b in pairs)
        assert (10, 0) not in tree


def test_order_too_small(path):
    with pytest.raises(ValueError):
        OrderedMapFile(path, "<i", "<i", order=2)