import pytest

from lockup.boc import CapacityError, Dictionary, DuplicateKeyError, Keys, RangeError, Values, begin_cell
from lockup.boc.dict.labels import detect_label_type, read_label, write_label
from lockup.boc.dict.trie import BinaryTrie
from lockup_tests import unittest


def test_single_entry_layout() -> None:
    dictionary = Dictionary.empty(Keys.uint(16), Values.uint(16)).set(1, 5)
    root = dictionary.to_cell()
    assert root is not None
    # hml_long: 10, length 16 in 5 bits, the 16 key bits, then the value
    assert root.bits.to_hex() == 'A00002000B_'
    assert len(root.refs) == 0
    assert root.hash().hex() == '5d8ff7fb8b9b7f8971599943761936a95e5e8eed3cfbaedb3906f9caba9015e3'


def test_fork_layout() -> None:
    dictionary = Dictionary.empty(Keys.uint(16), Values.uint(16)).set(1, 2).set(0, 1)
    root = dictionary.to_cell()
    assert root is not None
    # hml_same: 11, bit 0, length 15 in 5 bits
    assert root.bits.to_hex() == 'CF'
    left, right = root.refs
    # empty hml_short label followed by the value
    assert left.bits.to_hex() == '00006_'
    assert right.bits.to_hex() == '0000A_'
    assert root.hash().hex() == '793368949af7bb795c1008bc7d402fe12835685769bd298ea212f61a46395ecc'


def test_empty() -> None:
    dictionary = Dictionary.empty(Keys.uint(8), Values.uint(8))
    assert len(dictionary) == 0
    assert dictionary.to_cell() is None
    cell = begin_cell().store_dict(dictionary).end_cell()
    assert len(cell.bits) == 1
    assert cell.bits.value == 0
    assert len(Dictionary.load(cell.begin_parse(), Keys.uint(8), Values.uint(8))) == 0
    with pytest.raises(ValueError):
        begin_cell().store_dict_direct(dictionary)


def test_absent() -> None:
    cell = begin_cell().store_dict(None).end_cell()
    assert len(cell.bits) == 1
    assert cell.bits.value == 0


def test_duplicate_key() -> None:
    dictionary = Dictionary.empty(Keys.uint(16), Values.uint(16)).set(7, 1)
    with pytest.raises(DuplicateKeyError):
        dictionary.set(7, 2)
    assert dictionary.get(7) == 1


def test_key_out_of_range() -> None:
    dictionary = Dictionary.empty(Keys.uint(16), Values.uint(16))
    with pytest.raises(RangeError):
        dictionary.set(1 << 16, 1)
    with pytest.raises(RangeError):
        dictionary.set(-1, 1)
    signed = Dictionary.empty(Keys.int(8), Values.uint(8))
    with pytest.raises(RangeError):
        signed.set(128, 1)
    assert len(dictionary) == 0


def test_mapping_api() -> None:
    dictionary = Dictionary.empty(Keys.uint(16), Values.uint(16)).set(30, 100).set(7, 25)
    assert 7 in dictionary
    assert 8 not in dictionary
    assert 'x' not in dictionary
    assert dictionary[30] == 100
    assert dictionary.get(8) is None
    with pytest.raises(KeyError):
        dictionary[8]
    assert list(dictionary) == [7, 30]
    assert list(dictionary.values()) == [25, 100]


def test_signed_keys_order() -> None:
    # signed keys are ordered by their bit pattern, so negative keys come last
    dictionary = Dictionary.empty(Keys.int(8), Values.int(8)).set(-1, -5).set(1, 5)
    assert list(dictionary.items()) == [(1, 5), (-1, -5)]
    cell = begin_cell().store_dict(dictionary).end_cell()
    loaded = Dictionary.load(cell.begin_parse(), Keys.int(8), Values.int(8))
    assert dict(loaded.items()) == {1: 5, -1: -5}


def test_store_direct() -> None:
    dictionary = Dictionary.empty(Keys.uint(16), Values.coins()).set(1, 10**9).set(2, 0)
    cell = begin_cell().store_dict_direct(dictionary).end_cell()
    assert cell == dictionary.to_cell()
    loaded = Dictionary.load_direct(cell.begin_parse(), Keys.uint(16), Values.coins())
    assert dict(loaded.items()) == {1: 10**9, 2: 0}


def test_cell_values() -> None:
    value = begin_cell().store_uint(0xCAFE, 16).end_cell()
    dictionary = Dictionary.empty(Keys.uint(32), Values.cell()).set(1, value)
    cell = begin_cell().store_dict(dictionary).end_cell()
    loaded = Dictionary.load(cell.begin_parse(), Keys.uint(32), Values.cell())
    assert loaded[1] == value


def test_store_failure_leaves_builder_unchanged() -> None:
    dictionary = Dictionary.empty(Keys.uint(16), Values.uint(16)).set(1, 1)
    child = begin_cell().end_cell()
    builder = begin_cell().store_ref(child).store_ref(child).store_ref(child).store_ref(child)
    with pytest.raises(CapacityError):
        builder.store_dict(dictionary)
    assert builder.bits == 0


@pytest.mark.parametrize('label,n,expected', [
    ('', 16, 'short'),
    ('1', 16, 'short'),
    ('01', 16, 'short'),
    ('0101101010', 16, 'long'),
    ('1' * 16, 16, 'same'),
    ('0' * 15, 16, 'same'),
    ('', 0, 'short'),
    ('10', 2, 'short'),
    ('11', 2, 'same'),
])
def test_label_type(label: str, n: int, expected: str) -> None:
    assert detect_label_type(label, n) == expected


@pytest.mark.parametrize('label,n', [
    ('', 16),
    ('1', 16),
    ('0101101010', 16),
    ('1' * 16, 16),
    ('0' * 63, 64),
    ('110', 3),
])
def test_label_round_trip(label: str, n: int) -> None:
    builder = begin_cell()
    write_label(builder, label, n)
    assert read_label(builder.end_cell().begin_parse(), n) == label


def test_trie_structure() -> None:
    trie = BinaryTrie({'0000': 'a', '0001': 'b', '1000': 'c'}, 4)
    items = [(item.prefix, item.is_leaf) for item in trie.iter_dfs()]
    assert items == [
        ('', False),
        ('000', False),
        ('0000', True),
        ('0001', True),
        ('1000', True),
    ]
    labels = [item.edge.label for item in trie.iter_dfs()]
    assert labels == ['', '00', '', '', '000']


class DictionaryTestCase(unittest.TestCase):
    def _random_entries(self, key_bits: int, count: int) -> dict[int, int]:
        entries: dict[int, int] = {}
        while len(entries) < count:
            entries[self.rng.randrange(1 << key_bits)] = self.rng.randrange(1 << 16)
        return entries

    def test_insertion_order_independence(self) -> None:
        for key_bits in (8, 16, 64):
            entries = self._random_entries(key_bits, 40)
            keys = list(entries)
            roots = set()
            for _ in range(5):
                self.rng.shuffle(keys)
                dictionary = Dictionary.empty(Keys.uint(key_bits), Values.uint(16))
                for key in keys:
                    dictionary.set(key, entries[key])
                root = dictionary.to_cell()
                assert root is not None
                roots.add(root.hash())
            self.assertEqual(len(roots), 1)

    def test_round_trip(self) -> None:
        for key_bits in (1, 3, 16, 64):
            count = min(1 << key_bits, self.rng.randint(1, 60))
            entries = self._random_entries(key_bits, count)
            dictionary = Dictionary.empty(Keys.uint(key_bits), Values.uint(16))
            for key, value in entries.items():
                dictionary.set(key, value)
            cell = begin_cell().store_uint(0xAB, 8).store_dict(dictionary).store_uint(0xCD, 8).end_cell()
            cs = cell.begin_parse()
            self.assertEqual(cs.load_uint(8), 0xAB)
            loaded = Dictionary.load(cs, Keys.uint(key_bits), Values.uint(16))
            self.assertEqual(cs.load_uint(8), 0xCD)
            cs.end_parse()
            self.assertEqual(dict(loaded.items()), entries)
            self.assertEqual(list(loaded), sorted(entries))

    def test_value_change_changes_hash(self) -> None:
        entries = self._random_entries(16, 10)
        first = Dictionary.empty(Keys.uint(16), Values.uint(16))
        second = Dictionary.empty(Keys.uint(16), Values.uint(16))
        changed = next(iter(entries))
        for key, value in entries.items():
            first.set(key, value)
            second.set(key, value + 1 if key == changed else value)
        first_root, second_root = first.to_cell(), second.to_cell()
        assert first_root is not None and second_root is not None
        self.assertCellNotEqual(first_root, second_root)
