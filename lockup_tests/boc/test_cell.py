import pytest

from lockup.boc import EMPTY_CELL, BitString, CapacityError, Cell, begin_cell
from lockup.boc.bag_of_cells import BOC_MAGIC, topological_order

EMPTY_CELL_HASH = '96a296d224f285c67bee93c30f8a309157f0daa35dc5b87e410b78630a09cfc7'


def test_empty_cell_hash() -> None:
    assert EMPTY_CELL.hash().hex() == EMPTY_CELL_HASH
    assert begin_cell().end_cell().hash().hex() == EMPTY_CELL_HASH
    assert EMPTY_CELL.depth() == 0
    assert EMPTY_CELL.descriptors() == b'\x00\x00'


def test_known_hashes() -> None:
    cafe = begin_cell().store_uint(0xCAFE, 16).end_cell()
    assert cafe.descriptors() == b'\x00\x04'
    assert cafe.hash().hex() == '9ff1d0ea1549e85126da6256cc7dfbcaec101f5cbea748cde5cd316525b1a2c0'

    # a single bit is padded with the completion tag, 1 -> 0b11000000
    one_bit = begin_cell().store_bit(True).end_cell()
    assert one_bit.descriptors() == b'\x00\x01'
    assert one_bit.bits.to_padded_bytes() == b'\xc0'
    assert one_bit.hash().hex() == '7c6c1a965fd501d2938c2c0e06626bdaa3531357016e169070c9ef79c4c46bc0'

    parent = begin_cell().store_ref(EMPTY_CELL).end_cell()
    assert parent.descriptors() == b'\x01\x00'
    assert parent.depth() == 1
    assert parent.hash().hex() == '6c64b3153333f7af728149b88cd7b27f5ded7cd17ac88893ee47fc208a15e640'


def test_cell_limits() -> None:
    Cell(BitString(0, 1023), [EMPTY_CELL] * 4)
    with pytest.raises(CapacityError):
        Cell(BitString(0, 1024))
    with pytest.raises(CapacityError):
        Cell(refs=[EMPTY_CELL] * 5)


def test_equality_by_hash() -> None:
    first = begin_cell().store_uint(1, 8).store_ref(EMPTY_CELL).end_cell()
    second = begin_cell().store_uint(1, 8).store_ref(begin_cell().end_cell()).end_cell()
    assert first is not second
    assert first == second
    assert len({first, second}) == 1
    assert first != begin_cell().store_uint(2, 8).store_ref(EMPTY_CELL).end_cell()


def test_depth() -> None:
    leaf = begin_cell().store_uint(1, 1).end_cell()
    middle = begin_cell().store_ref(leaf).end_cell()
    root = begin_cell().store_ref(leaf).store_ref(middle).end_cell()
    assert leaf.depth() == 0
    assert middle.depth() == 1
    assert root.depth() == 2


def test_to_string() -> None:
    child = begin_cell().store_uint(0b101, 3).end_cell()
    cell = begin_cell().store_uint(0xAB, 8).store_ref(child).end_cell()
    assert str(cell) == 'x{AB}\n x{B_}'


def test_boc_empty_cell() -> None:
    boc = EMPTY_CELL.to_boc()
    assert boc[:4] == BOC_MAGIC
    assert boc.hex() == 'b5ee9c72010101010002000000'


def test_boc_header() -> None:
    child = begin_cell().store_uint(0xCAFE, 16).end_cell()
    root = begin_cell().store_uint(0xAB, 8).store_ref(child).end_cell()
    boc = root.to_boc()
    assert boc[:4] == BOC_MAGIC
    # no index, no crc32c, no cache bits, 1 byte for cell indexes
    assert boc[4] == 0x01
    # 1 byte for offsets
    assert boc[5] == 0x01
    # cells, roots, absent
    assert boc[6:9] == b'\x02\x01\x00'
    # root cell: d1, d2, data, ref index | child cell: d1, d2, data
    payload = bytes.fromhex('0102ab01') + bytes.fromhex('0004cafe')
    assert boc[9] == len(payload)
    assert boc[10] == 0
    assert boc[11:] == payload


def test_boc_with_index() -> None:
    child = begin_cell().store_uint(0xCAFE, 16).end_cell()
    root = begin_cell().store_uint(0xAB, 8).store_ref(child).end_cell()
    boc = root.to_boc(has_idx=True)
    assert boc[4] == 0x81
    # cumulative end offset of each cell
    assert boc[11:13] == b'\x04\x08'
    assert boc[13:] == bytes.fromhex('0102ab010004cafe')


def test_boc_deduplicates_shared_cells() -> None:
    shared = begin_cell().store_uint(0xCAFE, 16).end_cell()
    left = begin_cell().store_uint(1, 8).store_ref(shared).end_cell()
    right = begin_cell().store_uint(2, 8).store_ref(shared).end_cell()
    root = begin_cell().store_ref(left).store_ref(right).store_ref(shared).end_cell()

    order = topological_order(root)
    assert len(order) == 4
    assert order[0] == root
    position = {cell.hash(): i for i, cell in enumerate(order)}
    for cell in order:
        for ref in cell.refs:
            assert position[ref.hash()] > position[cell.hash()]

    boc = root.to_boc()
    assert boc[6] == 4


def test_deep_chain() -> None:
    cell = EMPTY_CELL
    for i in range(2000):
        cell = begin_cell().store_uint(i % 256, 8).store_ref(cell).end_cell()
    order = topological_order(cell)
    assert len(order) == 2001
    assert order[-1] == EMPTY_CELL
