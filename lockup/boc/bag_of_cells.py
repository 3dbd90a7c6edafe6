# Copyright 2026 Hathor Labs
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#    http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""
Bag of cells: the byte format used to ship a tree of cells to the network.

Layout, all integers big-endian:

    [magic: b5ee9c72]
    [flags: has_idx(1) has_crc32c(1) has_cache_bits(1) reserved(2) size_bytes(3)][off_bytes: 1 byte]
    [cells: size_bytes][roots: size_bytes][absent: size_bytes][tot_cells_size: off_bytes]
    [root index: size_bytes]
    [index: cells * off_bytes, only when has_idx]
    [cell data: for each cell d1, d2, padded data and the index of each reference (size_bytes each)]

Cells are listed parents first, a cell shared by several parents is listed once. The crc32c flag is never set.

>>> from lockup.boc import begin_cell
>>> boc = begin_cell().end_cell().to_boc()
>>> boc.hex()
'b5ee9c72010101010002000000'
"""

from typing import NamedTuple

from lockup.boc.cell import Cell

BOC_MAGIC = bytes.fromhex('b5ee9c72')


class _BocLayout(NamedTuple):
    cells: list[Cell]
    index: dict[bytes, int]


def _byte_width(value: int) -> int:
    return max(1, (value.bit_length() + 7) // 8)


def topological_order(root: Cell) -> list[Cell]:
    """ Distinct cells of the tree, every cell comes before all of its references.

    It's the reversed post-order of a depth-first search, iterative so deep chains don't hit the recursion limit.
    """
    post_order: list[Cell] = []
    visited: set[bytes] = set()
    stack: list[tuple[Cell, bool]] = [(root, False)]
    while stack:
        cell, expanded = stack.pop()
        if expanded:
            post_order.append(cell)
            continue
        cell_hash = cell.hash()
        if cell_hash in visited:
            continue
        visited.add(cell_hash)
        stack.append((cell, True))
        for ref in reversed(cell.refs):
            stack.append((ref, False))
    post_order.reverse()
    return post_order


def _layout(root: Cell) -> _BocLayout:
    cells = topological_order(root)
    return _BocLayout(cells=cells, index={cell.hash(): i for i, cell in enumerate(cells)})


def _serialize_cell(cell: Cell, index: dict[bytes, int], size_bytes: int) -> bytes:
    data = cell.descriptors() + cell.bits.to_padded_bytes()
    for ref in cell.refs:
        data += index[ref.hash()].to_bytes(size_bytes, byteorder='big')
    return data


def serialize_boc(root: Cell, *, has_idx: bool = False) -> bytes:
    """Serialize a tree with a single root into the bag of cells format."""
    layout = _layout(root)
    cells_num = len(layout.cells)
    size_bytes = _byte_width(cells_num)

    payload = bytearray()
    offsets: list[int] = []
    for cell in layout.cells:
        payload += _serialize_cell(cell, layout.index, size_bytes)
        offsets.append(len(payload))
    off_bytes = _byte_width(len(payload))

    flags = (int(has_idx) << 7) | size_bytes
    out = bytearray(BOC_MAGIC)
    out.append(flags)
    out.append(off_bytes)
    out += cells_num.to_bytes(size_bytes, byteorder='big')
    out += (1).to_bytes(size_bytes, byteorder='big')  # roots
    out += (0).to_bytes(size_bytes, byteorder='big')  # absent
    out += len(payload).to_bytes(off_bytes, byteorder='big')
    out += (0).to_bytes(size_bytes, byteorder='big')  # the root is always the first cell
    if has_idx:
        for offset in offsets:
            out += offset.to_bytes(off_bytes, byteorder='big')
    out += payload
    return bytes(out)
