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

from __future__ import annotations

import hashlib
from typing import TYPE_CHECKING, Iterable, Optional

from lockup.boc.bits import EMPTY_BITS, BitString
from lockup.boc.consts import MAX_CELL_BITS, MAX_CELL_REFS
from lockup.boc.exceptions import CapacityError

if TYPE_CHECKING:
    from lockup.boc.slice import Slice


class Cell:
    """An immutable ordinary cell: up to 1023 bits of data and up to 4 references to other cells.

    Cells form a DAG, the same cell can be referenced by any number of parents. Two cells are equal when their
    representation hashes are equal, which covers both the data and the whole sub-tree.
    """

    __slots__ = ('_bits', '_refs', '_hash', '_depth')

    _bits: BitString
    _refs: tuple[Cell, ...]
    _hash: Optional[bytes]
    _depth: int

    def __init__(self, bits: BitString = EMPTY_BITS, refs: Iterable[Cell] = ()) -> None:
        refs = tuple(refs)
        if len(bits) > MAX_CELL_BITS:
            raise CapacityError(f'cell has {len(bits)} bits, max is {MAX_CELL_BITS}')
        if len(refs) > MAX_CELL_REFS:
            raise CapacityError(f'cell has {len(refs)} refs, max is {MAX_CELL_REFS}')
        for ref in refs:
            if not isinstance(ref, Cell):
                raise TypeError('expected Cell')
        self._bits = bits
        self._refs = refs
        self._hash = None
        self._depth = 1 + max(ref._depth for ref in refs) if refs else 0

    @property
    def bits(self) -> BitString:
        return self._bits

    @property
    def refs(self) -> tuple[Cell, ...]:
        return self._refs

    def depth(self) -> int:
        """Max distance to a leaf, a cell without references has depth 0."""
        return self._depth

    def descriptors(self) -> bytes:
        """The two descriptor bytes d1 (refs count) and d2 (data length in half-bytes, rounded)."""
        n_bits = len(self._bits)
        d1 = len(self._refs)
        d2 = (n_bits + 7) // 8 + n_bits // 8
        return bytes([d1, d2])

    def _compute_hash(self) -> bytes:
        # XXX: the hashes of all refs must already be cached
        h = hashlib.sha256()
        h.update(self.descriptors())
        h.update(self._bits.to_padded_bytes())
        for ref in self._refs:
            h.update(ref._depth.to_bytes(2, byteorder='big'))
        for ref in self._refs:
            assert ref._hash is not None
            h.update(ref._hash)
        return h.digest()

    def hash(self) -> bytes:
        """ The representation hash of this cell.

        It's the sha256 of: descriptors, padded data, the depth of each child as 2 bytes (big-endian) and finally the
        hash of each child. This is the value that identifies the whole sub-tree, it's used for address derivation.
        """
        if self._hash is None:
            # children are hashed first, with an explicit stack so long chains don't hit the recursion limit
            stack: list[Cell] = [self]
            while stack:
                cell = stack[-1]
                pending = [ref for ref in cell._refs if ref._hash is None]
                if pending:
                    stack.extend(pending)
                    continue
                stack.pop()
                if cell._hash is None:
                    cell._hash = cell._compute_hash()
        assert self._hash is not None
        return self._hash

    def begin_parse(self) -> Slice:
        from lockup.boc.slice import Slice
        return Slice(self)

    def to_boc(self, *, has_idx: bool = False) -> bytes:
        """Serialize this cell as the single root of a bag of cells."""
        from lockup.boc.bag_of_cells import serialize_boc
        return serialize_boc(self, has_idx=has_idx)

    def is_empty(self) -> bool:
        return not self._bits and not self._refs

    def to_string(self, indent: str = '') -> str:
        lines = [f'{indent}x{{{self._bits.to_hex()}}}']
        for ref in self._refs:
            lines.append(ref.to_string(indent + ' '))
        return '\n'.join(lines)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Cell):
            return NotImplemented
        return self.hash() == other.hash()

    def __hash__(self) -> int:
        return hash(self.hash())

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f'Cell(bits={len(self._bits)}, refs={len(self._refs)}, hash={self.hash().hex()})'


EMPTY_CELL = Cell()
