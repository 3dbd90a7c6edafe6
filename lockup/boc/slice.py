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

from typing import TYPE_CHECKING, Optional

from lockup.boc.bits import BitString
from lockup.boc.cell import Cell
from lockup.boc.exceptions import CellUnderflowError

if TYPE_CHECKING:
    from lockup.boc.address import Address


class Slice:
    """Read cursor over a cell, `load_*` consumes and `preload_*` doesn't.

    This mirrors the `store_*` methods of Builder, it's meant for inspecting cells that were built here.
    """

    __slots__ = ('_cell', '_bit_pos', '_ref_pos')

    def __init__(self, cell: Cell) -> None:
        self._cell = cell
        self._bit_pos = 0
        self._ref_pos = 0

    @property
    def remaining_bits(self) -> int:
        return len(self._cell.bits) - self._bit_pos

    @property
    def remaining_refs(self) -> int:
        return len(self._cell.refs) - self._ref_pos

    def is_empty(self) -> bool:
        return self.remaining_bits == 0 and self.remaining_refs == 0

    def end_parse(self) -> None:
        """Check that everything was consumed."""
        if not self.is_empty():
            raise ValueError('trailing data')

    def skip(self, bits: int) -> Slice:
        self.load_bits(bits)
        return self

    def preload_bits(self, n: int) -> BitString:
        if n < 0:
            raise ValueError('value cannot be negative')
        if n > self.remaining_bits:
            raise CellUnderflowError(f'not enough bits to read: {n} > {self.remaining_bits}')
        return self._cell.bits.substring(self._bit_pos, n)

    def load_bits(self, n: int) -> BitString:
        bits = self.preload_bits(n)
        self._bit_pos += n
        return bits

    def preload_uint(self, bits: int) -> int:
        return self.preload_bits(bits).value

    def load_bit(self) -> bool:
        return bool(self.load_bits(1).value)

    def load_uint(self, bits: int) -> int:
        return self.load_bits(bits).value

    def load_int(self, bits: int) -> int:
        value = self.load_uint(bits)
        if bits > 0 and value >> (bits - 1):
            value -= 1 << bits
        return value

    def load_bytes(self, n: int) -> bytes:
        return self.load_bits(n * 8).to_bytes()

    def load_string(self, n: Optional[int] = None) -> str:
        """Read `n` bytes (or everything left) as utf-8, without following references."""
        if n is None:
            if self.remaining_bits % 8 != 0:
                raise ValueError('remaining bits are not byte aligned')
            n = self.remaining_bits // 8
        return self.load_bytes(n).decode('utf-8')

    def load_bytes_tail(self) -> bytes:
        from lockup.boc.encoding.tail import decode_bytes_tail
        return decode_bytes_tail(self)

    def load_string_tail(self) -> str:
        from lockup.boc.encoding.tail import decode_string_tail
        return decode_string_tail(self)

    def load_coins(self) -> int:
        from lockup.boc.encoding.coins import decode_coins
        return decode_coins(self)

    def load_address(self) -> Optional[Address]:
        from lockup.boc.encoding.address import decode_address
        return decode_address(self)

    def preload_ref(self, index: int = 0) -> Cell:
        if index < 0 or index >= self.remaining_refs:
            raise CellUnderflowError('not enough refs to read')
        return self._cell.refs[self._ref_pos + index]

    def load_ref(self) -> Cell:
        ref = self.preload_ref()
        self._ref_pos += 1
        return ref

    def load_maybe_ref(self) -> Optional[Cell]:
        if self.load_bit():
            return self.load_ref()
        return None

    def __repr__(self) -> str:
        return f'Slice(bits={self.remaining_bits}, refs={self.remaining_refs})'
