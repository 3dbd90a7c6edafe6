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

from typing import TYPE_CHECKING, Any, Optional

from typing_extensions import Self

from lockup.boc.bits import BitString
from lockup.boc.cell import Cell
from lockup.boc.consts import MAX_CELL_BITS, MAX_CELL_REFS
from lockup.boc.exceptions import BuilderFinalizedError, CapacityError, RangeError

if TYPE_CHECKING:
    from lockup.boc.address import Address
    from lockup.boc.dict import Dictionary
    from lockup.boc.slice import Slice


def begin_cell() -> Builder:
    return Builder()


class Builder:
    """Append-only accumulator of bits and references that produces exactly one Cell.

    Every store checks the cell limits before touching the buffer, so a store that fails with `CapacityError` or
    `RangeError` leaves the builder as it was. After `end_cell` the builder cannot be used anymore.
    """

    __slots__ = ('_value', '_length', '_refs', '_finalized')

    def __init__(self) -> None:
        self._value: int = 0
        self._length: int = 0
        self._refs: list[Cell] = []
        self._finalized: bool = False

    @property
    def bits(self) -> int:
        """Number of bits written so far."""
        return self._length

    @property
    def refs(self) -> int:
        """Number of references written so far."""
        return len(self._refs)

    @property
    def available_bits(self) -> int:
        return MAX_CELL_BITS - self._length

    @property
    def available_refs(self) -> int:
        return MAX_CELL_REFS - len(self._refs)

    def ensure_capacity(self, *, bits: int = 0, refs: int = 0) -> None:
        """Raise CapacityError if the given amount of bits and refs cannot be added."""
        if self._finalized:
            raise BuilderFinalizedError('builder was already finalized')
        if bits > self.available_bits:
            raise CapacityError(f'cannot store {bits} bits, only {self.available_bits} available')
        if refs > self.available_refs:
            raise CapacityError(f'cannot store {refs} refs, only {self.available_refs} available')

    def _write_bits(self, value: int, n: int) -> None:
        # XXX: value must already be in the [0, 2**n) range
        self.ensure_capacity(bits=n)
        self._value = (self._value << n) | value
        self._length += n

    def store_bit(self, value: Any) -> Self:
        self._write_bits(1 if value else 0, 1)
        return self

    def store_uint(self, value: int, bits: int) -> Self:
        if bits < 0:
            raise ValueError('bit width cannot be negative')
        if value < 0 or value >= (1 << bits):
            raise RangeError(f'value {value} does not fit in {bits} unsigned bits')
        self._write_bits(value, bits)
        return self

    def store_int(self, value: int, bits: int) -> Self:
        if bits <= 0:
            if value != 0:
                raise RangeError(f'value {value} does not fit in {bits} signed bits')
            return self
        bound = 1 << (bits - 1)
        if not -bound <= value < bound:
            raise RangeError(f'value {value} does not fit in {bits} signed bits')
        self._write_bits(value & ((1 << bits) - 1), bits)
        return self

    def store_bits(self, bits: BitString) -> Self:
        self._write_bits(bits.value, len(bits))
        return self

    def store_bytes(self, data: bytes) -> Self:
        """Raw bytes, no length prefix. They must fit in the current cell."""
        data = bytes(data)
        self._write_bits(int.from_bytes(data, byteorder='big'), len(data) * 8)
        return self

    def store_string(self, text: str) -> Self:
        return self.store_bytes(text.encode('utf-8'))

    def store_bytes_tail(self, data: bytes) -> Self:
        from lockup.boc.encoding.tail import encode_bytes_tail
        encode_bytes_tail(self, data)
        return self

    def store_string_tail(self, text: str) -> Self:
        from lockup.boc.encoding.tail import encode_string_tail
        encode_string_tail(self, text)
        return self

    def store_coins(self, value: int) -> Self:
        from lockup.boc.encoding.coins import encode_coins
        encode_coins(self, value)
        return self

    def store_address(self, address: Optional[Address]) -> Self:
        from lockup.boc.encoding.address import encode_address
        encode_address(self, address)
        return self

    def store_ref(self, cell: Cell) -> Self:
        if not isinstance(cell, Cell):
            raise TypeError('expected Cell')
        self.ensure_capacity(refs=1)
        self._refs.append(cell)
        return self

    def store_maybe_ref(self, cell: Optional[Cell]) -> Self:
        if cell is None:
            return self.store_bit(False)
        self.ensure_capacity(bits=1, refs=1)
        self.store_bit(True)
        return self.store_ref(cell)

    def store_dict(self, dictionary: Optional[Dictionary]) -> Self:
        """Store as HashmapE: a 0 bit when absent or empty, otherwise a 1 bit and a reference to the root."""
        if dictionary is None:
            return self.store_bit(False)
        dictionary.store(self)
        return self

    def store_dict_direct(self, dictionary: Dictionary) -> Self:
        """Store the (non-empty) dictionary root inline, as Hashmap."""
        dictionary.store_direct(self)
        return self

    def store_slice(self, src: Slice) -> Self:
        """Copy everything that remains in the slice, the slice itself is not consumed."""
        bits = src.preload_bits(src.remaining_bits)
        refs = [src.preload_ref(i) for i in range(src.remaining_refs)]
        self.ensure_capacity(bits=len(bits), refs=len(refs))
        self.store_bits(bits)
        self._refs.extend(refs)
        return self

    def store_builder(self, src: Builder) -> Self:
        self.ensure_capacity(bits=src._length, refs=len(src._refs))
        self._write_bits(src._value, src._length)
        self._refs.extend(src._refs)
        return self

    def as_bit_string(self) -> BitString:
        return BitString(self._value, self._length)

    def end_cell(self) -> Cell:
        if self._finalized:
            raise BuilderFinalizedError('builder was already finalized')
        cell = Cell(self.as_bit_string(), self._refs)
        self._finalized = True
        return cell

    def __repr__(self) -> str:
        return f'Builder(x{{{self.as_bit_string().to_hex()}}}, refs={len(self._refs)})'
