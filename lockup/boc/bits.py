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
Immutable bit sequences.

The bits are held in a single unsigned int, most significant bit first, alongside the explicit length (leading zeros
are significant, so the int alone is not enough).

>>> bs = BitString(0b101, 3)
>>> len(bs), bs.get_bit(0), bs.get_bit(1)
(3, True, False)
>>> bs.to_bytes().hex()
'a0'
>>> bs.to_padded_bytes().hex()
'b0'
>>> bs.to_hex()
'B_'
>>> BitString.from_bytes(b'\\xca\\xfe').to_hex()
'CAFE'
>>> BitString.from_bytes(b'\\xca\\xfe').substring(4, 8).to_hex()
'AF'
"""

from __future__ import annotations

from typing import Optional


class BitString:
    """ A fixed sequence of bits, used as the data part of a cell.
    """

    __slots__ = ('_value', '_length')

    _value: int
    _length: int

    def __init__(self, value: int, length: int) -> None:
        if length < 0:
            raise ValueError('length cannot be negative')
        if value < 0 or value.bit_length() > length:
            raise ValueError(f'value does not fit in {length} bits')
        self._value = value
        self._length = length

    @classmethod
    def from_bytes(cls, data: bytes, length: Optional[int] = None) -> BitString:
        """Create from a byte sequence, optionally keeping only the first `length` bits."""
        total = len(data) * 8
        if length is None:
            length = total
        if length > total:
            raise ValueError('not enough bytes for the requested length')
        value = int.from_bytes(data, byteorder='big') >> (total - length)
        return cls(value, length)

    def __len__(self) -> int:
        return self._length

    @property
    def value(self) -> int:
        """The bits as an unsigned integer (first bit is the most significant)."""
        return self._value

    def get_bit(self, index: int) -> bool:
        if not 0 <= index < self._length:
            raise IndexError('bit index out of range')
        return bool((self._value >> (self._length - index - 1)) & 1)

    def substring(self, offset: int, length: int) -> BitString:
        if offset < 0 or length < 0 or offset + length > self._length:
            raise IndexError('substring out of range')
        shift = self._length - offset - length
        return BitString((self._value >> shift) & ((1 << length) - 1), length)

    def concat(self, other: BitString) -> BitString:
        return BitString((self._value << other._length) | other._value, self._length + other._length)

    def to_bytes(self) -> bytes:
        """Bits packed into bytes, the last byte is completed with zeros."""
        n_bytes = (self._length + 7) // 8
        pad = n_bytes * 8 - self._length
        return (self._value << pad).to_bytes(n_bytes, byteorder='big')

    def to_padded_bytes(self) -> bytes:
        """Bits packed into bytes using the completion tag: a single 1 bit followed by zeros.

        This is the representation used for hashing and for the bag-of-cells format, it's only different from
        `to_bytes` when the length is not a multiple of 8.
        """
        if self._length % 8 == 0:
            return self.to_bytes()
        n_bytes = (self._length + 7) // 8
        pad = n_bytes * 8 - self._length
        return ((((self._value << 1) | 1)) << (pad - 1)).to_bytes(n_bytes, byteorder='big')

    def to_hex(self) -> str:
        """Uppercase hex, with a trailing `_` when the last nibble carries a completion tag."""
        if self._length % 4 == 0:
            if self._length == 0:
                return ''
            return format(self._value, f'0{self._length // 4}X')
        pad = 4 - self._length % 4
        value = ((self._value << 1) | 1) << (pad - 1)
        return format(value, f'0{(self._length + pad) // 4}X') + '_'

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BitString):
            return NotImplemented
        return self._length == other._length and self._value == other._value

    def __hash__(self) -> int:
        return hash((self._value, self._length))

    def __repr__(self) -> str:
        return f'BitString(x{{{self.to_hex()}}}, length={self._length})'


EMPTY_BITS = BitString(0, 0)
