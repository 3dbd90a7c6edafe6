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

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Generic, TypeVar

from typing_extensions import override

from lockup.boc.exceptions import RangeError

if TYPE_CHECKING:
    from lockup.boc.builder import Builder
    from lockup.boc.cell import Cell
    from lockup.boc.slice import Slice

K = TypeVar('K')
V = TypeVar('V')


class DictionaryKey(ABC, Generic[K]):
    """ Maps dictionary keys to the fixed-width bit pattern that is used as the path in the trie.

    The pattern is an unsigned int with exactly `bits` significant bits, its binary form (with leading zeros) is the
    path from the root to the leaf.
    """

    __slots__ = ('bits',)

    bits: int

    def __init__(self, bits: int) -> None:
        if bits <= 0:
            raise ValueError('key width must be positive')
        self.bits = bits

    @abstractmethod
    def encode(self, key: K, /) -> int:
        """Return the bit pattern of the key, raise RangeError if it does not fit the key width."""
        raise NotImplementedError

    @abstractmethod
    def decode(self, raw: int, /) -> K:
        raise NotImplementedError

    def __repr__(self) -> str:
        return f'{type(self).__name__}(bits={self.bits})'


class UintKey(DictionaryKey[int]):
    @override
    def encode(self, key: int, /) -> int:
        if not isinstance(key, int):
            raise TypeError('expected integer key')
        if key < 0 or key >= (1 << self.bits):
            raise RangeError(f'key {key} does not fit in {self.bits} unsigned bits')
        return key

    @override
    def decode(self, raw: int, /) -> int:
        return raw


class IntKey(DictionaryKey[int]):
    @override
    def encode(self, key: int, /) -> int:
        if not isinstance(key, int):
            raise TypeError('expected integer key')
        bound = 1 << (self.bits - 1)
        if not -bound <= key < bound:
            raise RangeError(f'key {key} does not fit in {self.bits} signed bits')
        return key & ((1 << self.bits) - 1)

    @override
    def decode(self, raw: int, /) -> int:
        if raw >> (self.bits - 1):
            return raw - (1 << self.bits)
        return raw


class DictionaryValue(ABC, Generic[V]):
    """ Describes how a value is written into (and read back from) a trie leaf.

    The value goes inline in the leaf cell right after the edge label, so a serializer can use whatever space is left
    and put anything bigger behind references.
    """

    __slots__ = ()

    @abstractmethod
    def serialize(self, value: V, builder: Builder, /) -> None:
        raise NotImplementedError

    @abstractmethod
    def parse(self, cell_slice: Slice, /) -> V:
        raise NotImplementedError


class UintValue(DictionaryValue[int]):
    __slots__ = ('bits',)

    def __init__(self, bits: int) -> None:
        self.bits = bits

    @override
    def serialize(self, value: int, builder: Builder, /) -> None:
        builder.store_uint(value, self.bits)

    @override
    def parse(self, cell_slice: Slice, /) -> int:
        return cell_slice.load_uint(self.bits)


class IntValue(DictionaryValue[int]):
    __slots__ = ('bits',)

    def __init__(self, bits: int) -> None:
        self.bits = bits

    @override
    def serialize(self, value: int, builder: Builder, /) -> None:
        builder.store_int(value, self.bits)

    @override
    def parse(self, cell_slice: Slice, /) -> int:
        return cell_slice.load_int(self.bits)


class CoinsValue(DictionaryValue[int]):
    @override
    def serialize(self, value: int, builder: Builder, /) -> None:
        builder.store_coins(value)

    @override
    def parse(self, cell_slice: Slice, /) -> int:
        return cell_slice.load_coins()


class CellValue(DictionaryValue['Cell']):
    """Values are cells stored as a reference from the leaf."""

    @override
    def serialize(self, value: Cell, builder: Builder, /) -> None:
        builder.store_ref(value)

    @override
    def parse(self, cell_slice: Slice, /) -> Cell:
        return cell_slice.load_ref()


class Keys:
    """Shortcuts for the common key codecs."""

    @staticmethod
    def uint(bits: int) -> UintKey:
        return UintKey(bits)

    @staticmethod
    def int(bits: int) -> IntKey:
        return IntKey(bits)


class Values:
    """Shortcuts for the common value codecs."""

    @staticmethod
    def uint(bits: int) -> UintValue:
        return UintValue(bits)

    @staticmethod
    def int(bits: int) -> IntValue:
        return IntValue(bits)

    @staticmethod
    def coins() -> CoinsValue:
        return CoinsValue()

    @staticmethod
    def cell() -> CellValue:
        return CellValue()
