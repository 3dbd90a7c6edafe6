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
A dictionary with fixed-width keys that is serialized as a binary trie of cells.

>>> from lockup.boc import begin_cell
>>> staking = Dictionary.empty(Keys.uint(16), Values.uint(16))
>>> _ = staking.set(30, 100).set(7, 25)
>>> list(staking.items())
[(7, 25), (30, 100)]
>>> begin_cell().store_dict(Dictionary.empty(Keys.uint(16), Values.uint(16))).end_cell().bits.to_hex()
'4_'
>>> cell = begin_cell().store_dict(staking).end_cell()
>>> len(cell.bits), len(cell.refs)
(1, 1)
>>> loaded = Dictionary.load(cell.begin_parse(), Keys.uint(16), Values.uint(16))
>>> dict(loaded.items())
{7: 25, 30: 100}

>>> try:
...     staking.set(7, 1)
... except DuplicateKeyError as e:
...     print(*e.args)
key 7 is already present
"""

from __future__ import annotations

from typing import Generic, Iterable, Iterator, Optional, TypeVar

from lockup.boc.builder import Builder
from lockup.boc.cell import Cell
from lockup.boc.dict.codecs import DictionaryKey, DictionaryValue, Keys, Values
from lockup.boc.dict.trie import BinaryTrie, parse_trie
from lockup.boc.exceptions import DuplicateKeyError
from lockup.boc.slice import Slice

K = TypeVar('K')
V = TypeVar('V')

__all__ = ['Dictionary', 'Keys', 'Values', 'DuplicateKeyError']


class Dictionary(Generic[K, V]):
    """ Mapping of fixed-width keys to values, serialized canonically as a binary trie.

    Keys are unique: setting a key that is already present raises DuplicateKeyError, nothing is ever overwritten. The
    serialized form only depends on the keys and values, not on the order they were set.

    An empty dictionary is stored as a single 0 bit by `store` (HashmapE), exactly like an absent one, callers that
    need to tell them apart should omit the field instead.
    """

    __slots__ = ('_key_codec', '_value_codec', '_entries')

    def __init__(
        self,
        key_codec: DictionaryKey[K],
        value_codec: DictionaryValue[V],
        entries: Optional[Iterable[tuple[K, V]]] = None,
    ) -> None:
        self._key_codec = key_codec
        self._value_codec = value_codec
        # indexed by the key's bit pattern, which is what the trie is built from
        self._entries: dict[int, tuple[K, V]] = {}
        if entries is not None:
            for key, value in entries:
                self.set(key, value)

    @classmethod
    def empty(cls, key_codec: DictionaryKey[K], value_codec: DictionaryValue[V]) -> Dictionary[K, V]:
        return cls(key_codec, value_codec)

    @property
    def key_codec(self) -> DictionaryKey[K]:
        return self._key_codec

    @property
    def value_codec(self) -> DictionaryValue[V]:
        return self._value_codec

    def set(self, key: K, value: V) -> Dictionary[K, V]:
        raw = self._key_codec.encode(key)
        if raw in self._entries:
            raise DuplicateKeyError(f'key {key!r} is already present')
        self._entries[raw] = (key, value)
        return self

    def get(self, key: K, default: Optional[V] = None) -> Optional[V]:
        entry = self._entries.get(self._key_codec.encode(key))
        if entry is None:
            return default
        return entry[1]

    def __getitem__(self, key: K) -> V:
        entry = self._entries.get(self._key_codec.encode(key))
        if entry is None:
            raise KeyError(key)
        return entry[1]

    def __contains__(self, key: object) -> bool:
        try:
            raw = self._key_codec.encode(key)  # type: ignore[arg-type]
        except (TypeError, ValueError):
            return False
        return raw in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[K]:
        return (key for key, _ in self.items())

    def items(self) -> Iterator[tuple[K, V]]:
        """Iterate in trie order, which is the order of the keys' bit patterns."""
        for raw in sorted(self._entries):
            yield self._entries[raw]

    def keys(self) -> Iterator[K]:
        return iter(self)

    def values(self) -> Iterator[V]:
        return (value for _, value in self.items())

    def build_trie(self) -> BinaryTrie[V]:
        key_bits = self._key_codec.bits
        entries = {format(raw, f'0{key_bits}b'): value for raw, (_, value) in self._entries.items()}
        return BinaryTrie(entries, key_bits)

    def to_cell(self) -> Optional[Cell]:
        """The root cell of the trie, or None when the dictionary is empty."""
        if not self._entries:
            return None
        builder = Builder()
        self.build_trie().write(builder, self._value_codec)
        return builder.end_cell()

    def store(self, builder: Builder) -> None:
        """Store as HashmapE: a 0 bit when empty, otherwise a 1 bit and a reference to the root cell."""
        root = self.to_cell()
        if root is None:
            builder.store_bit(False)
            return
        builder.ensure_capacity(bits=1, refs=1)
        builder.store_bit(True)
        builder.store_ref(root)

    def store_direct(self, builder: Builder) -> None:
        """Store the root inline (Hashmap), an empty dictionary has no such representation."""
        if not self._entries:
            raise ValueError('cannot store an empty dictionary directly')
        root = Builder()
        self.build_trie().write(root, self._value_codec)
        builder.store_builder(root)

    @classmethod
    def load(cls, cell_slice: Slice, key_codec: DictionaryKey[K], value_codec: DictionaryValue[V]) -> Dictionary[K, V]:
        """Read a dictionary stored with `store`."""
        if not cell_slice.load_bit():
            return cls.empty(key_codec, value_codec)
        return cls.load_direct(cell_slice.load_ref().begin_parse(), key_codec, value_codec)

    @classmethod
    def load_direct(
        cls,
        cell_slice: Slice,
        key_codec: DictionaryKey[K],
        value_codec: DictionaryValue[V],
    ) -> Dictionary[K, V]:
        """Read a dictionary whose root starts at the given slice."""
        raw_entries = parse_trie(cell_slice, key_codec.bits, value_codec)
        return cls(key_codec, value_codec, ((key_codec.decode(raw), value) for raw, value in raw_entries.items()))

    def __repr__(self) -> str:
        items = ', '.join(f'{key!r}: {value!r}' for key, value in self.items())
        return f'Dictionary({self._key_codec!r}, {{{items}}})'
