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

import os
from dataclasses import dataclass
from typing import Generic, Iterable, Mapping, NamedTuple, NewType, Optional, TypeVar, Union

from lockup.boc.builder import Builder
from lockup.boc.cell import Cell
from lockup.boc.dict.codecs import DictionaryValue
from lockup.boc.dict.labels import read_label, write_label
from lockup.boc.slice import Slice

V = TypeVar('V')

NodeHandle = NewType('NodeHandle', int)
EdgeHandle = NewType('EdgeHandle', int)


@dataclass(kw_only=True, slots=True)
class Leaf(Generic[V]):
    """Terminal node, holds the value of exactly one key."""
    value: V


@dataclass(kw_only=True, slots=True)
class Fork:
    """Branch node, `left` continues the keys with a 0 bit and `right` the ones with a 1 bit."""
    left: EdgeHandle
    right: EdgeHandle


@dataclass(kw_only=True, slots=True)
class Edge:
    """The label is the run of bits shared by every key below it, followed by the node it leads to."""
    label: str
    node: NodeHandle


class IterDFSNode(NamedTuple):
    """Item yielded by `BinaryTrie.iter_dfs()`."""
    edge: Edge
    prefix: str
    height: int
    is_leaf: bool


class BinaryTrie(Generic[V]):
    """A compressed binary trie (Patricia trie) over fixed-width keys.

    The trie is built at once from a mapping of keys, given as strings of '0' and '1' of the same length, to values.
    Nodes and edges live in flat lists and refer to each other by index, so there are no parent/child object cycles.

    - The structure depends only on the set of keys, never on the order they were given.
    - Every fork has exactly two edges, and no edge has an empty key set below it.
    """

    __slots__ = ('key_bits', 'nodes', 'edges', 'root')

    def __init__(self, entries: Mapping[str, V], key_bits: int) -> None:
        self.key_bits = key_bits
        self.nodes: list[Union[Leaf[V], Fork]] = []
        self.edges: list[Edge] = []
        self.root: Optional[EdgeHandle] = None
        for key in entries:
            assert len(key) == key_bits, f'key {key!r} does not have {key_bits} bits'
        if entries:
            self.root = self._build_edge(entries)

    def _add_node(self, node: Union[Leaf[V], Fork]) -> NodeHandle:
        self.nodes.append(node)
        return NodeHandle(len(self.nodes) - 1)

    def _add_edge(self, edge: Edge) -> EdgeHandle:
        self.edges.append(edge)
        return EdgeHandle(len(self.edges) - 1)

    def _build_edge(self, entries: Mapping[str, V]) -> EdgeHandle:
        assert entries, 'cannot build an edge without keys'
        label = os.path.commonprefix(list(entries))
        stripped = {key[len(label):]: value for key, value in entries.items()}
        return self._add_edge(Edge(label=label, node=self._build_node(stripped)))

    def _build_node(self, entries: Mapping[str, V]) -> NodeHandle:
        if len(entries) == 1:
            value, = entries.values()
            return self._add_node(Leaf(value=value))
        left = {key[1:]: value for key, value in entries.items() if key[0] == '0'}
        right = {key[1:]: value for key, value in entries.items() if key[0] == '1'}
        # after removing the common prefix the keys must diverge on the very next bit
        assert left and right, 'internal inconsistency'
        return self._add_node(Fork(left=self._build_edge(left), right=self._build_edge(right)))

    def iter_dfs(self) -> Iterable[IterDFSNode]:
        """Iterate over all edges in a depth-first search, left before right."""
        if self.root is None:
            return
        yield from self._iter_dfs(self.root, prefix='', depth=0)

    def _iter_dfs(self, handle: EdgeHandle, *, prefix: str, depth: int) -> Iterable[IterDFSNode]:
        edge = self.edges[handle]
        node = self.nodes[edge.node]
        prefix += edge.label
        yield IterDFSNode(edge, prefix, depth, isinstance(node, Leaf))
        if isinstance(node, Fork):
            yield from self._iter_dfs(node.left, prefix=prefix + '0', depth=depth + 1)
            yield from self._iter_dfs(node.right, prefix=prefix + '1', depth=depth + 1)

    def write(self, builder: Builder, value_codec: DictionaryValue[V]) -> None:
        """Write the root edge into the builder, forks become references to new cells."""
        assert self.root is not None, 'an empty trie has no root'
        self._write_edge(builder, self.root, self.key_bits, value_codec)

    def _write_edge(self, builder: Builder, handle: EdgeHandle, n: int, value_codec: DictionaryValue[V]) -> None:
        edge = self.edges[handle]
        write_label(builder, edge.label, n)
        n -= len(edge.label)
        node = self.nodes[edge.node]
        if isinstance(node, Leaf):
            value_codec.serialize(node.value, builder)
            return
        left = Builder()
        self._write_edge(left, node.left, n - 1, value_codec)
        right = Builder()
        self._write_edge(right, node.right, n - 1, value_codec)
        builder.store_ref(left.end_cell())
        builder.store_ref(right.end_cell())


def parse_trie(root: Slice, key_bits: int, value_codec: DictionaryValue[V]) -> dict[int, V]:
    """Read back every (key pattern, value) of a trie whose root edge starts at the given slice."""
    result: dict[int, V] = {}
    _parse_edge(root, key_bits, '', value_codec, result)
    return result


def _parse_edge(cell_slice: Slice, n: int, prefix: str, value_codec: DictionaryValue[V], result: dict[int, V]) -> None:
    label = read_label(cell_slice, n)
    prefix += label
    n -= len(label)
    if n < 0:
        raise ValueError('label is longer than the key')
    if n == 0:
        result[int(prefix, 2)] = value_codec.parse(cell_slice)
        return
    left: Cell = cell_slice.load_ref()
    right: Cell = cell_slice.load_ref()
    _parse_edge(left.begin_parse(), n - 1, prefix + '0', value_codec, result)
    _parse_edge(right.begin_parse(), n - 1, prefix + '1', value_codec, result)
