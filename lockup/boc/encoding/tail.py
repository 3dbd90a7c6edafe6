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

r"""
This module implements "tail" (also known as snake) encoding of byte sequences.

The bytes fill whatever whole bytes are still available in the current cell, if anything is left it continues in a
new cell that is stored as the last reference, and so on. There is no length prefix, the data ends with the cell chain.

>>> from lockup.boc import begin_cell
>>> cell = begin_cell().store_uint(1, 8).store_string_tail('ipfs://foo').end_cell()
>>> cell.bits.to_bytes()
b'\x01ipfs://foo'
>>> len(cell.refs)
0

>>> long_text = 'x' * 300
>>> cell = begin_cell().store_string_tail(long_text).end_cell()
>>> len(cell.bits) // 8, len(cell.refs[0].bits) // 8, len(cell.refs[0].refs[0].bits) // 8
(127, 127, 46)
>>> decode_string_tail(cell.begin_parse()) == long_text
True
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from lockup.boc.consts import MAX_CELL_BITS
from lockup.boc.exceptions import CapacityError

if TYPE_CHECKING:
    from lockup.boc.builder import Builder
    from lockup.boc.cell import Cell
    from lockup.boc.slice import Slice

# whole bytes that fit in a fresh cell
CELL_BYTES: int = MAX_CELL_BITS // 8


def encode_bytes_tail(builder: Builder, data: bytes) -> None:
    """ Encodes a byte sequence filling the builder and continuing in a chain of referenced cells.

    This module's docstring has more details and examples.
    """
    from lockup.boc.builder import Builder
    if not data:
        return
    fit = builder.available_bits // 8
    head, rest = data[:fit], data[fit:]
    if rest and builder.available_refs < 1:
        raise CapacityError('no reference available to continue the tail')

    # the chain is built from its end, so every cell already knows its continuation
    tail: Optional[Cell] = None
    chunks = [rest[i:i + CELL_BYTES] for i in range(0, len(rest), CELL_BYTES)]
    for chunk in reversed(chunks):
        chunk_builder = Builder()
        chunk_builder.store_bytes(chunk)
        if tail is not None:
            chunk_builder.store_ref(tail)
        tail = chunk_builder.end_cell()

    builder.store_bytes(head)
    if tail is not None:
        builder.store_ref(tail)


def encode_string_tail(builder: Builder, text: str) -> None:
    """ Encodes a string as utf-8 using tail encoding.
    """
    assert isinstance(text, str)
    encode_bytes_tail(builder, text.encode('utf-8'))


def decode_bytes_tail(cell_slice: Slice) -> bytes:
    """ Reads all the remaining bytes of the slice and of the chain that follows its last reference.

    This module's docstring has more details and examples.
    """
    parts: list[bytes] = []
    current = cell_slice
    while True:
        if current.remaining_bits % 8 != 0:
            raise ValueError('tail data is not byte aligned')
        parts.append(current.load_bytes(current.remaining_bits // 8))
        if current.remaining_refs == 0:
            break
        if current.remaining_refs > 1:
            raise ValueError('tail data cannot have more than one continuation')
        current = current.load_ref().begin_parse()
    return b''.join(parts)


def decode_string_tail(cell_slice: Slice) -> str:
    """ Decodes a utf-8 string written with tail encoding.
    """
    return decode_bytes_tail(cell_slice).decode('utf-8')
