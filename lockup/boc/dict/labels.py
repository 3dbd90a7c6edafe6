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
This module implements the encoding of trie edge labels (HmLabel).

A label is the run of key bits shared by every key below an edge. `n` is the maximum number of bits the label could
have at that point of the trie, it determines the width of the length fields. There are three forms:

    hml_short: [0][1 repeated len times][0][label bits]
    hml_long:  [1][0][len: ceil(log2(n + 1)) bits][label bits]
    hml_same:  [1][1][bit][len: ceil(log2(n + 1)) bits]   (only when every bit of the label is the same)

The shortest form is used, on ties the order of preference is short, long, same.

>>> detect_label_type('', 16), detect_label_type('1', 16), detect_label_type('0' * 16, 16)
('short', 'short', 'same')
>>> detect_label_type('0101101010', 16)
'long'

>>> from lockup.boc import begin_cell
>>> b = begin_cell()
>>> write_label(b, '101', 16)
>>> b.as_bit_string().to_hex()
'75'
>>> read_label(b.end_cell().begin_parse(), 16)
'101'
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Literal

if TYPE_CHECKING:
    from lockup.boc.builder import Builder
    from lockup.boc.slice import Slice

LabelType = Literal['short', 'long', 'same']


def length_field_bits(n: int) -> int:
    """Width of the length field of long and same labels: ceil(log2(n + 1))."""
    return n.bit_length()


def _label_value(label: str) -> int:
    return int(label, 2) if label else 0


def _is_same(label: str) -> bool:
    return len(set(label)) <= 1


def detect_label_type(label: str, n: int) -> LabelType:
    kind: LabelType = 'short'
    kind_length = 2 * len(label) + 2

    long_length = 2 + length_field_bits(n) + len(label)
    if long_length < kind_length:
        kind, kind_length = 'long', long_length

    if _is_same(label):
        same_length = 3 + length_field_bits(n)
        if same_length < kind_length:
            kind, kind_length = 'same', same_length

    return kind


def write_label(builder: Builder, label: str, n: int) -> None:
    """ Write the label in its shortest form.

    This module's docstring has more details and examples.
    """
    size = len(label)
    lb = length_field_bits(n)
    match detect_label_type(label, n):
        case 'short':
            # header 0, unary length (ones closed by a zero), then the bits
            unary = ((1 << size) - 1) << 1
            builder.store_uint((unary << size) | _label_value(label), 1 + size + 1 + size)
        case 'long':
            builder.store_uint((0b10 << lb) | size, 2 + lb)
            builder.store_uint(_label_value(label), size)
        case 'same':
            bit = 1 if label[0] == '1' else 0
            builder.store_uint((((0b11 << 1) | bit) << lb) | size, 3 + lb)


def read_label(cell_slice: Slice, n: int) -> str:
    """ Read a label written by `write_label`, returns the bits as a string of '0' and '1'.

    This module's docstring has more details and examples.
    """
    if not cell_slice.load_bit():
        size = 0
        while cell_slice.load_bit():
            size += 1
        return _format_bits(cell_slice.load_uint(size), size)
    lb = length_field_bits(n)
    if not cell_slice.load_bit():
        size = cell_slice.load_uint(lb)
        return _format_bits(cell_slice.load_uint(size), size)
    bit = '1' if cell_slice.load_bit() else '0'
    size = cell_slice.load_uint(lb)
    return bit * size


def _format_bits(value: int, size: int) -> str:
    if size == 0:
        return ''
    return format(value, f'0{size}b')
