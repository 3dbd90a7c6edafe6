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
This module implements the "coins" encoding (VarUInteger 16) used for monetary amounts.

Layout: [len: 4 bits][value: len * 8 bits, big-endian], where len is the minimum number of bytes of the value. Zero is
encoded as a zero length with no value bytes.

>>> from lockup.boc import begin_cell
>>> begin_cell().store_coins(0).end_cell().bits.to_hex()
'0'
>>> begin_cell().store_coins(1).end_cell().bits.to_hex()
'101'
>>> begin_cell().store_coins(1_000_000_000).end_cell().bits.to_hex()
'43B9ACA00'

>>> cs = begin_cell().store_coins(1_000_000_000).store_coins(0).end_cell().begin_parse()
>>> decode_coins(cs)
1000000000
>>> decode_coins(cs)
0
>>> cs.end_parse()

>>> try:
...     begin_cell().store_coins(2 ** 120)
... except ValueError as e:
...     print(*e.args)
coins value needs 16 bytes, max is 15
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from lockup.boc.consts import COINS_LENGTH_BITS, MAX_COINS_BYTES
from lockup.boc.exceptions import RangeError

if TYPE_CHECKING:
    from lockup.boc.builder import Builder
    from lockup.boc.slice import Slice


def encode_coins(builder: Builder, value: int) -> None:
    """ Encodes a non-negative amount with a 4-bit length prefix.

    This module's docstring has more details and examples.
    """
    if value < 0:
        raise RangeError('coins value cannot be negative')
    n_bytes = (value.bit_length() + 7) // 8
    if n_bytes > MAX_COINS_BYTES:
        raise RangeError(f'coins value needs {n_bytes} bytes, max is {MAX_COINS_BYTES}')
    n_bits = n_bytes * 8
    builder.store_uint((n_bytes << n_bits) | value, COINS_LENGTH_BITS + n_bits)


def decode_coins(cell_slice: Slice) -> int:
    """ Decodes an amount written by `encode_coins`.

    This module's docstring has more details and examples.
    """
    n_bytes = cell_slice.load_uint(COINS_LENGTH_BITS)
    return cell_slice.load_uint(n_bytes * 8)
