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
This module implements the tagged address encoding (MsgAddress).

Layout:

    [00] when there is no address (addr_none)
    [10][0: no anycast][workchain: int8][hash: 256 bits] for an internal address (addr_std), 267 bits in total

>>> from lockup.boc import begin_cell
>>> from lockup.boc.address import Address
>>> begin_cell().store_address(None).end_cell().bits.to_hex()
'2_'
>>> address = Address(0, bytes(32))
>>> cell = begin_cell().store_address(address).end_cell()
>>> len(cell.bits)
267
>>> cs = cell.begin_parse()
>>> decode_address(cs) == address
True
>>> cs.end_parse()
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from lockup.boc.consts import HASH_BITS, HASH_BYTES
from lockup.exception import InvalidAddress

if TYPE_CHECKING:
    from lockup.boc.address import Address
    from lockup.boc.builder import Builder
    from lockup.boc.slice import Slice

ADDR_NONE_TAG = 0b00
ADDR_EXTERN_TAG = 0b01
ADDR_STD_TAG = 0b10
ADDR_VAR_TAG = 0b11

ADDR_TAG_BITS = 2
ADDR_STD_BITS = ADDR_TAG_BITS + 1 + 8 + HASH_BITS


def encode_address(builder: Builder, address: Optional[Address]) -> None:
    """ Encodes an optional internal address.

    This module's docstring has more details and examples.
    """
    if address is None:
        builder.store_uint(ADDR_NONE_TAG, ADDR_TAG_BITS)
        return
    # tag, anycast bit (always 0) and workchain packed in the 11 leading bits
    head = (ADDR_STD_TAG << 9) | (address.workchain & 0xff)
    value = (head << HASH_BITS) | int.from_bytes(address.hash, byteorder='big')
    builder.store_uint(value, ADDR_STD_BITS)


def decode_address(cell_slice: Slice) -> Optional[Address]:
    """ Decodes an optional internal address.

    This module's docstring has more details and examples.
    """
    from lockup.boc.address import Address
    tag = cell_slice.load_uint(ADDR_TAG_BITS)
    if tag == ADDR_NONE_TAG:
        return None
    if tag != ADDR_STD_TAG:
        raise InvalidAddress(f'unsupported address tag: {tag:#04b}')
    if cell_slice.load_bit():
        raise InvalidAddress('anycast addresses are not supported')
    workchain = cell_slice.load_int(8)
    return Address(workchain, cell_slice.load_bytes(HASH_BYTES))
