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
Building blocks for TVM cells: bit strings, cells, builders and readers, plus the encodings and the dictionary that
are layered on top of them.

>>> from lockup.boc import begin_cell
>>> cell = begin_cell().store_uint(0xCAFE, 16).end_cell()
>>> print(cell)
x{CAFE}
>>> begin_cell().end_cell().hash().hex()
'96a296d224f285c67bee93c30f8a309157f0daa35dc5b87e410b78630a09cfc7'
"""

from lockup.boc.address import Address, FriendlyAddress
from lockup.boc.bits import EMPTY_BITS, BitString
from lockup.boc.builder import Builder, begin_cell
from lockup.boc.cell import EMPTY_CELL, Cell
from lockup.boc.dict import Dictionary, Keys, Values
from lockup.boc.exceptions import (
    BuilderFinalizedError,
    CapacityError,
    CellError,
    CellUnderflowError,
    DuplicateKeyError,
    RangeError,
)
from lockup.boc.slice import Slice
from lockup.boc.state_init import StateInit, contract_address

__all__ = [
    'Address',
    'BitString',
    'Builder',
    'BuilderFinalizedError',
    'CapacityError',
    'Cell',
    'CellError',
    'CellUnderflowError',
    'Dictionary',
    'DuplicateKeyError',
    'EMPTY_BITS',
    'EMPTY_CELL',
    'FriendlyAddress',
    'Keys',
    'RangeError',
    'Slice',
    'StateInit',
    'Values',
    'begin_cell',
    'contract_address',
]
