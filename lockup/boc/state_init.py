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
Initial state of a contract and the derivation of its address.

The address of a contract is not chosen, it's the representation hash of the cell holding its initial code and data:

    [split_depth: 0][special: 0][code: 1][data: 1][library: 0] + ref(code) + ref(data)

>>> from lockup.boc import begin_cell
>>> init = StateInit(code=begin_cell().store_uint(1, 8).end_cell(), data=begin_cell().end_cell())
>>> cell = init.to_cell()
>>> cell.bits.to_hex(), len(cell.refs)
('34_', 2)
>>> contract_address(0, init) == contract_address(0, init)
True
>>> contract_address(0, init).hash == cell.hash()
True
"""

from dataclasses import dataclass

from lockup.boc.address import Address
from lockup.boc.builder import Builder
from lockup.boc.cell import Cell


@dataclass(frozen=True, slots=True)
class StateInit:
    code: Cell
    data: Cell

    def store(self, builder: Builder) -> None:
        builder.ensure_capacity(bits=5, refs=2)
        builder.store_bit(False)  # split_depth
        builder.store_bit(False)  # special
        builder.store_maybe_ref(self.code)
        builder.store_maybe_ref(self.data)
        builder.store_bit(False)  # library

    def to_cell(self) -> Cell:
        builder = Builder()
        self.store(builder)
        return builder.end_cell()


def contract_address(workchain: int, init: StateInit) -> Address:
    """ Derive the address a contract will have once deployed with the given initial state.

    This is a pure function of its inputs, any change to the code or data cells (or the workchain) changes it.
    """
    return Address(workchain, init.to_cell().hash())
