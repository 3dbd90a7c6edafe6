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

from abc import abstractmethod
from enum import IntFlag
from typing import Any, Optional, Protocol

from lockup.boc import Address, Cell


class SendMode(IntFlag):
    """Flags of an outbound message that tell the contract runtime how to pay for it."""
    NONE = 0
    PAY_GAS_SEPARATELY = 1
    IGNORE_ERRORS = 2
    DESTROY_ACCOUNT_IF_ZERO = 32
    CARRY_ALL_REMAINING_INCOMING_VALUE = 64
    CARRY_ALL_REMAINING_BALANCE = 128


class Sender(Protocol):
    """Whoever signs and pays for a message, e.g. a wallet."""

    address: Optional[Address]


class ContractProvider(Protocol):
    """
    Submits messages to a contract on the network. Signing, fees and delivery are up to the implementation.
    """

    @abstractmethod
    async def internal(self, via: Sender, *, value: int, send_mode: SendMode, body: Cell) -> Any:
        """Send an internal message with `value` nanotons attached from `via` to the contract."""
        raise NotImplementedError
