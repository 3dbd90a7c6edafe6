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

from dataclasses import dataclass
from typing import Optional

from lockup.boc import Address, Cell, Dictionary


@dataclass(slots=True, frozen=True, kw_only=True)
class RoyaltyParams:
    """Parameters of the royalty taken from the value locked (tvl) and from the staking rewards.

    Each fee is `factor / base`, all four numbers are 32-bit unsigned integers.
    """
    tvl_factor: int
    tvl_base: int
    rewards_factor: int
    rewards_base: int
    royalty_address: Optional[Address]


@dataclass(slots=True, frozen=True, kw_only=True)
class CollectionConfig:
    """Initial persistent data of a collection contract.

    `staking_params` maps a lockup period to its reward factor, both as 16-bit unsigned integers.
    """
    next_item_index: int
    nft_item_code: Cell
    collection_content: Cell
    royalty_params: RoyaltyParams
    staking_params: Dictionary[int, int]
    withdrawal_factor_ton: int
    withdrawal_factor_jetton: int


@dataclass(slots=True, frozen=True, kw_only=True)
class CollectionContent:
    # uri of the off-chain collection metadata
    collection_content: str
    # prefix shared by the content of every item
    common_content: str


@dataclass(slots=True, frozen=True, kw_only=True)
class CollectionMint:
    """One item of a batch mint."""
    index: int
    owner_address: Optional[Address]
    content: str
    amount: int
