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
Serialization of the initial data of a collection contract.

Layout:

    [next_item_index: 64]
    ref(nft_item_code)
    ref(collection_content)
    ref([tvl_factor: 32][tvl_base: 32][rewards_factor: 32][rewards_base: 32][royalty_address])
    [staking_params: HashmapE 16 uint16]
    [reserved: 2 bits, always 0]
    [withdrawal_factor_ton: 16]
    [withdrawal_factor_jetton: 16]
    [coins: 0][coins: 0]

The reserved bits and the two trailing amounts are counters kept by the contract, they are zero at deploy.
"""

from lockup.boc import Builder, Cell, Dictionary, RangeError, begin_cell
from lockup.boc.dict import UintKey, UintValue
from lockup.collection.types import CollectionConfig, RoyaltyParams

RESERVED_BITS = 2
STAKING_PARAMS_BITS = 16


def store_royalty_params(builder: Builder, params: RoyaltyParams) -> None:
    builder.store_uint(params.tvl_factor, 32)
    builder.store_uint(params.tvl_base, 32)
    builder.store_uint(params.rewards_factor, 32)
    builder.store_uint(params.rewards_base, 32)
    builder.store_address(params.royalty_address)


def royalty_params_to_cell(params: RoyaltyParams) -> Cell:
    builder = begin_cell()
    store_royalty_params(builder, params)
    return builder.end_cell()


def check_staking_params(staking_params: Dictionary[int, int]) -> None:
    """Raise RangeError unless both the keys and the values are 16-bit unsigned integers."""
    key_codec = staking_params.key_codec
    if not isinstance(key_codec, UintKey) or key_codec.bits != STAKING_PARAMS_BITS:
        raise RangeError(f'staking params keys must be uint{STAKING_PARAMS_BITS}, got {key_codec!r}')
    value_codec = staking_params.value_codec
    if not isinstance(value_codec, UintValue) or value_codec.bits != STAKING_PARAMS_BITS:
        raise RangeError(f'staking params values must be uint{STAKING_PARAMS_BITS}, got {value_codec!r}')


def collection_config_to_cell(config: CollectionConfig) -> Cell:
    check_staking_params(config.staking_params)
    return (
        begin_cell()
        .store_uint(config.next_item_index, 64)
        .store_ref(config.nft_item_code)
        .store_ref(config.collection_content)
        .store_ref(royalty_params_to_cell(config.royalty_params))
        .store_dict(config.staking_params)
        .store_uint(0, RESERVED_BITS)
        .store_uint(config.withdrawal_factor_ton, 16)
        .store_uint(config.withdrawal_factor_jetton, 16)
        .store_coins(0)
        .store_coins(0)
        .end_cell()
    )
