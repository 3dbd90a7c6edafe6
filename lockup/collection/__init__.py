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

from lockup.collection.config import check_staking_params, collection_config_to_cell, royalty_params_to_cell
from lockup.collection.content import (
    build_collection_content_cell,
    decode_off_chain_content,
    encode_common_content,
    encode_off_chain_content,
)
from lockup.collection.contract import NftCollection
from lockup.collection.messages import (
    MAX_BATCH_MINT_ITEMS,
    Opcode,
    build_batch_mint_body,
    build_deploy_body,
    build_mint_body,
)
from lockup.collection.mint import MintValue, mints_from_dictionary
from lockup.collection.provider import ContractProvider, Sender, SendMode
from lockup.collection.types import CollectionConfig, CollectionContent, CollectionMint, RoyaltyParams

__all__ = [
    'MAX_BATCH_MINT_ITEMS',
    'CollectionConfig',
    'CollectionContent',
    'CollectionMint',
    'ContractProvider',
    'MintValue',
    'NftCollection',
    'Opcode',
    'RoyaltyParams',
    'SendMode',
    'Sender',
    'build_batch_mint_body',
    'build_collection_content_cell',
    'build_deploy_body',
    'build_mint_body',
    'check_staking_params',
    'collection_config_to_cell',
    'decode_off_chain_content',
    'encode_common_content',
    'encode_off_chain_content',
    'mints_from_dictionary',
    'royalty_params_to_cell',
]
