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
Bodies of the messages sent to the collection contract.

Every operation starts with the same header, followed by its own fields:

    [op: 32][query_id: 64]...

    mint:       [item_index: 64][amount: coins] ref([owner_address] ref([content bytes]))
    batch mint: [items: HashmapE 64 MintValue]

>>> build_deploy_body().is_empty()
True
>>> body = build_mint_body(query_id=0, item_index=5, amount=0, item_owner_address=None, item_content='')
>>> body.bits.to_hex()
'00000001000000000000000000000000000000050'
"""

from enum import IntEnum
from typing import Optional, Sequence

from lockup.boc import Address, Builder, Cell, Dictionary, Keys, begin_cell
from lockup.collection.mint import MintValue, build_item_message
from lockup.collection.types import CollectionMint
from lockup.exception import LimitExceededError

# the contract processes a batch in a single transaction, bigger batches run out of gas
MAX_BATCH_MINT_ITEMS = 250


class Opcode(IntEnum):
    MINT = 1
    BATCH_MINT = 2


def store_header(builder: Builder, op: Opcode, query_id: int) -> None:
    builder.store_uint(op, 32)
    builder.store_uint(query_id, 64)


def build_deploy_body() -> Cell:
    return begin_cell().end_cell()


def build_mint_body(
    *,
    query_id: int,
    item_index: int,
    amount: int,
    item_owner_address: Optional[Address],
    item_content: str,
) -> Cell:
    builder = begin_cell()
    store_header(builder, Opcode.MINT, query_id)
    builder.store_uint(item_index, 64)
    builder.store_coins(amount)
    builder.store_ref(build_item_message(item_owner_address, item_content))
    return builder.end_cell()


def build_batch_mint_dict(nfts: Sequence[CollectionMint]) -> Dictionary[int, CollectionMint]:
    """ Index the items by their index.

    :raises LimitExceededError: if there are more than MAX_BATCH_MINT_ITEMS items, nothing is encoded in this case
    :raises DuplicateKeyError: if two items have the same index
    """
    if len(nfts) > MAX_BATCH_MINT_ITEMS:
        raise LimitExceededError(f'More than {MAX_BATCH_MINT_ITEMS} items: {len(nfts)}')
    dictionary: Dictionary[int, CollectionMint] = Dictionary.empty(Keys.uint(64), MintValue())
    for nft in nfts:
        dictionary.set(nft.index, nft)
    return dictionary


def build_batch_mint_body(*, query_id: int, nfts: Sequence[CollectionMint]) -> Cell:
    dictionary = build_batch_mint_dict(nfts)
    builder = begin_cell()
    store_header(builder, Opcode.BATCH_MINT, query_id)
    builder.store_dict(dictionary)
    return builder.end_cell()
