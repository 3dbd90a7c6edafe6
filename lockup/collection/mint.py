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
Encoding of the items of a mint message.

An item is sent to the collection as the amount forwarded to the new item, followed by a reference to the message
that initializes the item:

    [amount: coins] ref([owner_address] ref([content bytes]))

The content is stored as raw bytes in a single cell, so it must fit in 127 bytes.
"""

from dataclasses import replace
from typing import Optional

from typing_extensions import override

from lockup.boc import Address, Builder, Cell, Dictionary, Slice, begin_cell
from lockup.boc.dict import DictionaryValue
from lockup.collection.types import CollectionMint


def build_item_message(owner_address: Optional[Address], content: str) -> Cell:
    content_cell = begin_cell().store_bytes(content.encode('utf-8')).end_cell()
    return (
        begin_cell()
        .store_address(owner_address)
        .store_ref(content_cell)
        .end_cell()
    )


class MintValue(DictionaryValue[CollectionMint]):
    """Dictionary value for the items of a batch mint, the item index is the dictionary key."""

    __slots__ = ()

    @override
    def serialize(self, value: CollectionMint, builder: Builder, /) -> None:
        message = build_item_message(value.owner_address, value.content)
        builder.ensure_capacity(refs=1)
        builder.store_coins(value.amount)
        builder.store_ref(message)

    @override
    def parse(self, cell_slice: Slice, /) -> CollectionMint:
        """Read an item back, the index is unknown at this point and is set to 0.

        Use `mints_from_dictionary` to get the items with their actual indexes.
        """
        amount = cell_slice.load_coins()
        message = cell_slice.load_ref().begin_parse()
        owner_address = message.load_address()
        content = message.load_ref().begin_parse().load_string()
        message.end_parse()
        return CollectionMint(index=0, owner_address=owner_address, content=content, amount=amount)


def mints_from_dictionary(dictionary: Dictionary[int, CollectionMint]) -> list[CollectionMint]:
    return [replace(mint, index=index) for index, mint in dictionary.items()]
