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
Metadata content of the collection and its items.

Off-chain content is a tag byte followed by the uri, with the bytes that don't fit continuing in a chain of cells:

    [0x01][uri bytes...] -> ref[uri bytes...] -> ...

>>> cell = encode_off_chain_content('')
>>> len(cell.bits), len(cell.refs)
(8, 0)
>>> decode_off_chain_content(cell)
''
>>> decode_off_chain_content(encode_off_chain_content('https://example.com/collection.json'))
'https://example.com/collection.json'
"""

from lockup.boc import Cell, begin_cell
from lockup.collection.types import CollectionContent

OFF_CHAIN_CONTENT_PREFIX = 0x01


def encode_off_chain_content(uri: str) -> Cell:
    return (
        begin_cell()
        .store_uint(OFF_CHAIN_CONTENT_PREFIX, 8)
        .store_string_tail(uri)
        .end_cell()
    )


def decode_off_chain_content(cell: Cell) -> str:
    cell_slice = cell.begin_parse()
    prefix = cell_slice.load_uint(8)
    if prefix != OFF_CHAIN_CONTENT_PREFIX:
        raise ValueError(f'not off-chain content, prefix is {prefix:#04x}')
    return cell_slice.load_string_tail()


def encode_common_content(text: str) -> Cell:
    """The common content has no prefix, it's the plain utf-8 text."""
    return begin_cell().store_string_tail(text).end_cell()


def build_collection_content_cell(content: CollectionContent) -> Cell:
    """Content of the collection itself followed by the content shared by all items, each in its own reference."""
    return (
        begin_cell()
        .store_ref(encode_off_chain_content(content.collection_content))
        .store_ref(encode_common_content(content.common_content))
        .end_cell()
    )
