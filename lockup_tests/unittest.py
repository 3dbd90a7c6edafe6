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

import secrets
import unittest
from random import Random
from typing import Optional

from structlog import get_logger

from lockup.boc import Address, Cell, Dictionary, Keys, Values, begin_cell
from lockup.collection import CollectionConfig, CollectionContent, RoyaltyParams, build_collection_content_cell
from lockup.conf.get_settings import get_global_settings

logger = get_logger()


class TestCase(unittest.TestCase):
    seed_config: Optional[int] = None

    def setUp(self) -> None:
        self.log = logger.new()
        self.seed = secrets.randbits(64) if self.seed_config is None else self.seed_config
        self.log.info('set seed', seed=self.seed)
        self.rng = Random(self.seed)
        self._settings = get_global_settings()

    def random_address(self, workchain: int = 0) -> Address:
        return Address(workchain, self.rng.randbytes(32))

    def assertCellEqual(self, first: Cell, second: Cell) -> None:
        self.assertEqual(first.hash(), second.hash(), f'\n{first}\n!=\n{second}')

    def assertCellNotEqual(self, first: Cell, second: Cell) -> None:
        self.assertNotEqual(first.hash(), second.hash())


def make_staking_params(entries: Optional[dict[int, int]] = None) -> Dictionary[int, int]:
    if entries is None:
        entries = {30: 100, 90: 350, 180: 800}
    staking_params: Dictionary[int, int] = Dictionary.empty(Keys.uint(16), Values.uint(16))
    for key, value in entries.items():
        staking_params.set(key, value)
    return staking_params


def make_collection_config(royalty_address: Optional[Address] = None, **kwargs: object) -> CollectionConfig:
    """A valid config, any field can be replaced through kwargs."""
    if royalty_address is None:
        royalty_address = Address(0, bytes(range(32)))
    fields: dict[str, object] = dict(
        next_item_index=0,
        nft_item_code=begin_cell().store_uint(0xC0DE, 16).end_cell(),
        collection_content=build_collection_content_cell(CollectionContent(
            collection_content='https://example.com/collection.json',
            common_content='https://example.com/items/',
        )),
        royalty_params=RoyaltyParams(
            tvl_factor=1,
            tvl_base=100,
            rewards_factor=5,
            rewards_base=100,
            royalty_address=royalty_address,
        ),
        staking_params=make_staking_params(),
        withdrawal_factor_ton=10,
        withdrawal_factor_jetton=20,
    )
    fields.update(kwargs)
    return CollectionConfig(**fields)  # type: ignore[arg-type]
