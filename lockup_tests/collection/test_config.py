from dataclasses import replace

from lockup.boc import Address, Dictionary, Keys, RangeError, StateInit, Values, begin_cell, contract_address
from lockup.collection import CollectionConfig, RoyaltyParams, collection_config_to_cell, royalty_params_to_cell
from lockup_tests import unittest
from lockup_tests.unittest import make_collection_config, make_staking_params

CODE = begin_cell().store_uint(0xC0FFEE, 24).end_cell()


class CollectionConfigTestCase(unittest.TestCase):
    def test_layout(self) -> None:
        config = make_collection_config()
        cell = collection_config_to_cell(config)
        self.assertEqual(len(cell.refs), 4)

        cs = cell.begin_parse()
        self.assertEqual(cs.load_uint(64), config.next_item_index)
        self.assertEqual(cs.load_ref(), config.nft_item_code)
        self.assertEqual(cs.load_ref(), config.collection_content)
        self.assertEqual(cs.load_ref(), royalty_params_to_cell(config.royalty_params))
        staking_params = Dictionary.load(cs, Keys.uint(16), Values.uint(16))
        self.assertEqual(dict(staking_params.items()), dict(config.staking_params.items()))
        self.assertEqual(cs.load_uint(2), 0)
        self.assertEqual(cs.load_uint(16), config.withdrawal_factor_ton)
        self.assertEqual(cs.load_uint(16), config.withdrawal_factor_jetton)
        self.assertEqual(cs.load_coins(), 0)
        self.assertEqual(cs.load_coins(), 0)
        cs.end_parse()

    def test_royalty_params(self) -> None:
        address = self.random_address()
        params = RoyaltyParams(tvl_factor=1, tvl_base=2, rewards_factor=3, rewards_base=4, royalty_address=address)
        cs = royalty_params_to_cell(params).begin_parse()
        self.assertEqual([cs.load_uint(32) for _ in range(4)], [1, 2, 3, 4])
        self.assertEqual(cs.load_address(), address)
        cs.end_parse()

        with self.assertRaises(RangeError):
            royalty_params_to_cell(replace(params, tvl_base=1 << 32))

    def test_empty_staking_params(self) -> None:
        config = make_collection_config(staking_params=make_staking_params({}))
        cell = collection_config_to_cell(config)
        # no ref for the staking params, they are a single 0 bit
        self.assertEqual(len(cell.refs), 3)
        self.assertEqual(len(cell.bits), 64 + 1 + 2 + 16 + 16 + 4 + 4)

    def test_next_item_index_only_changes_the_first_bits(self) -> None:
        base = make_collection_config(next_item_index=0)
        base_cell = collection_config_to_cell(base)
        for next_item_index in (1, 250, (1 << 64) - 1):
            cell = collection_config_to_cell(replace(base, next_item_index=next_item_index))
            self.assertCellNotEqual(cell, base_cell)
            self.assertEqual(cell.bits.substring(0, 64).value, next_item_index)
            rest = len(cell.bits) - 64
            self.assertEqual(cell.bits.substring(64, rest), base_cell.bits.substring(64, rest))
            self.assertEqual(cell.refs, base_cell.refs)

        with self.assertRaises(RangeError):
            collection_config_to_cell(replace(base, next_item_index=1 << 64))

    def test_address_derivation_is_deterministic(self) -> None:
        first = contract_address(0, StateInit(code=CODE, data=collection_config_to_cell(make_collection_config())))
        second = contract_address(0, StateInit(code=CODE, data=collection_config_to_cell(make_collection_config())))
        self.assertEqual(first, second)

    def test_address_derivation_depends_on_every_field(self) -> None:
        base = make_collection_config()

        def derive(config: CollectionConfig) -> Address:
            return contract_address(0, StateInit(code=CODE, data=collection_config_to_cell(config)))

        base_address = derive(base)
        variations = [
            replace(base, next_item_index=1),
            replace(base, nft_item_code=begin_cell().store_uint(1, 1).end_cell()),
            replace(base, collection_content=begin_cell().store_uint(2, 2).end_cell()),
            replace(base, royalty_params=replace(base.royalty_params, tvl_factor=2)),
            replace(base, royalty_params=replace(base.royalty_params, tvl_base=101)),
            replace(base, royalty_params=replace(base.royalty_params, rewards_factor=6)),
            replace(base, royalty_params=replace(base.royalty_params, rewards_base=99)),
            replace(base, royalty_params=replace(base.royalty_params, royalty_address=self.random_address())),
            replace(base, royalty_params=replace(base.royalty_params, royalty_address=None)),
            replace(base, staking_params=make_staking_params({30: 100})),
            replace(base, staking_params=make_staking_params({30: 101, 90: 350, 180: 800})),
            replace(base, withdrawal_factor_ton=11),
            replace(base, withdrawal_factor_jetton=21),
        ]
        addresses = [derive(config) for config in variations]
        for address in addresses:
            self.assertNotEqual(address, base_address)
        self.assertEqual(len(set(addresses)), len(addresses))

        self.assertNotEqual(contract_address(-1, StateInit(code=CODE, data=collection_config_to_cell(base))),
                            base_address)

    def test_staking_params_must_be_uint16(self) -> None:
        wrong_key: Dictionary[int, int] = Dictionary.empty(Keys.uint(32), Values.uint(16))
        wrong_key.set(70000, 5)
        wrong_value: Dictionary[int, int] = Dictionary.empty(Keys.uint(16), Values.uint(64))
        wrong_value.set(30, 1 << 40)
        signed: Dictionary[int, int] = Dictionary.empty(Keys.int(16), Values.uint(16))
        signed.set(30, 100)
        wide_and_empty: Dictionary[int, int] = Dictionary.empty(Keys.uint(32), Values.uint(64))

        for staking_params in [wrong_key, wrong_value, signed, wide_and_empty]:
            with self.assertRaises(RangeError):
                collection_config_to_cell(make_collection_config(staking_params=staking_params))

        empty = make_staking_params({})
        cell = collection_config_to_cell(make_collection_config(staking_params=empty))
        self.assertEqual(len(cell.refs), 3)
