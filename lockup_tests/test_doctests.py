import doctest
import importlib

import pytest

MODULES_WITH_DOCTESTS = [
    'lockup.boc',
    'lockup.boc.bag_of_cells',
    'lockup.boc.bits',
    'lockup.boc.dict.dictionary',
    'lockup.boc.dict.labels',
    'lockup.boc.encoding.address',
    'lockup.boc.encoding.coins',
    'lockup.boc.encoding.tail',
    'lockup.boc.state_init',
    'lockup.collection.content',
    'lockup.collection.messages',
    'lockup.utils.dict',
]


@pytest.mark.parametrize('module_name', MODULES_WITH_DOCTESTS)
def test_doctests(module_name: str) -> None:
    module = importlib.import_module(module_name)
    result = doctest.testmod(module)
    assert result.attempted > 0
    assert result.failed == 0
