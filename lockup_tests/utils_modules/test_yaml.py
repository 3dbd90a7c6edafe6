from pathlib import Path

import pytest

from lockup.utils.yaml import dict_from_extended_yaml, dict_from_yaml, iter_extends_chain


def _get_absolute_filepath(filepath: str) -> Path:
    parent_dir = Path(__file__).parent

    return parent_dir / filepath


def test_dict_from_yaml_invalid_filepath() -> None:
    with pytest.raises(ValueError) as e:
        dict_from_yaml(filepath='fake_file.yml')

    assert str(e.value) == "'fake_file.yml' is not a file"


def test_dict_from_yaml_empty() -> None:
    filepath = _get_absolute_filepath('fixtures/empty.yml')
    result = dict_from_yaml(filepath=filepath)

    assert result == {}


def test_dict_from_yaml_invalid_contents() -> None:
    filepath = _get_absolute_filepath('fixtures/number.yml')

    with pytest.raises(ValueError) as e:
        dict_from_yaml(filepath=filepath)

    assert str(e.value) == f"'{filepath}' cannot be parsed as a dictionary"


def test_dict_from_yaml_valid() -> None:
    filepath = _get_absolute_filepath('fixtures/valid.yml')
    result = dict_from_yaml(filepath=filepath)

    assert result == dict(a=1, b=dict(c=2, d=3))


def test_dict_from_extended_yaml_without_extends() -> None:
    filepath = _get_absolute_filepath('fixtures/valid.yml')
    result = dict_from_extended_yaml(filepath=filepath)

    assert result == dict(a=1, b=dict(c=2, d=3))


def test_dict_from_extended_yaml_valid_extends() -> None:
    filepath = _get_absolute_filepath('fixtures/valid_extends.yml')
    result = dict_from_extended_yaml(filepath=filepath)

    assert result == dict(a=1, b=dict(c=2, d=4), e=5)


def test_dict_from_extended_yaml_recursive_extends() -> None:
    filepath = _get_absolute_filepath('fixtures/self_extends.yml')

    with pytest.raises(ValueError) as e:
        dict_from_extended_yaml(filepath=filepath)

    assert str(e.value) == 'Cannot parse yaml with recursive extensions.'


def test_dict_from_extended_yaml_custom_root() -> None:
    filepath = _get_absolute_filepath('fixtures/custom_settings.yml')
    custom_root = Path(__file__).parent.parent.parent / 'lockup' / 'conf'
    result = dict_from_extended_yaml(filepath=filepath, custom_root=custom_root)

    assert result['NETWORK_NAME'] == 'custom'
    assert result['DEFAULT_WORKCHAIN'] == -1
    assert result['BOUNCEABLE'] is True


def test_dict_from_extended_yaml_indirect_cycle() -> None:
    filepath = _get_absolute_filepath('fixtures/cycle_a.yml')

    with pytest.raises(ValueError) as e:
        dict_from_extended_yaml(filepath=filepath)

    assert str(e.value) == 'Cannot parse yaml with recursive extensions.'


def test_iter_extends_chain_packaged_files() -> None:
    conf_dir = Path(__file__).parent.parent.parent / 'lockup' / 'conf'
    chain = list(iter_extends_chain(conf_dir / 'unittests.yml'))

    assert [path.name for path, _ in chain] == ['unittests.yml', 'testnet.yml', 'mainnet.yml']
    assert all('extends' not in values for _, values in chain)
    assert chain[0][1] == dict(NETWORK_NAME='unittests')


def test_iter_extends_chain_missing_base() -> None:
    filepath = _get_absolute_filepath('fixtures/custom_settings.yml')

    # without a custom root the base is looked up only next to the file
    with pytest.raises(ValueError) as e:
        dict_from_extended_yaml(filepath=filepath)

    assert str(e.value).endswith("mainnet.yml' is not a file")
