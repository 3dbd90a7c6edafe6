import os
from pathlib import Path
from unittest import TestCase
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from lockup.conf import MAINNET_SETTINGS_FILEPATH, TESTNET_SETTINGS_FILEPATH, UNITTESTS_SETTINGS_FILEPATH
from lockup.conf.get_settings import LockupSettings, get_settings_source
from lockup.conf.settings import LockupSettings as Settings

FIXTURES = Path(__file__).parent.parent / 'utils_modules' / 'fixtures'


@pytest.mark.parametrize('filepath', [
    MAINNET_SETTINGS_FILEPATH,
    TESTNET_SETTINGS_FILEPATH,
    UNITTESTS_SETTINGS_FILEPATH,
])
def test_packaged_settings(filepath: str) -> None:
    settings = Settings.from_yaml(filepath=filepath)
    assert settings.DEFAULT_WORKCHAIN == 0
    assert settings.BOUNCEABLE
    assert settings.URL_SAFE_ADDRESSES


def test_testnet_extends_mainnet() -> None:
    mainnet = Settings.from_yaml(filepath=MAINNET_SETTINGS_FILEPATH)
    testnet = Settings.from_yaml(filepath=TESTNET_SETTINGS_FILEPATH)
    assert mainnet.NETWORK_NAME == 'mainnet'
    assert not mainnet.TESTNET
    assert testnet.NETWORK_NAME == 'testnet'
    assert testnet.TESTNET


def test_custom_settings_extend_packaged_file() -> None:
    settings = Settings.from_yaml(filepath=str(FIXTURES / 'custom_settings.yml'))
    assert settings.NETWORK_NAME == 'custom'
    assert settings.DEFAULT_WORKCHAIN == -1


def test_unknown_field_is_rejected() -> None:
    with pytest.raises(ValidationError):
        Settings.from_yaml(filepath=str(FIXTURES / 'invalid_settings.yml'))


def test_invalid_workchain() -> None:
    with pytest.raises(ValidationError):
        Settings(NETWORK_NAME='x', DEFAULT_WORKCHAIN=128)


def test_settings_are_frozen() -> None:
    settings = Settings(NETWORK_NAME='x')
    with pytest.raises(ValidationError):
        settings.NETWORK_NAME = 'y'  # type: ignore[misc]


class SettingsSingletonTestCase(TestCase):
    def setUp(self) -> None:
        singleton_patcher = patch('lockup.conf.get_settings._settings_singleton', None)
        singleton_patcher.start()
        self.addCleanup(singleton_patcher.stop)

    def test_load_from_yaml_env_var(self) -> None:
        filepath = str(FIXTURES / 'custom_settings.yml')
        with patch.dict(os.environ, {'LOCKUP_CONFIG_YAML': filepath}):
            os.environ.pop('LOCKUP_CONFIG_FILE', None)
            settings = LockupSettings()
        self.assertEqual(settings.NETWORK_NAME, 'custom')
        self.assertEqual(get_settings_source(), filepath)
        # the same instance is returned afterwards
        with patch.dict(os.environ, {'LOCKUP_CONFIG_YAML': filepath}):
            self.assertIs(LockupSettings(), settings)

    def test_default_is_mainnet(self) -> None:
        with patch.dict(os.environ, {}):
            os.environ.pop('LOCKUP_CONFIG_YAML', None)
            os.environ.pop('LOCKUP_CONFIG_FILE', None)
            settings = LockupSettings()
        self.assertEqual(settings.NETWORK_NAME, 'mainnet')
        self.assertEqual(get_settings_source(), MAINNET_SETTINGS_FILEPATH)

    def test_load_from_module_env_var(self) -> None:
        with patch.dict(os.environ, {'LOCKUP_CONFIG_FILE': 'lockup_tests.conf.settings_module'}):
            settings = LockupSettings()
        self.assertEqual(settings.NETWORK_NAME, 'from-module')
        self.assertEqual(settings.DEFAULT_WORKCHAIN, -1)

    def test_loading_twice_from_different_sources(self) -> None:
        with patch.dict(os.environ, {'LOCKUP_CONFIG_YAML': MAINNET_SETTINGS_FILEPATH}):
            os.environ.pop('LOCKUP_CONFIG_FILE', None)
            LockupSettings()
        with patch.dict(os.environ, {'LOCKUP_CONFIG_YAML': TESTNET_SETTINGS_FILEPATH}):
            os.environ.pop('LOCKUP_CONFIG_FILE', None)
            with self.assertRaises(Exception):
                LockupSettings()
        with patch.dict(os.environ, {'LOCKUP_CONFIG_FILE': 'lockup_tests.conf.settings_module'}):
            with self.assertRaises(Exception):
                LockupSettings()
