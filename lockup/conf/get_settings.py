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

import os
from typing import NamedTuple, Optional

from structlog import get_logger

from lockup import conf
from lockup.conf.settings import LockupSettings as Settings
from lockup.conf.utils import load_module_settings, load_yaml_settings

logger = get_logger()


class _SettingsMetadata(NamedTuple):
    source: str
    is_yaml: bool
    settings: Settings


_settings_singleton: Optional[_SettingsMetadata] = None


def get_global_settings() -> Settings:
    return LockupSettings()


def LockupSettings() -> Settings:
    """
    Returns the process-wide settings.

    Tries to get them from a python module in the 'LOCKUP_CONFIG_FILE' env var, which is deprecated. If not set, they
    are read from the yaml filepath in the 'LOCKUP_CONFIG_YAML' env var, which defaults to the mainnet file.
    """
    settings_module_filepath = os.environ.get('LOCKUP_CONFIG_FILE')
    if settings_module_filepath is not None:
        return _load_settings_singleton(settings_module_filepath, is_yaml=False)

    settings_yaml_filepath = os.environ.get('LOCKUP_CONFIG_YAML', conf.MAINNET_SETTINGS_FILEPATH)
    return _load_settings_singleton(settings_yaml_filepath, is_yaml=True)


def get_settings_source() -> str:
    """ Returns the path of the settings module or yaml file that was loaded.

    XXX: Will raise an assertion error if LockupSettings() wasn't used before.
    """
    assert _settings_singleton is not None, 'LockupSettings() not called before'
    return _settings_singleton.source


def _load_settings_singleton(source: str, *, is_yaml: bool) -> Settings:
    global _settings_singleton

    if _settings_singleton is not None:
        if _settings_singleton.is_yaml != is_yaml:
            raise Exception('loading config twice with a different file type')
        if _settings_singleton.source != source:
            raise Exception('loading config twice with a different file')

        return _settings_singleton.settings

    log = logger.new(source=source)
    if is_yaml:
        settings = load_yaml_settings(Settings, source)
    else:
        log.warn(
            "Setting a config module via the 'LOCKUP_CONFIG_FILE' env var is deprecated. "
            "Use the 'LOCKUP_CONFIG_YAML' env var to set a yaml filepath instead."
        )
        settings = load_module_settings(Settings, source)
    log.debug('settings loaded', network=settings.NETWORK_NAME)

    _settings_singleton = _SettingsMetadata(source=source, is_yaml=is_yaml, settings=settings)
    return _settings_singleton.settings
