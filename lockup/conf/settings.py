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

from pydantic import field_validator

from lockup.utils import pydantic


class LockupSettings(pydantic.BaseModel):
    # Name of the network: "mainnet", "testnet", "unittests", ...
    NETWORK_NAME: str

    # Workchain used when deriving the address of a new collection and no workchain is given
    DEFAULT_WORKCHAIN: int = 0

    # Whether user-friendly addresses are rendered with the test-only flag
    TESTNET: bool = False

    # Whether user-friendly addresses are rendered as bounceable when not told otherwise
    BOUNCEABLE: bool = True

    # Whether user-friendly addresses use the url-safe base64 alphabet ('-' and '_' instead of '+' and '/')
    URL_SAFE_ADDRESSES: bool = True

    @field_validator('DEFAULT_WORKCHAIN')
    @classmethod
    def _check_workchain(cls, workchain: int) -> int:
        if not -128 <= workchain <= 127:
            raise ValueError('DEFAULT_WORKCHAIN must be a signed 8-bit integer')
        return workchain

    @classmethod
    def from_yaml(cls, *, filepath: str) -> 'LockupSettings':
        """Takes a filepath to a yaml file and returns a validated LockupSettings instance."""
        from lockup.conf.utils import load_yaml_settings
        return load_yaml_settings(cls, filepath)
