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

from copy import deepcopy
from typing import Any, TypeVar

K = TypeVar('K')


def deep_merge(first_dict: dict[K, Any], second_dict: dict[K, Any]) -> dict[K, Any]:
    """
    Recursively merge two dicts into a new one, values from the second win. Neither input is modified.

    >>> base = dict(NETWORK_NAME='mainnet', flags=dict(a=1, b=2))
    >>> override = dict(NETWORK_NAME='testnet', flags=dict(b=3))
    >>> deep_merge(base, override) == dict(NETWORK_NAME='testnet', flags=dict(a=1, b=3))
    True
    >>> base == dict(NETWORK_NAME='mainnet', flags=dict(a=1, b=2))
    True
    """
    merged = deepcopy(first_dict)

    def merge_into(target: dict[K, Any], source: dict[K, Any]) -> dict[K, Any]:
        for key, value in source.items():
            if isinstance(target.get(key), dict) and isinstance(value, dict):
                merge_into(target[key], value)
            else:
                target[key] = deepcopy(value)
        return target

    return merge_into(merged, second_dict)
