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
Encoders for the deployment state and the operation messages of a lockup NFT collection contract.

The wire format is a tree of TVM cells, `lockup.boc` has the cell building blocks and `lockup.collection` the layouts
specific to the collection.
"""

from lockup.version import __version__

__all__ = [
    '__version__',
]
