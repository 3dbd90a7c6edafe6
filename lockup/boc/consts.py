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

# hard limits of an ordinary cell, imposed by the contract runtime
MAX_CELL_BITS: int = 1023
MAX_CELL_REFS: int = 4

# coins are a VarUInteger 16: a 4-bit byte-length followed by up to 15 bytes
COINS_LENGTH_BITS: int = 4
MAX_COINS_BYTES: int = 2 ** COINS_LENGTH_BITS - 1

HASH_BYTES: int = 32
HASH_BITS: int = HASH_BYTES * 8
