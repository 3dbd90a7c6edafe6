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
This module holds the encodings of values that take more than a single `store_uint` call.

The general organization is that each submodule `x` deals with a single type and looks like this:

    def encode_x(builder: Builder, value: ValueType, ...config params...) -> None:
        ...

    def decode_x(cell_slice: Slice, ...config params...) -> ValueType:
        ...

`Builder.store_x` and `Slice.load_x` delegate to these functions. An encoder must write all of its bits with a single
call (or check the capacity first), so that a failure never leaves a half-written value in the builder.
"""
