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

from lockup.exception import LockupError


class CellError(LockupError):
    """Base class for errors when building or reading cells."""


class RangeError(CellError, ValueError):
    """Value does not fit the declared bit width."""


class CapacityError(CellError):
    """A cell would exceed its 1023 bits or 4 references."""


class DuplicateKeyError(CellError):
    """Key is already present in the dictionary."""


class CellUnderflowError(CellError):
    """Tried to read more bits or references than the cell holds."""


class BuilderFinalizedError(CellError):
    """The builder was already turned into a cell and cannot be used anymore."""
